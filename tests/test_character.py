"""
figfont test suite
character and codetag tests
"""

import unittest

from figfont import (
    parse_header, parse_character, parse_character_with_codetag,
    parse_codetag, decode_codetag, FIGcharacter, Grapheme,
    InvalidCharacter, InvalidHeader, NotEnoughData,
)
from .base import BaseTester


class TestCharacter(BaseTester):
    """Test parsing FIGcharacter records."""

    def header(self, height, hardblank='$'):
        line = f'flf2a{hardblank} {height} {height} 8 0\n'
        return parse_header(self.reader(line.encode('latin-1')))

    def test_single_row(self):
        """One row, one endmark."""
        char = parse_character(self.reader(b'X@\n'), self.header(1))
        self.assertEqual(char.height, 1)
        self.assertEqual(char.width, 1)
        self.assertEqual(char.rows, ((Grapheme('X'),),))

    def test_single_row_keeps_second_endmark(self):
        """With one row, only a single endmark is removed."""
        char = parse_character(self.reader(b'X@@\n'), self.header(1))
        self.assertEqual(char.as_text(), 'X@')

    def test_three_rows(self):
        """Last row has a doubled endmark."""
        char = parse_character(self.reader(b'XX@\nYY@\nZZ@@\n'), self.header(3))
        self.assertEqual(char.height, 3)
        self.assertEqual(char.width, 2)
        self.assertEqual(char.as_text(), 'XX\nYY\nZZ')

    def test_last_record_without_newline(self):
        """The final row of a file need not end in a newline."""
        char = parse_character(self.reader(b'XX@\nZZ@@'), self.header(2))
        self.assertEqual(char.as_text(), 'XX\nZZ')

    def test_inner_row_needs_newline(self):
        """Only the final row may be cut off."""
        with self.assertRaises(NotEnoughData):
            parse_character(self.reader(b'XX@'), self.header(2))

    def test_uneven_rows(self):
        """Rows may differ in length."""
        char = parse_character(self.reader(b' _ @\n|@\n@@\n'), self.header(3))
        self.assertEqual([len(_row) for _row in char.rows], [3, 1, 0])
        self.assertEqual(char.width, 3)

    def test_endmark_from_first_row(self):
        """Any byte can be the endmark."""
        char = parse_character(self.reader(b'a#\nb#\nc##\n'), self.header(3))
        self.assertEqual(char.as_text(), 'a\nb\nc')

    def test_endmark_in_content(self):
        """Only trailing endmarks are removed."""
        char = parse_character(self.reader(b'@@@\n@@@@\n'), self.header(2))
        self.assertEqual(char.as_text(), '@@\n@@')

    def test_hardblank(self):
        """Hardblanks become blank cells."""
        char = parse_character(self.reader(b'$ $@\n$$@@\n'), self.header(2))
        self.assertEqual(
            char.rows[0], (Grapheme.blank(), Grapheme(' '), Grapheme.blank())
        )
        self.assertEqual(char.as_text(hardblank='$'), '$ $\n$$')
        self.assertEqual(char.as_text(), '   \n  ')

    def test_mismatched_delimiter(self):
        """All rows end with the endmark of the first row."""
        with self.assertRaises(InvalidCharacter):
            parse_character(self.reader(b'XX@\nYY#\nZZ@@\n'), self.header(3))

    def test_single_endmark_on_last_row(self):
        """Last row of a multi-row character needs two endmarks."""
        with self.assertRaises(InvalidCharacter):
            parse_character(self.reader(b'XX@\nYY@\nZZ@\n'), self.header(3))

    def test_empty_first_row(self):
        """First row must not be empty."""
        with self.assertRaises(InvalidCharacter):
            parse_character(self.reader(b'\n'), self.header(1))
        with self.assertRaises(InvalidCharacter):
            parse_character(self.reader(b'\nYY@@\n'), self.header(2))

    def test_empty_middle_row(self):
        """Empty rows are errors, not empty glyph rows."""
        with self.assertRaises(InvalidCharacter):
            parse_character(self.reader(b'XX@\n\nZZ@@\n'), self.header(3))

    def test_truncated(self):
        """Stream ends before the record is complete."""
        with self.assertRaises(NotEnoughData):
            parse_character(self.reader(b'XX@\nYY@\n'), self.header(3))

    def test_segmentation_error(self):
        """Undecodable row content is reported against the header."""
        with self.assertRaises(InvalidHeader):
            parse_character(self.reader(b'\xff@\n'), self.header(1))
        char = parse_character(
            self.reader(b'\xc4@\n'), self.header(1), encoding='latin-1'
        )
        self.assertEqual(char.as_text(), 'Ä')

    def test_consecutive(self):
        """Records are read one after another from the same reader."""
        reader = self.reader(b'A@\nA@@\nB@\nB@@')
        header = self.header(2)
        first = parse_character(reader, header)
        second = parse_character(reader, header)
        self.assertEqual(first.as_text(), 'A\nA')
        self.assertEqual(second.as_text(), 'B\nB')
        self.assertTrue(reader.at_end())

    def test_idempotent(self):
        """Decoding the same data gives equal characters."""
        data = b' /\\ @\n/--\\@@\n'
        header = self.header(2)
        first = parse_character(self.reader(data), header)
        second = parse_character(self.reader(data), header)
        self.assertEqual(first, second)
        self.assertEqual(hash(first), hash(second))

    def test_empty_figcharacter(self):
        """A FIGcharacter without rows has no width."""
        self.assertEqual(FIGcharacter().width, 0)
        self.assertEqual(FIGcharacter().height, 0)

    def test_with_codetag(self):
        """Codetag line followed by a record."""
        reader = self.reader(b'0x41 LATIN CAPITAL LETTER A\nA@\nA@@\n')
        code, char = parse_character_with_codetag(reader, self.header(2))
        self.assertEqual(code, 65)
        self.assertEqual(char.as_text(), 'A\nA')

    def test_with_bad_codetag(self):
        """Malformed codetag fails the record."""
        with self.assertRaises(InvalidCharacter):
            parse_character_with_codetag(self.reader(b'A\nA@\nA@@\n'), self.header(2))


class TestCodetag(BaseTester):
    """Test decoding codetags."""

    def test_hex(self):
        self.assertEqual(decode_codetag(b'0x41 A'), 65)
        self.assertEqual(decode_codetag(b'0X7f'), 127)
        self.assertEqual(decode_codetag(b'0x2500 BOX DRAWINGS'), 0x2500)

    def test_negative(self):
        self.assertEqual(decode_codetag(b'-0x1'), -1)
        self.assertEqual(decode_codetag(b'-255 KATAMAP'), -255)
        self.assertEqual(decode_codetag(b'-010'), -8)

    def test_octal(self):
        self.assertEqual(decode_codetag(b'0101'), 65)
        self.assertEqual(decode_codetag(b'0377'), 255)

    def test_decimal(self):
        self.assertEqual(decode_codetag(b'65'), 65)
        self.assertEqual(decode_codetag(b'196  LATIN CAPITAL LETTER A WITH DIAERESIS'), 196)

    def test_plus_sign(self):
        """Decimal codes may have an explicit plus sign."""
        self.assertEqual(decode_codetag(b'+65 A'), 65)
        self.assertEqual(decode_codetag(b'-+65'), -65)
        self.assertEqual(decode_codetag(b'+0101'), 101)

    def test_zero(self):
        """A single 0 is decimal zero."""
        self.assertEqual(decode_codetag(b'0'), 0)
        self.assertEqual(decode_codetag(b'00'), 0)

    def test_invalid(self):
        """Malformed codetags."""
        for line in (
                b'0xZZ', b'0x', b'', b' 65', b'-', b'--5', b'+', b'+0x41', b'++5', b'A',
                b'089', b'6_5', b'0x1g', b'\xff', b'65\t LETTER',
            ):
            with self.assertRaises(InvalidCharacter):
                decode_codetag(line)

    def test_range(self):
        """Codetags are signed 32-bit."""
        self.assertEqual(decode_codetag(b'0x7fffffff'), 2**31 - 1)
        self.assertEqual(decode_codetag(b'-2147483647'), -(2**31 - 1))
        with self.assertRaises(InvalidCharacter):
            decode_codetag(b'0x80000000')
        with self.assertRaises(InvalidCharacter):
            decode_codetag(b'-0x80000000')

    def test_parse_codetag(self):
        """Codetag is read as a newline-terminated line."""
        reader = self.reader(b'0x41 A\n65\n')
        self.assertEqual(parse_codetag(reader), 65)
        self.assertEqual(parse_codetag(reader), 65)
        with self.assertRaises(NotEnoughData):
            parse_codetag(self.reader(b'65'))


if __name__ == '__main__':
    unittest.main()
