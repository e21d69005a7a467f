"""
figfont.character - FIGcharacter records and codetags

(c) 2024 figfont contributors
licence: https://opensource.org/licenses/MIT
"""

import logging

from .constants import DEFAULT_ENCODING
from .errors import InvalidCharacter, InvalidHeader, SegmentationError
from .grapheme import segment
from .streams import LineReader


_INT32_MAX = (1 << 31) - 1

_DIGITS = {
    8: frozenset('01234567'),
    10: frozenset('0123456789'),
    16: frozenset('0123456789abcdefABCDEF'),
}


class FIGcharacter:
    """Rows of display cells making up one glyph."""

    __slots__ = ('_rows',)

    def __init__(self, rows=()):
        """Create FIGcharacter from a sequence of Grapheme sequences."""
        self._rows = tuple(tuple(_row) for _row in rows)

    @property
    def rows(self):
        return self._rows

    @property
    def height(self):
        return len(self._rows)

    @property
    def width(self):
        return max((len(_row) for _row in self._rows), default=0)

    def __eq__(self, other):
        if not isinstance(other, FIGcharacter):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self):
        return hash(self._rows)

    def __repr__(self):
        return f'{type(self).__name__}({self.as_text()!r})'

    def as_text(self, hardblank=' '):
        """Rows as multiline string, showing hard blanks as the given character."""
        return '\n'.join(
            ''.join(hardblank if _cell.hardblank else _cell.text for _cell in _row)
            for _row in self._rows
        )


##############################################################################
# codetags

def decode_codetag(line):
    """
    Convert a codetag line to a character code.

    The first space-separated word is the code, in decimal (optionally with +), octal with a leading 0
    or hexadecimal with a leading 0x, optionally negative. Anything after it is comment.
    """
    code = line.split(b' ', 1)[0]
    sign = 1
    if code.startswith(b'-'):
        code = code[1:]
        sign = -1
    if code[:2] in (b'0x', b'0X'):
        digits, base = code[2:], 16
    elif code.startswith(b'0') and len(code) > 1:
        digits, base = code[1:], 8
    else:
        digits, base = code, 10
        # decimal codes may also carry an explicit plus sign
        if digits.startswith(b'+'):
            digits = digits[1:]
    try:
        digits = digits.decode('ascii')
    except UnicodeDecodeError:
        raise InvalidCharacter(f'Invalid codetag {line!r}.') from None
    # int() would also accept signs, whitespace and underscores
    if not digits or not set(digits) <= _DIGITS[base]:
        raise InvalidCharacter(f'Invalid codetag {line!r}.')
    value = int(digits, base)
    if value > _INT32_MAX:
        raise InvalidCharacter(f'Codetag {line!r} out of range.')
    return sign * value


def parse_codetag(instream):
    """Read a codetag line from the stream and decode it."""
    reader = LineReader.wrap(instream)
    line = reader.read_line()
    try:
        return decode_codetag(line)
    except InvalidCharacter as e:
        raise InvalidCharacter(f'{e} [line {reader.line_number}]') from None


##############################################################################
# character records

def parse_character(instream, header, *, encoding=DEFAULT_ENCODING):
    """
    Read one FIGcharacter record.

    instream: binary stream or LineReader, positioned at the first row of the record
    header: the font's Header, giving height and hardblank
    encoding: encoding of row content
    """
    reader = LineReader.wrap(instream)
    start = reader.line_number + 1
    lines = _read_lines(reader, header.height)
    first = lines[0]
    if not first:
        raise InvalidCharacter(f'Empty first row in character at line {start}.')
    # the endmark is whatever the first row ends with
    delimiter = first[-1:]
    if header.height > 1:
        # by convention the last row has two endmarks, all others have one
        if not lines[-1].endswith(delimiter * 2):
            raise InvalidCharacter(
                f'Last row of character at line {start} does not end with {delimiter * 2!r}.'
            )
        lines[-1] = lines[-1][:-1]
    rows = []
    for offset, line in enumerate(lines):
        if not line:
            raise InvalidCharacter(f'Empty row at line {start + offset}.')
        if line[-1:] != delimiter:
            raise InvalidCharacter(
                f'Row at line {start + offset} does not end with {delimiter!r}.'
            )
        rows.append(line[:-1])
    try:
        cells = [segment(_row, header.hard_blank_char, encoding) for _row in rows]
    except SegmentationError as e:
        # the row content does not fit the hardblank and encoding the header declares
        raise InvalidHeader(f'{e} [character at line {start}]') from e
    return FIGcharacter(cells)


def parse_character_with_codetag(instream, header, *, encoding=DEFAULT_ENCODING):
    """Read a codetag line followed by a FIGcharacter record."""
    reader = LineReader.wrap(instream)
    codetag = parse_codetag(reader)
    logging.debug('Reading character with codetag %d.', codetag)
    return codetag, parse_character(reader, header, encoding=encoding)


def _read_lines(reader, count):
    """Read the lines of a record; the last may lack a newline at end of file."""
    lines = [reader.read_line() for _ in range(count - 1)]
    lines.append(reader.read_last_line())
    return lines
