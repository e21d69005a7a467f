"""
figfont.font - load complete FIGfont files

(c) 2024 figfont contributors
licence: https://opensource.org/licenses/MIT
"""

import logging
from pathlib import Path

from .constants import STANDARD_CODEPOINTS, DEFAULT_ENCODING
from .errors import FileFormatError
from .header import parse_header
from .character import parse_character, parse_character_with_codetag
from .streams import LineReader


class FIGfont:
    """Header and FIGcharacters of a FIGfont file."""

    def __init__(self, header, characters, *, name=''):
        """
        Create FIGfont.

        header: Header
        characters: mapping of character code to FIGcharacter
        name: name of the source file, if any
        """
        self.header = header
        self.characters = dict(characters)
        self.name = name

    def __repr__(self):
        return (
            f"<{type(self).__name__} name='{self.name}' "
            f"height={self.header.height} characters={len(self.characters)}>"
        )

    def __len__(self):
        return len(self.characters)

    def __contains__(self, code):
        return _to_code(code) in self.characters

    def __iter__(self):
        return iter(self.characters)

    @property
    def missing_character(self):
        """FIGcharacter 0, shown for codes the font does not define, or None."""
        return self.characters.get(0)

    def get(self, code, default_missing=False):
        """
        Get FIGcharacter by character code or single-character string.

        default_missing: fall back to FIGcharacter 0 if the code is not defined
        returns: FIGcharacter or None
        """
        character = self.characters.get(_to_code(code))
        if character is None and default_missing:
            return self.missing_character
        return character

    def __getitem__(self, code):
        character = self.get(code)
        if character is None:
            raise KeyError(code)
        return character


def _to_code(code):
    """Convert single-character string to code point."""
    if isinstance(code, str):
        if len(code) != 1:
            raise ValueError(f'Expected single character, got {code!r}.')
        return ord(code)
    return code


##############################################################################
# loader

def load(infile, *, encoding=DEFAULT_ENCODING):
    """
    Load a FIGfont from a .flf file.

    infile: path or binary/text stream
    encoding: encoding of comment and glyph content
    """
    if isinstance(infile, (str, Path)):
        with open(infile, 'rb') as instream:
            return load(instream, encoding=encoding)
    reader = LineReader.wrap(infile)
    logging.info('Loading FIGfont %s', reader.name or '<stream>')
    header = parse_header(reader, encoding=encoding)
    logging.info('figlet properties:')
    for line in str(header).splitlines():
        logging.info('    ' + line)
    characters = {}
    for count, code in enumerate(STANDARD_CODEPOINTS):
        logging.debug('Reading character %d (%r).', code, chr(code))
        try:
            characters[code] = parse_character(reader, header, encoding=encoding)
        except FileFormatError:
            logging.error(
                'Error in standard character %d of %d (code %d).',
                count + 1, len(STANDARD_CODEPOINTS), code
            )
            raise
    _read_tagged(reader, header, encoding, characters)
    return FIGfont(header, characters, name=reader.name)


def _read_tagged(reader, header, encoding, characters):
    """Read the code-tagged characters following the standard set into `characters`."""
    if header.codetags:
        count = header.codetags
    else:
        count = None
    index = 0
    while count is None or index < count:
        if count is None:
            # no count given, read until end of file
            reader.skip_blank_lines()
            if reader.at_end():
                break
        try:
            code, character = parse_character_with_codetag(reader, header, encoding=encoding)
        except FileFormatError:
            logging.error('Error in code-tagged character %d.', index + 1)
            raise
        if code in characters:
            logging.warning('Duplicate definition of character code %d.', code)
        characters[code] = character
        index += 1
    if header.codetag_count is not None and index != header.codetag_count:
        logging.warning(
            'Header declares %d code-tagged characters, found %d.',
            header.codetag_count, index
        )
    elif count is not None and not reader.at_end():
        logging.debug('Ignoring data after the last code-tagged character.')
