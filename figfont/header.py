"""
figfont.header - FIGfont header line and comment block

(c) 2024 figfont contributors
licence: https://opensource.org/licenses/MIT
"""

import re
import logging
from enum import Enum
from dataclasses import dataclass, fields
from typing import NamedTuple, Optional

from .constants import MAGIC, DEFAULT_ENCODING
from .errors import InvalidHeader
from .streams import LineReader


# http://www.jave.de/docs/figfont.txt
#
# >          flf2a$ 6 5 20 15 3 0 143 229    NOTE: The first five characters in
# >            |  | | | |  |  | |  |   |     the entire file must be "flf2a".
# >           /  /  | | |  |  | |  |   \
# >  Signature  /  /  | |  |  | |   \   Codetag_Count
# >    Hardblank  /  /  |  |  |  \   Full_Layout*
# >         Height  /   |  |   \  Print_Direction
# >         Baseline   /    \   Comment_Lines
# >          Max_Length      Old_Layout*

_MAX_FIELDS = 9

_UNSIGNED = re.compile(rb'\+?[0-9]+')
_SIGNED = re.compile(rb'[+-]?[0-9]+')


class PrintDirection(Enum):
    LEFT_TO_RIGHT = 0
    RIGHT_TO_LEFT = 1


def full_layout_from_old_layout(old_layout):
    """Derive the Full_Layout bitmask from a legacy Old_Layout value."""
    if old_layout == -1:
        # full width
        return 0
    if old_layout == 0:
        # horizontal fitting (kerning)
        return 1 << 6
    # two's complement reinterpretation as unsigned 64-bit
    return old_layout & 0xffff_ffff_ffff_ffff


class Header(NamedTuple):
    """Validated FIGfont header."""

    hard_blank_char: int
    height: int
    baseline: int
    max_length: int
    old_layout: int
    full_layout: int
    comment: str = ''
    print_direction: Optional[PrintDirection] = None
    codetag_count: Optional[int] = None

    @property
    def hardblank(self):
        """Hardblank as a length-1 bytes object."""
        return bytes((self.hard_blank_char,))

    @property
    def codetags(self):
        """Number of code-tagged characters declared, 0 if not given."""
        return self.codetag_count or 0

    def __str__(self):
        return '\n'.join(
            f'{_k}: {_v!r}' if _k in ('comment', 'hard_blank_char') else f'{_k}: {_v}'
            for _k, _v in self._asdict().items()
        )


##############################################################################
# field converters

def _unsigned(token):
    if not _UNSIGNED.fullmatch(token):
        raise InvalidHeader(f'Expected unsigned number, got {token!r}.')
    value = int(token)
    if value >= 1 << 64:
        raise InvalidHeader(f'Value {token!r} out of range.')
    return value

def _signed(token):
    if not _SIGNED.fullmatch(token):
        raise InvalidHeader(f'Expected signed number, got {token!r}.')
    value = int(token)
    if not -(1 << 63) <= value < 1 << 63:
        raise InvalidHeader(f'Value {token!r} out of range.')
    return value

def _direction(token):
    value = _unsigned(token)
    try:
        return PrintDirection(value)
    except ValueError:
        raise InvalidHeader(f'Invalid print direction {value}.') from None

def _signature(token):
    if not token.startswith(MAGIC):
        raise InvalidHeader(
            f'Not a FIGfont file: does not start with `{MAGIC.decode()}` signature.'
        )
    # the hardblank is the last char of the signature, normally flf2a<hardblank>
    return token[-1]


@dataclass
class HeaderBuilder:
    """Header fields as they are found on the header line."""

    hard_blank_char: Optional[int] = None
    height: Optional[int] = None
    baseline: Optional[int] = None
    max_length: Optional[int] = None
    old_layout: Optional[int] = None
    full_layout: Optional[int] = None
    comment_lines: Optional[int] = None
    print_direction: Optional[PrintDirection] = None
    codetag_count: Optional[int] = None

    # token position -> field name, converter
    _positions = (
        ('hard_blank_char', _signature),
        ('height', _unsigned),
        ('baseline', _unsigned),
        ('max_length', _unsigned),
        ('old_layout', _signed),
        ('comment_lines', _unsigned),
        ('print_direction', _direction),
        ('full_layout', _unsigned),
        ('codetag_count', _unsigned),
    )

    _required = (
        'hard_blank_char', 'height', 'baseline', 'max_length',
        'old_layout', 'full_layout',
    )

    @classmethod
    def from_line(cls, line):
        """Fill the builder from a header line."""
        tokens = [_t for _t in line.split(b' ') if _t]
        if len(tokens) > _MAX_FIELDS:
            raise InvalidHeader(
                f'Too many header fields: expected at most {_MAX_FIELDS}, '
                f'got {len(tokens)}.'
            )
        builder = cls()
        for token, (name, converter) in zip(tokens, cls._positions):
            builder.set(name, converter(token))
        return builder

    def set(self, name, value):
        """Set a field, tracking derived values."""
        setattr(self, name, value)
        if name == 'old_layout':
            # overridden later if the header has a Full_Layout field
            self.full_layout = full_layout_from_old_layout(value)

    def build(self, comment=''):
        """Validate and convert to Header."""
        missing = [_name for _name in self._required if getattr(self, _name) is None]
        if missing:
            raise InvalidHeader(f'Missing header fields: {", ".join(missing)}.')
        if not self.height:
            raise InvalidHeader('Character height must be at least 1.')
        values = {
            _f.name: getattr(self, _f.name)
            for _f in fields(self)
            if _f.name != 'comment_lines'
        }
        return Header(comment=comment, **values)


##############################################################################
# reader

def parse_header(instream, *, encoding=DEFAULT_ENCODING):
    """
    Read the header line and comment block from a FIGfont stream.

    instream: binary stream or LineReader, positioned at the start of the file
    encoding: encoding of the comment lines
    """
    reader = LineReader.wrap(instream)
    builder = HeaderBuilder.from_line(reader.read_line())
    header = builder.build()
    comment = _read_comment(reader, builder.comment_lines or 0, encoding)
    header = header._replace(comment=comment)
    logging.debug('FIGfont header:')
    for line in str(header).splitlines():
        logging.debug('    %s', line)
    return header


def _read_comment(reader, count, encoding):
    """Read the comment block, joining lines with LF."""
    lines = (reader.read_line() for _ in range(count))
    try:
        return '\n'.join(_line.decode(encoding) for _line in lines)
    except UnicodeDecodeError as e:
        raise InvalidHeader(
            f'Could not decode comment at line {reader.line_number}: {e}'
        ) from e
