"""
figfont.grapheme - split glyph rows into display cells

(c) 2024 figfont contributors
licence: https://opensource.org/licenses/MIT
"""

import unicodedata
from collections import namedtuple

from uniseg.graphemecluster import grapheme_clusters

from .constants import DEFAULT_ENCODING
from .errors import SegmentationError


class Grapheme(namedtuple('Grapheme', 'text hardblank')):
    """
    One display cell of a FIGcharacter row.

    text: the code point cluster shown in the cell; empty for a hard blank
    hardblank: True if the cell was given as the font's hardblank
    """

    def __new__(cls, text='', hardblank=False):
        return super().__new__(cls, text, hardblank)

    @classmethod
    def blank(cls):
        """Hard blank cell."""
        return cls('', True)

    def __str__(self):
        if self.hardblank:
            return ' '
        return self.text

    def __repr__(self):
        if self.hardblank:
            return f'{type(self).__name__}.blank()'
        return f'{type(self).__name__}({self.text!r})'

    @property
    def width(self):
        """Number of terminal columns the cell takes up."""
        if self.hardblank:
            return 1
        if not self.text:
            return 0
        if unicodedata.east_asian_width(self.text[:1]) in ('W', 'F'):
            return 2
        return 1


def segment(data, hardblank, encoding=DEFAULT_ENCODING):
    """
    Split a delimiter-stripped row into display cells.

    data: row content as bytes
    hardblank: the font's hardblank byte, as int or length-1 bytes
    encoding: encoding of the row content other than hardblanks
    returns: tuple of Grapheme
    """
    if isinstance(hardblank, int):
        hardblank = bytes((hardblank,))
    if len(hardblank) != 1:
        raise SegmentationError(f'Hardblank must be a single byte, got {hardblank!r}.')
    cells = []
    # split on the byte first so a non-ascii hardblank can't end up inside a sequence
    for count, piece in enumerate(data.split(hardblank)):
        if count:
            cells.append(Grapheme.blank())
        try:
            text = piece.decode(encoding)
        except UnicodeDecodeError as e:
            raise SegmentationError(f'Could not decode row {data!r}: {e}') from e
        cells.extend(Grapheme(_c) for _c in grapheme_clusters(text))
    return tuple(cells)

