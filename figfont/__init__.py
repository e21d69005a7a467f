"""
figfont - decoder for FIGfont .flf files

(c) 2024 figfont contributors
licence: https://opensource.org/licenses/MIT
"""

import sys as _sys
assert _sys.version_info >= (3, 9)

from .constants import VERSION as __version__
from .errors import (
    FileFormatError, InvalidHeader, InvalidCharacter, NotEnoughData,
    StreamError, SegmentationError,
)
from .streams import LineReader
from .grapheme import Grapheme, segment
from .header import Header, PrintDirection, parse_header, full_layout_from_old_layout
from .character import (
    FIGcharacter, parse_character, parse_character_with_codetag,
    parse_codetag, decode_codetag,
)
from .font import FIGfont, load
