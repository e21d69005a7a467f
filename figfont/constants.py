"""
figfont.constants - package constants

(c) 2024 figfont contributors
licence: https://opensource.org/licenses/MIT
"""

VERSION = '0.4.0'

# all FIGfont files start with this, followed by the hardblank
MAGIC = b'flf2'

# the 102 FIGcharacters every font must define, in file order:
# printable ascii, then the Deutsch characters Ä Ö Ü ä ö ü ß
STANDARD_CODEPOINTS = tuple(range(32, 127)) + (196, 214, 220, 228, 246, 252, 223)

# encoding used for comments and for non-hardblank glyph content
DEFAULT_ENCODING = 'utf-8'
