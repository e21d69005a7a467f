"""
figfont.errors - exception classes

(c) 2024 figfont contributors
licence: https://opensource.org/licenses/MIT
"""


class FileFormatError(Exception):
    """Incorrect file format."""


class InvalidHeader(FileFormatError):
    """Malformed or missing FIGfont header field or comment block."""


class InvalidCharacter(FileFormatError):
    """Malformed FIGcharacter record or codetag."""


class NotEnoughData(FileFormatError):
    """Stream ended before a required line or terminator."""


class StreamError(FileFormatError):
    """Error raised by the underlying stream."""


class SegmentationError(ValueError):
    """Glyph row could not be split into display cells."""
