"""
figfont.streams - line-oriented reading from byte streams

(c) 2024 figfont contributors
licence: https://opensource.org/licenses/MIT
"""

import io
import logging
from pathlib import Path

from .errors import NotEnoughData, StreamError


def get_bytesio(bytestring):
    """Workaround as our streams objects require a buffer."""
    return io.BufferedReader(io.BytesIO(bytestring))

def get_stringio(string):
    """Workaround as our streams objects require a buffer."""
    return io.TextIOWrapper(get_bytesio(string.encode()))


class LineReader:
    """Read newline-terminated lines from a binary stream."""

    def __init__(self, stream, *, name=''):
        """
        Wrap a readable stream.

        stream: binary or text stream; text streams are read through their buffer
        name: name to use in messages, taken from the stream if not given
        """
        if not stream:
            raise ValueError('No stream provided.')
        if isinstance(stream, (str, Path)):
            raise ValueError('Argument `stream` must be a Python file or stream-like object.')
        if not stream.readable():
            raise ValueError('Expected readable stream, got writable.')
        self._stream = stream
        self._ensure_binary()
        self.name = name or get_name(stream)
        self.line_number = 0
        # line read ahead by skip_blank_lines
        self._pending = None

    @classmethod
    def wrap(cls, stream):
        """Wrap a stream, leave a LineReader unchanged."""
        if isinstance(stream, cls):
            return stream
        return cls(stream)

    @classmethod
    def from_data(cls, data, **kwargs):
        """LineReader on bytes data."""
        return cls(get_bytesio(data), **kwargs)

    @classmethod
    def from_string(cls, text, **kwargs):
        """LineReader on utf-8 encoded string data."""
        return cls.from_data(text.encode('utf-8'), **kwargs)

    def __repr__(self):
        """String representation."""
        return (
            f"<{type(self).__name__} name='{self.name}' line={self.line_number}>"
        )

    def _ensure_binary(self):
        """Ensure we have a binary stream."""
        # a text stream is read through its buffer, but kept so it doesn't close the buffer
        if not is_binary(self._stream):
            self._textstream = self._stream
            try:
                self._stream = self._stream.buffer
            except AttributeError as e:
                raise ValueError('Unable to access binary stream.') from e
            logging.debug('Getting buffer %r from text stream %r.', self._stream, self._textstream)
        else:
            self._textstream = None

    def _readline(self):
        if self._pending is not None:
            line, self._pending = self._pending, None
            return line
        try:
            return self._stream.readline()
        except OSError as e:
            raise StreamError(f'Error reading {self.name or "stream"}: {e}') from e

    def read_line(self):
        """Read one line, which must end in a newline. Line ending is stripped."""
        line = self._readline()
        if not line.endswith(b'\n'):
            raise NotEnoughData(
                f'Unexpected end of stream at line {self.line_number + 1}: '
                'expected newline.'
            )
        self.line_number += 1
        return _strip_newline(line)

    def read_last_line(self):
        """Read one line, which may be terminated by the end of the stream."""
        line = self._readline()
        if not line:
            raise NotEnoughData(
                f'Unexpected end of stream at line {self.line_number + 1}.'
            )
        self.line_number += 1
        if not line.endswith(b'\n'):
            logging.debug('Line %d not terminated by newline.', self.line_number)
        return _strip_newline(line)

    def peek(self, size):
        """Look ahead at most `size` bytes without advancing."""
        if self._pending:
            return self._pending[:size]
        try:
            if hasattr(self._stream, 'peek'):
                return self._stream.peek(size)[:size]
            pos = self._stream.tell()
            data = self._stream.read(size)
            self._stream.seek(pos)
            return data
        except OSError as e:
            raise StreamError(f'Error reading {self.name or "stream"}: {e}') from e

    def close(self):
        """Close the stream."""
        if self._textstream:
            self._textstream.close()
        else:
            self._stream.close()

    def at_end(self):
        """No more bytes left to read."""
        return not self.peek(1)

    def skip_blank_lines(self):
        """Skip lines that hold only a line ending. Returns number of lines skipped."""
        skipped = 0
        while True:
            line = self._readline()
            if line not in (b'\n', b'\r\n'):
                # keep the first non-blank line for the next read
                if line:
                    self._pending = line
                return skipped
            self.line_number += 1
            skipped += 1


###############################################################################

def _strip_newline(line):
    """Remove a trailing LF or CR LF."""
    if line.endswith(b'\r\n'):
        return line[:-2]
    if line.endswith(b'\n'):
        return line[:-1]
    return line

def is_binary(stream):
    """Check if stream is binary."""
    # read 0 bytes - the return type will tell us if this is a text or binary stream
    return isinstance(stream.read(0), bytes)

def get_name(stream):
    """Get stream name, if available."""
    try:
        return str(stream.name)
    except AttributeError:
        # not all streams have one (e.g. BytesIO)
        return ''
