"""
figfont test suite
testing utilities
"""

import tempfile
import unittest
import logging
from pathlib import Path

from figfont import LineReader
from figfont.constants import STANDARD_CODEPOINTS


def build_flf(
        height=2, codetagged=(), codetag_count=None, comment=('a test font',),
        final_newline=True, hardblank='$', endmark='@',
    ):
    """
    Build the text of a FIGfont file.

    Every row of a standard character holds the character itself,
    except that space is drawn with a hardblank.
    codetagged: sequence of (codetag line, rows) pairs
    """
    if codetag_count is None:
        codetag_count = len(codetagged)
    lines = [
        f'flf2a{hardblank} {height} {height-1} 4 0 {len(comment)} 0 64 {codetag_count}',
        *comment,
    ]
    for codepoint in STANDARD_CODEPOINTS:
        row = hardblank if codepoint == 32 else chr(codepoint)
        lines.append(_format_record([row] * height, endmark))
    for tag, rows in codetagged:
        lines.append(tag)
        lines.append(_format_record(rows, endmark))
    text = '\n'.join(lines)
    if final_newline:
        text += '\n'
    return text


def _format_record(rows, endmark):
    lines = [f'{_row}{endmark}' for _row in rows]
    if len(rows) > 1:
        lines[-1] += endmark
    return '\n'.join(lines)


class BaseTester(unittest.TestCase):
    """Base class for testers."""

    logging.basicConfig(level=logging.WARNING)

    def setUp(self):
        """Setup ahead of each test."""
        bar = '-' * 20
        logging.debug('%s %s %s', bar, self.id(), bar)
        self.temp_dir = tempfile.TemporaryDirectory()
        self.temp_path = Path(self.temp_dir.name)

    def tearDown(self):
        """Clean up after each test."""
        self.temp_dir.cleanup()

    @staticmethod
    def reader(data):
        """LineReader on in-memory data."""
        if isinstance(data, str):
            return LineReader.from_string(data)
        return LineReader.from_data(data)
