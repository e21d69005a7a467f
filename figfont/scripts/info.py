"""
Show the header and characters of a FIGfont file
(c) 2024 figfont contributors, licence: https://opensource.org/licenses/MIT
"""

import sys
import argparse
import logging

import figfont
from figfont.scripting import wrap_main


def _code(arg):
    """Character code from a single character or a codetag-style number."""
    if len(arg) == 1:
        return ord(arg)
    return figfont.decode_codetag(arg.encode('ascii'))


def main(argv=None):
    # parse command line
    parser = argparse.ArgumentParser(
        prog='figfont-info',
        description='Show the header and characters of a FIGfont file.',
    )
    parser.add_argument(
        'infile', type=str,
        help='FIGfont (.flf) file to read'
    )
    parser.add_argument(
        '--char', '-c', type=str, default='',
        help=(
            'character to print: a single character, '
            'or a decimal, 0-prefixed octal or 0x-prefixed hexadecimal code'
        )
    )
    parser.add_argument(
        '--hardblank', type=str, default='',
        help='character to show hard blanks with (default: the font\'s hardblank)'
    )
    parser.add_argument(
        '--encoding', type=str, default=figfont.constants.DEFAULT_ENCODING,
        help='encoding of comments and characters in the file'
    )
    parser.add_argument(
        '--debug', action='store_true',
        help='show debugging output'
    )
    parser.add_argument(
        '--version', action='version', version=f'%(prog)s {figfont.__version__}'
    )
    args = parser.parse_args(argv)

    with wrap_main(args.debug):
        font = figfont.load(args.infile, encoding=args.encoding)
        if not args.char:
            print(font.header)
            print(f'characters: {len(font)}')
            return
        code = _code(args.char)
        character = font.get(code)
        if character is None:
            raise ValueError(f'Character {code} not defined in font.')
        logging.info('Character %d is %d x %d.', code, character.width, character.height)
        hardblank = args.hardblank or font.header.hardblank.decode('latin-1')
        print(character.as_text(hardblank=hardblank))


if __name__ == '__main__':
    main(sys.argv[1:])
