import argparse
import logging
import os
import sys

from .compression import compress_file, decompress_file
from .errors import HuffpackError

EXTENSION = '.hpk'
LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'

log = logging.getLogger(__name__)


def process_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='huffpack', description='Huffman coding based compressor')
    parser.add_argument('filename', type=str)
    parser.add_argument('--decompress', action='store_true')
    parser.add_argument('-o', '--output', type=str, default=None,
                        help=f'output path (default: add or strip {EXTENSION})')
    parser.add_argument('-v', '--verbose', action='count', default=0)
    return parser.parse_args(argv)

def setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT)

def output_path(filename: str, decompress_mode: bool) -> str | None:
    if not decompress_mode:
        return f'{filename}{EXTENSION}'
    if filename.endswith(EXTENSION) and len(os.path.basename(filename)) > len(EXTENSION):
        return filename[:-len(EXTENSION)]
    return None


def main(argv: list[str] | None = None) -> int:
    args = process_args(argv)
    setup_logging(args.verbose)
    target = args.output or output_path(args.filename, args.decompress)
    if target is None:
        print(f'Wrong file extension, only {EXTENSION} files allowed', file=sys.stderr)
        return 1
    run = decompress_file if args.decompress else compress_file
    try:
        before, after = run(args.filename, target)
    except HuffpackError as e:
        print(str(e), file=sys.stderr)
        return 1
    log.info('%s -> %s: %d -> %d bytes', args.filename, target, before, after)
    return 0

if __name__ == '__main__':
    sys.exit(main())
