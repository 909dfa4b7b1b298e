#!/usr/bin/env python3
"""
Build Puz

Command line entry point: converts a JSON puzzle description into an
Across Lite .puz file.

Pipeline:
1. Load writer configuration (puzwriter.ini)
2. Load the puzzle JSON
3. Validate and encode
4. Write the .puz file

Usage:
    puzwriter puzzle.json --output puzzle.puz --config puzwriter.ini
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from .config import load_config
from .puzzle import PuzError, ConfigError, load_puzzle
from .serialization import write_puz_file
from .utils import log, logError, init_logging, print_summary, get_counts, is_known_encoding


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='puzwriter',
        description='Write an Across Lite .puz file from a JSON puzzle description',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example:
    puzwriter puzzle.json

    # Explicit output and config:
    puzwriter puzzle.json --output out/puzzle.puz --config puzwriter.ini

    # Write without validating grid sizes:
    puzwriter puzzle.json --no-validate
        """
    )

    parser.add_argument('input',
                        help='Path to the puzzle JSON file')
    parser.add_argument('--output', '-o', default=None,
                        help='Output .puz path (default: input with .puz suffix)')
    parser.add_argument('--config', default=None,
                        help='Path to puzwriter.ini configuration file')
    parser.add_argument('--encoding', default=None,
                        help='Character set for puzzle text (overrides config)')
    parser.add_argument('--no-validate', action='store_true',
                        help='Skip puzzle validation before encoding')
    parser.add_argument('--log', default=None,
                        help='Write a log file, including debug output')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    init_logging(Path(args.log) if args.log else None)

    try:
        config = load_config(Path(args.config) if args.config else None)
        if args.log is None and config.log_file is not None:
            init_logging(config.log_file)

        input_path = Path(args.input)
        output_path = Path(args.output) if args.output else input_path.with_suffix('.puz')

        if args.encoding and not is_known_encoding(args.encoding):
            raise ConfigError(f"Unknown encoding: {args.encoding}")

        log(f"Reading {input_path}...")
        puzzle = load_puzzle(input_path, args.encoding or config.encoding)

        write_puz_file(puzzle, output_path,
                       validate=config.validate and not args.no_validate)

    except (PuzError, OSError) as e:
        logError(f"{e}")

    print_summary()
    errors, _ = get_counts()
    return 1 if errors else 0


if __name__ == '__main__':
    sys.exit(main())
