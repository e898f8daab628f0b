#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromacipher/subcommands/decode.py

import argparse
import sys
from chromacipher.shared.logger import ChromacipherArgumentParser
from chromacipher.shared.sanitizer import INPUT_HANDLERS
from chromacipher.logic.decode import engine


def get_decode_parser() -> argparse.ArgumentParser:
    """Create argument parser for decode command."""
    parser = ChromacipherArgumentParser(
        prog="chromacipher decode",
        description="chromacipher decode: recover text from hsv colors",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "-hsv",
        "--hsv",
        action="append",
        type=INPUT_HANDLERS["hsv"],
        help="use -hsv \"H S V\" multiple times, one per character"
    )
    source.add_argument(
        "-f",
        "--file",
        help="json list of encoded records ('-' reads stdin)"
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="show the character decoded from each color"
    )
    return parser


def main() -> None:
    """Main entry point for decode command."""
    parser = get_decode_parser()
    args = parser.parse_args(sys.argv[1:])
    engine.run(args)


if __name__ == "__main__":
    main()
