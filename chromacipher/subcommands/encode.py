#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromacipher/subcommands/encode.py

import argparse
import sys
from chromacipher.core import config as c
from chromacipher.shared.logger import ChromacipherArgumentParser
from chromacipher.shared.sanitizer import INPUT_HANDLERS
from chromacipher.shared.preview import ensure_truecolor
from chromacipher.logic.encode import engine


def get_encode_parser() -> argparse.ArgumentParser:
    """Create argument parser for encode command."""
    parser = ChromacipherArgumentParser(
        prog="chromacipher encode",
        description="chromacipher encode: turn text into a sequence of colors",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-t",
        "--text",
        required=True,
        type=INPUT_HANDLERS["text"],
        help=f"message to encode (max: {c.MAX_TEXT_LENGTH} characters)"
    )
    parser.add_argument(
        "-du",
        "--drop-unmapped",
        action="store_true",
        help="leave out characters that have no color (lossy)"
    )
    parser.add_argument(
        "-o",
        "--output-format",
        default="blocks",
        type=INPUT_HANDLERS["output_format"],
        choices=c.OUTPUT_FORMATS,
        help="output format (default: blocks)"
    )
    parser.add_argument(
        "-hb",
        "--hide-bars",
        action="store_true",
        help="hide visual color bars"
    )
    return parser


def main() -> None:
    """Main entry point for encode command."""
    parser = get_encode_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    engine.run(args)


if __name__ == "__main__":
    main()
