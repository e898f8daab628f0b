#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromacipher/subcommands/convert.py

import argparse
import sys
from chromacipher.shared.logger import ChromacipherArgumentParser
from chromacipher.shared.sanitizer import INPUT_HANDLERS
from chromacipher.shared.preview import ensure_truecolor
from chromacipher.logic.convert import engine


def get_convert_parser() -> argparse.ArgumentParser:
    """Create argument parser for convert command."""
    parser = ChromacipherArgumentParser(
        prog="chromacipher convert",
        description="chromacipher convert: show the rgb and hex of a raw hsv triple",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-hsv",
        "--hsv",
        required=True,
        type=INPUT_HANDLERS["hsv"],
        help="hue, saturation and value, e.g. \"234 84 65\""
    )
    return parser


def main() -> None:
    """Main entry point for convert command."""
    parser = get_convert_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    engine.run(args)


if __name__ == "__main__":
    main()
