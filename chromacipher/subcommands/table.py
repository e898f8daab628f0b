#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromacipher/subcommands/table.py

import argparse
import sys
from chromacipher.core import config as c
from chromacipher.core.table import DEFAULT_TABLE
from chromacipher.shared.logger import ChromacipherArgumentParser
from chromacipher.shared.sanitizer import INPUT_HANDLERS
from chromacipher.shared.preview import ensure_truecolor
from chromacipher.logic.table.renderer import render_table


def get_table_parser() -> argparse.ArgumentParser:
    """Create argument parser for table command."""
    parser = ChromacipherArgumentParser(
        prog="chromacipher table",
        description="chromacipher table: list every character and its color",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-o",
        "--output-format",
        default="text",
        type=INPUT_HANDLERS["table_format"],
        choices=c.TABLE_FORMATS,
        help="output format (default: text)"
    )
    return parser


def main() -> None:
    """Main entry point for table command."""
    parser = get_table_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    render_table(DEFAULT_TABLE, args.output_format)


if __name__ == "__main__":
    main()
