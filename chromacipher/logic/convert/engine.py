#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromacipher/logic/convert/engine.py

import argparse
import sys

from chromacipher.core import config as c
from chromacipher.core import conversions as conv
from chromacipher.core.table import DEFAULT_TABLE
from chromacipher.shared.formatting import format_colorspace
from chromacipher.shared.logger import log
from chromacipher.shared.preview import print_color_block


def run(args: argparse.Namespace) -> None:
    """Main execution engine for raw hsv conversion"""
    h, s, v = args.hsv
    try:
        r, g, b = conv.hsv_to_rgb(h, s, v)
    except ValueError as e:
        log("error", str(e))
        sys.exit(2)

    hx = conv.rgb_to_hex(r, g, b)
    print()
    print_color_block(hx, f"{c.BOLD_WHITE}{format_colorspace('hsv', h, s, v)}{c.RESET}")
    print(f"{'rgb':<18}{c.BOLD_WHITE}:{c.RESET}   {c.BOLD_WHITE}{format_colorspace('rgb', r, g, b)}{c.RESET}")

    ch = DEFAULT_TABLE.reverse_lookup((h, s, v))
    if ch is not None:
        print(f"{'character':<18}{c.BOLD_WHITE}:{c.RESET}   {c.BOLD_WHITE}{ch!r}{c.RESET}")
    print()
