#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromacipher/logic/decode/engine.py

import argparse

from chromacipher.core import config as c
from chromacipher.core.codec import decode
from chromacipher.shared.formatting import display_char, format_colorspace
from .resolver import resolve_decode_input


def run(args: argparse.Namespace) -> None:
    """Main execution engine for color decoding"""
    samples = resolve_decode_input(args)

    if args.verbose:
        for sample in samples:
            ch = decode([sample])
            src = format_colorspace('hsv', *sample.hsv)
            print(f"{c.BOLD_WHITE}{src}{c.RESET} {c.MSG_BOLD_COLORS['info']}->{c.RESET} {display_char(ch)}")

    print(decode(samples))
