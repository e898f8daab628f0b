#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromacipher/logic/encode/engine.py

import argparse

from chromacipher.core.codec import EncodeOptions, encode
from chromacipher.shared.logger import log
from .renderer import render_encoded


def run(args: argparse.Namespace) -> None:
    """Main execution engine for text encoding"""
    options = EncodeOptions(include_unmapped=not args.drop_unmapped)
    samples = encode(args.text, options)

    if not samples:
        log("warning", "nothing to encode")
        return

    dropped = len(args.text) - len(samples)
    if dropped and args.output_format == "blocks":
        log("warning", f"dropped {dropped} unmapped character(s)")

    render_encoded(samples, args.output_format, args.hide_bars)
