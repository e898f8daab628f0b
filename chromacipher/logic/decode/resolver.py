#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromacipher/logic/decode/resolver.py

import argparse
import sys
from typing import List

from chromacipher.core.codec import ColorSample, make_sample
from chromacipher.shared.logger import log
from chromacipher.shared.records import load_records


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        log("error", f"cannot read '{path}': {e.strerror or e}")
        sys.exit(2)


def resolve_decode_input(args: argparse.Namespace) -> List[ColorSample]:
    """Collect samples from -hsv triples or a JSON record file."""
    try:
        if args.file:
            return load_records(_read_source(args.file))
        return [make_sample(None, hsv) for hsv in args.hsv]
    except ValueError as e:
        log("error", f"invalid decode input: {e}")
        sys.exit(2)
