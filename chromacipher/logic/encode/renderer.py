#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromacipher/logic/encode/renderer.py

from typing import List

from chromacipher.core import config as c
from chromacipher.core.codec import ColorSample
from chromacipher.shared.formatting import display_char, format_colorspace
from chromacipher.shared.preview import print_color_block
from chromacipher.shared.records import dump_records


def render_blocks(samples: List[ColorSample], hide_bars: bool = False) -> None:
    """Print one color block per encoded character."""
    print()
    for i, sample in enumerate(samples):
        label = f"{c.MSG_BOLD_COLORS['info']}{i + 1:>4}{c.RESET}  {c.BOLD_WHITE}{display_char(sample.character)}{c.RESET}"
        print_color_block(sample.hex, label, end="", hide_bar=hide_bars)
        print(f"  {c.MSG_BOLD_COLORS['dim']}{format_colorspace('hsv', *sample.hsv)}{c.RESET}")
    print()


def render_encoded(samples: List[ColorSample], fmt: str, hide_bars: bool = False) -> None:
    if fmt == "json":
        print(dump_records(samples))
    elif fmt == "prettyjson":
        print(dump_records(samples, pretty=True))
    else:
        render_blocks(samples, hide_bars)
