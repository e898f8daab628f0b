#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromacipher/shared/preview.py

import os
import re
import sys

from chromacipher.core.conversions import hex_to_rgb
from chromacipher.core import config as c


def ensure_truecolor() -> None:
    """Ensure the COLORTERM environment variable is set to truecolor for swatches."""
    if sys.platform == "win32":
        return
    if os.environ.get("COLORTERM") != "truecolor":
        os.environ["COLORTERM"] = "truecolor"


def get_visible_len(s: str) -> int:
    ansi_escape = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')
    return len(ansi_escape.sub('', s))


def print_color_block(hex_code: str, title: str = "color", end: str = "\n", hide_bar: bool = False) -> None:
    r, g, b = hex_to_rgb(hex_code)
    vis_len = get_visible_len(title)
    padding = " " * max(0, 18 - vis_len)

    bar = "" if hide_bar else f"\033[48;2;{r};{g};{b}m                {c.RESET}  "
    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   {bar}{c.BOLD_WHITE}#{hex_code}{c.RESET}", end=end)
