#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromacipher/shared/formatting.py

from chromacipher.core import config as c


def format_colorspace(fmt: str, *args) -> str:
    if fmt == 'rgb':
        return f"rgb({args[0]}, {args[1]}, {args[2]})"
    elif fmt == 'hsv':
        h, s, v = args
        return f"hsv({h}deg, {s}%, {v})"
    elif fmt == 'hex':
        return f"#{args[0]}"

    return ""


def display_char(ch: str) -> str:
    """Printable label for a character, naming invisible ones."""
    if ch is None:
        return "?"
    if ch in c.DISPLAY_NAMES:
        return c.DISPLAY_NAMES[ch]
    if not ch.isprintable():
        return repr(ch)[1:-1]
    return ch
