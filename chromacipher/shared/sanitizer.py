#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromacipher/shared/sanitizer.py

import argparse
import re
from typing import Tuple

from chromacipher.core import config as c


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def normalize_hex(value: str) -> str:
    """
    Normalizes various formats of hex strings into a standard 6-character lowercase hex.
    Handles shorthand formats (e.g., 'f', 'ff', 'fff') by repeating characters appropriately.
    """
    if value is None:
        return ""
    s = str(value).replace("#", "").replace(" ", "").lower()

    # Regex [0-9a-f] extracts only valid hexadecimal characters, ignoring any garbage input
    extracted = "".join(re.findall(r"[0-9a-f]", s))

    if not extracted:
        return ""

    L = len(extracted)
    if L == 6:
        return extracted
    if L == 3:
        # e.g., 'abc' becomes 'aabbcc'
        return "".join([ch * 2 for ch in extracted])
    if L == 1:
        return extracted * 6
    if L == 2:
        return extracted * 3
    if L < 6:
        # e.g., 'abcd' becomes 'abcd00'
        return extracted.ljust(6, "0")

    return extracted[:6]


def _normalize_value_string(s: str) -> str:
    """
    Normalizes a color triple string to make numerical extraction easier.
    Strips quotes, degree and percent signs, and unwraps CSS-like function
    syntax (e.g., 'hsv(234, 84%, 65)' -> '234 84 65').
    """
    if not s:
        return ""
    s = s.strip()

    # Remove matching surrounding quotes or backticks
    while len(s) >= 2 and s[0] == s[-1] and s[0] in "\"'`":
        s = s[1:-1].strip()

    s = s.replace('°', ' ').replace('%', ' ')
    s = re.sub(r'deg', ' ', s, flags=re.IGNORECASE)

    # Remove functional wrappers like "hsv(" at the start, and ")" at the end
    s = re.sub(r'^[a-zA-Z]+\s*\(', '', s)
    s = s.rstrip(')')

    s = s.replace(',', ' ').replace('/', ' ')
    s = re.sub(r'\s+', ' ', s)
    return s.strip()


def parse_hsv_triple(value: str) -> Tuple[int, int, int]:
    """
    Parses exactly three integer components out of a string.
    Raises ValueError when the count is wrong or a component is fractional.
    """
    parts = _normalize_value_string(str(value)).split(" ")
    parts = [p for p in parts if p]
    if len(parts) != 3:
        raise ValueError(f"expected 3 components, got {len(parts)}")

    comps = []
    for p in parts:
        # Regex accepts an optional sign followed by digits only
        if not re.fullmatch(r"[-+]?\d+", p):
            raise ValueError(f"component '{p}' is not an integer")
        comps.append(int(p))
    return tuple(comps)


def _extract_alpha_only(value: str) -> str:
    """
    Extracts only alphabetical characters from a string, lowercasing them.
    Useful for cleaning up format names.
    """
    if value is None:
        return ""
    s = str(value).replace(" ", "").lower()
    return "".join(re.findall(r"[a-z]", s))


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_text(v: str) -> str:
    """Validator for plaintext messages, capped at MAX_TEXT_LENGTH characters."""
    if v is None:
        raise argparse.ArgumentTypeError("missing text value")
    if len(v) > c.MAX_TEXT_LENGTH:
        raise argparse.ArgumentTypeError(
            f"text is too long: {len(v)} characters (max: {c.MAX_TEXT_LENGTH})"
        )
    return v


def handle_hsv(v: str) -> Tuple[int, int, int]:
    """Validator for 'h s v' integer triples."""
    try:
        return parse_hsv_triple(v)
    except ValueError as e:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid hsv value: '{raw}' ({e})")


def handle_string_clean(v: str) -> str:
    """Validator for pure alphabetical string options (e.g., format names)."""
    cleaned = _extract_alpha_only(v)
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid string value: '{raw}'")
    return cleaned


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "text": handle_text,
    "hsv": handle_hsv,
    "output_format": handle_string_clean,
    "table_format": handle_string_clean,
}
