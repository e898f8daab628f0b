#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromacipher/core/conversions.py

import functools
import math
from typing import Tuple

from . import config as c
from chromacipher.shared.clamping import _clamp255
from chromacipher.shared.sanitizer import normalize_hex


def _round_half_up(v: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(v + c.ROUND_HALF))


def _check_hsv_domain(h: float, s: float, v: float) -> None:
    """Raise ValueError for components that can never come from the table."""
    for name, comp in (("hue", h), ("saturation", s), ("value", v)):
        if not math.isfinite(comp):
            raise ValueError(f"{name} must be finite, got {comp!r}")
    if not 0 <= h < c.HUE_MAX:
        raise ValueError(f"hue must be in [0, 360), got {h!r}")
    if not 0 <= s <= c.PERCENT_MAX:
        raise ValueError(f"saturation must be in [0, 100], got {s!r}")
    if v < 0:
        raise ValueError(f"value must be non-negative, got {v!r}")


@functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)
def hsv_to_rgb(h: float, s: float, v: float) -> Tuple[int, int, int]:
    """Convert table HSV (degrees, percent, percent-like) to 8-bit RGB.

    The value component is not clamped: table values above 100 produce
    channels beyond 255 that are clamped to [0, 255] before rounding.
    """
    _check_hsv_domain(h, s, v)

    h_n = h / c.HUE_MAX
    s_n = s / c.PERCENT_MAX
    v_n = v / c.PERCENT_MAX

    chroma = v_n * s_n
    sector = h_n * c.HSV_HUE_MOD
    x = chroma * (c.UNIT - abs((sector % c.SECTOR_MOD) - c.UNIT))
    m = v_n - chroma

    if sector < 1:
        r_p, g_p, b_p = chroma, x, 0.0
    elif sector < 2:
        r_p, g_p, b_p = x, chroma, 0.0
    elif sector < 3:
        r_p, g_p, b_p = 0.0, chroma, x
    elif sector < 4:
        r_p, g_p, b_p = 0.0, x, chroma
    elif sector < 5:
        r_p, g_p, b_p = x, 0.0, chroma
    else:
        r_p, g_p, b_p = chroma, 0.0, x

    return (
        _round_half_up(_clamp255((r_p + m) * c.RGB_MAX)),
        _round_half_up(_clamp255((g_p + m) * c.RGB_MAX)),
        _round_half_up(_clamp255((b_p + m) * c.RGB_MAX)),
    )


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to a lowercase 6-digit hex string."""
    r_clamped = _round_half_up(_clamp255(r))
    g_clamped = _round_half_up(_clamp255(g))
    b_clamped = _round_half_up(_clamp255(b))
    return f"{r_clamped:02x}{g_clamped:02x}{b_clamped:02x}"


def hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    """Convert hex string to RGB tuple."""
    h = normalize_hex(hex_code)
    if not h:
        return (0, 0, 0)
    return tuple(int(h[i : i + 2], 16) for i in (0, 2, 4))


def hsv_to_hex(h: float, s: float, v: float) -> str:
    """Direct HSV to Hex."""
    return rgb_to_hex(*hsv_to_rgb(h, s, v))
