#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tests/test_conversions.py

import math

import pytest

from chromacipher.core.conversions import hex_to_rgb, hsv_to_hex, hsv_to_rgb, rgb_to_hex


def test_achromatic_endpoints():
    assert hsv_to_rgb(0, 0, 0) == (0, 0, 0)
    assert hsv_to_rgb(0, 0, 100) == (255, 255, 255)


def test_primary_red():
    assert hsv_to_rgb(0, 100, 100) == (255, 0, 0)
    assert rgb_to_hex(255, 0, 0) == "ff0000"


def test_table_colors():
    # 'H' and '!'
    assert hsv_to_rgb(234, 84, 65) == (27, 40, 166)
    assert hsv_to_hex(234, 84, 65) == "1b28a6"
    assert hsv_to_rgb(15, 84, 75) == (191, 71, 31)
    assert hsv_to_hex(15, 84, 75) == "bf471f"


def test_value_above_100_is_not_clamped_before_conversion():
    # digit '9': 1.65 * 255 overflows red, which is clamped after rounding
    r, g, b = hsv_to_rgb(1, 84, 165)
    assert r == 255
    assert 0 <= g <= 255 and 0 <= b <= 255
    assert g > b
    assert hsv_to_rgb(0, 0, 165) == (255, 255, 255)


def test_sentinel_saturates_to_white():
    assert hsv_to_rgb(0, 0, 128) == (255, 255, 255)


def test_channels_are_ints():
    assert all(isinstance(ch, int) for ch in hsv_to_rgb(90, 84, 70))


@pytest.mark.parametrize(
    "h, s, v",
    [
        (360, 84, 50),
        (-1, 84, 50),
        (0, -1, 50),
        (0, 101, 50),
        (0, 50, -1),
        (math.nan, 0, 0),
        (0, 0, math.inf),
    ],
)
def test_out_of_domain_input_raises(h, s, v):
    with pytest.raises(ValueError):
        hsv_to_rgb(h, s, v)


def test_rgb_to_hex_clamps_and_lowercases():
    assert rgb_to_hex(300, -5, 16) == "ff0010"
    assert rgb_to_hex(171, 205, 239) == "abcdef"
    assert rgb_to_hex(0.4, 0.5, 254.6) == "0001ff"


def test_hex_to_rgb():
    assert hex_to_rgb("#FF0000") == (255, 0, 0)
    assert hex_to_rgb("abc") == (170, 187, 204)
    assert hex_to_rgb("") == (0, 0, 0)


def test_rgb_to_hex_maps_nan_to_zero():
    assert rgb_to_hex(math.nan, 255, 0) == "00ff00"
