#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromacipher/core/codec.py

from collections.abc import Mapping
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

from . import config as c
from .conversions import hsv_to_rgb, rgb_to_hex
from .table import DEFAULT_TABLE, HSV, UNMAPPED_SENTINEL, CharacterColorTable


class ColorSample(NamedTuple):
    """
    One encoded character. `rgb` and `hex` are derived from `hsv`, and are
    None when `hsv` lies outside the conversion domain.
    """
    character: Optional[str]
    hsv: HSV
    rgb: Optional[Tuple[int, int, int]]
    hex: Optional[str]


class EncodeOptions(NamedTuple):
    # False drops unmapped characters from the output (lossy)
    include_unmapped: bool = True


DEFAULT_OPTIONS = EncodeOptions()


def make_sample(character: Optional[str], hsv: HSV) -> ColorSample:
    """Build a sample, deriving its RGB and hex from `hsv`."""
    hsv = HSV(*hsv)
    try:
        rgb = hsv_to_rgb(*hsv)
    except ValueError:
        # still decodable through the character fallback
        return ColorSample(character, hsv, None, None)
    return ColorSample(character, hsv, rgb, rgb_to_hex(*rgb))


def _int_field(record: Dict, key: str) -> int:
    if key not in record:
        raise ValueError(f"record is missing '{key}'")
    val = record[key]
    # bool is an int subclass; JSON true/false is never a component
    if isinstance(val, bool) or not isinstance(val, (int, float)):
        raise ValueError(f"'{key}' must be an integer, got {val!r}")
    if isinstance(val, float):
        if not val.is_integer():
            raise ValueError(f"'{key}' must be an integer, got {val!r}")
        val = int(val)
    return val


def hsv_from_record(record: Dict) -> HSV:
    """Read the integer hue/saturation/value of a record. Raises ValueError."""
    return HSV(
        _int_field(record, "hue"),
        _int_field(record, "saturation"),
        _int_field(record, "value"),
    )


def _sample_hsv(sample) -> Optional[HSV]:
    if isinstance(sample, Mapping):
        try:
            return hsv_from_record(sample)
        except ValueError:
            return None
    return getattr(sample, "hsv", None)


def _sample_character(sample) -> Optional[str]:
    if isinstance(sample, Mapping):
        ch = sample.get("character")
    else:
        ch = getattr(sample, "character", None)
    if isinstance(ch, str) and ch:
        return ch
    return None


class ColorCodec:
    """Stateless text <-> color sample codec over a character table."""

    def __init__(self, table: CharacterColorTable = DEFAULT_TABLE):
        self.table = table

    def encode(self, text: str, options: EncodeOptions = DEFAULT_OPTIONS) -> List[ColorSample]:
        samples = []
        for ch in text:
            hsv = self.table.lookup(ch)
            if hsv is None:
                if not options.include_unmapped:
                    continue
                hsv = UNMAPPED_SENTINEL
            samples.append(make_sample(ch, hsv))
        return samples

    def decode(self, samples: Iterable) -> str:
        """
        Rebuild text from samples by their HSV identity.

        Samples may be ColorSample values or records with hue, saturation
        and value keys. Colors missing from the table, and samples without
        a usable color, fall back to the sample's own character, then to
        '?'. Hex is never consulted: rounding to 8-bit channels cannot be
        inverted back to the integer HSV.
        """
        out = []
        for sample in samples:
            hsv = _sample_hsv(sample)
            ch = None if hsv is None else self.table.reverse_lookup(hsv)
            if ch is None:
                ch = _sample_character(sample) or c.UNKNOWN_SYMBOL
            out.append(ch)
        return "".join(out)


DEFAULT_CODEC = ColorCodec()


def encode(text: str, options: EncodeOptions = DEFAULT_OPTIONS) -> List[ColorSample]:
    """Encode `text` with the canonical table."""
    return DEFAULT_CODEC.encode(text, options)


def decode(samples: Iterable) -> str:
    """Decode samples with the canonical table."""
    return DEFAULT_CODEC.decode(samples)
