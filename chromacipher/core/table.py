#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromacipher/core/table.py

from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple

from . import config as c


class HSV(NamedTuple):
    """Integer hue (degrees), saturation (percent) and raw value scalar."""
    hue: int
    saturation: int
    value: int


UNMAPPED_SENTINEL = HSV(c.SENTINEL_HUE, c.SENTINEL_SATURATION, c.SENTINEL_VALUE)


def _letter_entries(chars: str, hue: int) -> List[Tuple[str, HSV]]:
    return [
        (ch, HSV(hue, c.TABLE_SATURATION, c.VALUE_BASE + c.LETTER_VALUE_STEP * i))
        for i, ch in enumerate(chars)
    ]


def build_entries() -> List[Tuple[str, HSV]]:
    """Generate the canonical (character, HSV) pairs in definition order."""
    entries = []
    entries.extend(_letter_entries(c.UPPERCASE_CHARS, c.UPPERCASE_HUE))
    entries.extend(_letter_entries(c.LOWERCASE_CHARS, c.LOWERCASE_HUE))
    entries.extend(
        (ch, HSV(c.DIGIT_HUE, c.TABLE_SATURATION, c.VALUE_BASE + c.DIGIT_VALUE_STEP * i))
        for i, ch in enumerate(c.DIGIT_CHARS)
    )
    entries.extend(
        (ch, HSV(hue, c.TABLE_SATURATION, value))
        for ch, hue, value in c.PUNCTUATION_ENTRIES
    )
    return entries


class CharacterColorTable:
    """
    Fixed character -> HSV mapping and its inverse.

    The inverse is filled in definition order, so characters sharing a
    color ('(' and ')', '[' and ']', '{' and '}') resolve to the one
    defined last. Both lookups return None for anything not in the table.
    """

    def __init__(self):
        self._entries: Tuple[Tuple[str, HSV], ...] = tuple(build_entries())
        self._forward: Dict[str, HSV] = {}
        self._reverse: Dict[HSV, str] = {}
        for ch, hsv in self._entries:
            self._forward[ch] = hsv
            self._reverse[hsv] = ch

    def lookup(self, character: str) -> Optional[HSV]:
        return self._forward.get(character)

    def reverse_lookup(self, hsv) -> Optional[str]:
        try:
            return self._reverse.get(HSV(*hsv))
        except TypeError:
            return None

    def aliases(self, character: str) -> Tuple[str, ...]:
        """All characters mapped to the same color as `character`."""
        hsv = self.lookup(character)
        if hsv is None:
            return ()
        return tuple(ch for ch, other in self._entries if other == hsv)

    def entries(self) -> Tuple[Tuple[str, HSV], ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, character) -> bool:
        return character in self._forward

    def __iter__(self) -> Iterator[str]:
        return (ch for ch, _ in self._entries)


# Built once per process, read-only afterwards
DEFAULT_TABLE = CharacterColorTable()
