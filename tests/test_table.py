#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tests/test_table.py

from collections import defaultdict

from chromacipher.core.table import (
    DEFAULT_TABLE,
    HSV,
    UNMAPPED_SENTINEL,
    CharacterColorTable,
)


def test_size():
    # 26 + 26 + 10 + space and 18 symbols
    assert len(DEFAULT_TABLE) == 81


def test_letters_and_digits():
    assert DEFAULT_TABLE.lookup("A") == HSV(234, 84, 30)
    assert DEFAULT_TABLE.lookup("H") == HSV(234, 84, 65)
    assert DEFAULT_TABLE.lookup("Z") == HSV(234, 84, 155)
    assert DEFAULT_TABLE.lookup("a") == HSV(90, 84, 30)
    assert DEFAULT_TABLE.lookup("z") == HSV(90, 84, 155)
    assert DEFAULT_TABLE.lookup("0") == HSV(1, 84, 30)
    assert DEFAULT_TABLE.lookup("9") == HSV(1, 84, 165)


def test_punctuation():
    assert DEFAULT_TABLE.lookup(" ") == HSV(0, 84, 50)
    assert DEFAULT_TABLE.lookup(".") == HSV(300, 84, 60)
    assert DEFAULT_TABLE.lookup("!") == HSV(15, 84, 75)
    assert DEFAULT_TABLE.lookup('"') == HSV(135, 84, 95)
    assert DEFAULT_TABLE.lookup("\\") == HSV(255, 84, 115)
    assert DEFAULT_TABLE.lookup("}") == HSV(345, 84, 130)


def test_saturation_is_constant():
    assert {hsv.saturation for _, hsv in DEFAULT_TABLE.entries()} == {84}
    assert UNMAPPED_SENTINEL == HSV(0, 0, 128)


def test_only_brackets_share_colors():
    by_color = defaultdict(list)
    for ch, hsv in DEFAULT_TABLE.entries():
        by_color[hsv].append(ch)
    shared = sorted(tuple(chars) for chars in by_color.values() if len(chars) > 1)
    assert shared == [("(", ")"), ("[", "]"), ("{", "}")]


def test_reverse_lookup_prefers_last_definition():
    assert DEFAULT_TABLE.reverse_lookup(HSV(285, 84, 120)) == ")"
    assert DEFAULT_TABLE.reverse_lookup((315, 84, 125)) == "]"
    assert DEFAULT_TABLE.reverse_lookup((345, 84, 130)) == "}"


def test_reverse_lookup_is_exact():
    assert DEFAULT_TABLE.reverse_lookup((234, 84, 65)) == "H"
    assert DEFAULT_TABLE.reverse_lookup((234, 84, 66)) is None
    assert DEFAULT_TABLE.reverse_lookup((234, 83, 65)) is None
    assert DEFAULT_TABLE.reverse_lookup(UNMAPPED_SENTINEL) is None
    assert DEFAULT_TABLE.reverse_lookup((1, 2)) is None


def test_missing_character():
    assert DEFAULT_TABLE.lookup("€") is None
    assert DEFAULT_TABLE.lookup("@") is None
    assert "€" not in DEFAULT_TABLE
    assert "q" in DEFAULT_TABLE


def test_aliases():
    assert DEFAULT_TABLE.aliases("(") == ("(", ")")
    assert DEFAULT_TABLE.aliases("}") == ("{", "}")
    assert DEFAULT_TABLE.aliases("A") == ("A",)
    assert DEFAULT_TABLE.aliases("€") == ()


def test_construction_is_deterministic():
    first = CharacterColorTable()
    second = CharacterColorTable()
    assert first.entries() == second.entries()
    for ch in first:
        assert first.lookup(ch) == second.lookup(ch)


def test_iteration_order():
    chars = list(DEFAULT_TABLE)
    assert chars[0] == "A"
    assert chars[26] == "a"
    assert chars[52] == "0"
    assert chars[62] == " "
    assert chars[-1] == "}"
