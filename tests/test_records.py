#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tests/test_records.py

import json

import pytest

from chromacipher.core.codec import decode, encode
from chromacipher.core.table import DEFAULT_TABLE, HSV
from chromacipher.shared.records import (
    dump_records,
    load_records,
    record_to_sample,
    sample_to_record,
    table_to_records,
)


def test_record_shape():
    record = sample_to_record(encode("H")[0])
    assert record == {
        "character": "H",
        "hue": 234,
        "saturation": 84,
        "value": 65,
        "hexColor": "1b28a6",
    }


def test_hex_is_recomputed_from_hsv():
    sample = record_to_sample({"hue": 234, "saturation": 84, "value": 65, "hexColor": "000000"})
    assert sample.hex == "1b28a6"
    assert sample.character is None


def test_integral_floats_are_accepted():
    sample = record_to_sample({"hue": 234.0, "saturation": 84, "value": 65.0})
    assert sample.hsv == HSV(234, 84, 65)


def test_json_round_trip_keeps_text():
    text = "Hi! (ok) €"
    restored = load_records(dump_records(encode(text)))
    # "(" comes back as its pair ")"
    assert decode(restored) == "Hi! )ok) €"


def test_pretty_output_is_valid_json():
    data = json.loads(dump_records(encode("ab"), pretty=True))
    assert [r["character"] for r in data] == ["a", "b"]


@pytest.mark.parametrize(
    "record",
    [
        {"saturation": 84, "value": 65},
        {"hue": 234.5, "saturation": 84, "value": 65},
        {"hue": True, "saturation": 84, "value": 65},
        {"hue": "234", "saturation": 84, "value": 65},
        {"hue": 234, "saturation": 84, "value": 65, "character": 7},
        ["234", "84", "65"],
    ],
)
def test_malformed_records_raise(record):
    with pytest.raises(ValueError):
        record_to_sample(record)


def test_load_records_requires_list():
    with pytest.raises(ValueError):
        load_records('{"hue": 1}')
    with pytest.raises(ValueError):
        load_records("not json")


def test_table_records():
    records = table_to_records(DEFAULT_TABLE.entries())
    assert len(records) == len(DEFAULT_TABLE)
    assert records[0]["character"] == "A"
    assert records[-1]["character"] == "}"


def test_out_of_range_color_falls_back_to_character():
    text = json.dumps([
        {"character": "H", "hue": 234, "saturation": 84, "value": 65},
        {"character": "x", "hue": 400, "saturation": 84, "value": 65},
        {"hue": 10, "saturation": 84, "value": -3},
    ])
    samples = load_records(text)
    assert samples[1].hsv == HSV(400, 84, 65)
    assert samples[1].rgb is None and samples[1].hex is None
    assert decode(samples) == "Hx?"
