#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromacipher/shared/records.py

import json
from typing import Dict, Iterable, List

from chromacipher.core import config as c
from chromacipher.core.codec import ColorSample, hsv_from_record, make_sample


def sample_to_record(sample: ColorSample) -> Dict:
    """Flatten a sample into the record shape handed to renderers."""
    values = (sample.character, sample.hsv.hue, sample.hsv.saturation, sample.hsv.value, sample.hex)
    return dict(zip(c.RECORD_KEYS, values))


def record_to_sample(record: Dict) -> ColorSample:
    """
    Rebuild a sample from a record. The HSV triple is authoritative;
    `hexColor` is ignored and recomputed, `character` is optional.
    Triples outside the conversion domain are kept with no rgb or hex.
    """
    if not isinstance(record, dict):
        raise ValueError(f"record must be an object, got {type(record).__name__}")
    hsv = hsv_from_record(record)
    ch = record.get("character")
    if ch is not None and not isinstance(ch, str):
        raise ValueError(f"'character' must be a string, got {ch!r}")
    return make_sample(ch or None, hsv)


def dump_records(samples: Iterable[ColorSample], pretty: bool = False) -> str:
    records = [sample_to_record(s) for s in samples]
    if pretty:
        return json.dumps(records, indent=4, ensure_ascii=False)
    return json.dumps(records, ensure_ascii=False)


def load_records(text: str) -> List[ColorSample]:
    """Parse a JSON list of records. Raises ValueError on any malformed input."""
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("expected a JSON list of records")
    return [record_to_sample(rec) for rec in data]


def table_to_records(entries) -> List[Dict]:
    """Records for every table entry, in definition order."""
    return [sample_to_record(make_sample(ch, hsv)) for ch, hsv in entries]
