#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromacipher/shared/clamping.py

from chromacipher.core import config as c


def _clamp255(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(c.RGB_MAX, v))
