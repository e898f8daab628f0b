#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromacipher/subcommands/command_registry.py

from . import (
    encode,
    decode,
    table,
    convert
)

SUBCOMMANDS = {
    'encode': encode,
    'decode': decode,
    'table': table,
    'convert': convert
}
