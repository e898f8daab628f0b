#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromacipher/core/config.py

# ==========================================
# Color Conversion Constants
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 1024

UNIT = 1.0                         # Normalized maximum
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
PERCENT_MAX = 100.0                # Saturation/value percent scale
HSV_HUE_MOD = 6.0                  # Number of 60-degree hue sectors
SECTOR_MOD = 2.0                   # Sector parity divisor for the x component
ROUND_HALF = 0.5                   # Offset for round-half-up channel rounding

# ==========================================
# Canonical Character Table
# ==========================================

TABLE_SATURATION = 84              # Saturation shared by every mapped character
VALUE_BASE = 30                    # Value of the first letter/digit
LETTER_VALUE_STEP = 5              # Value increment per letter
DIGIT_VALUE_STEP = 15              # Value increment per digit

UPPERCASE_HUE = 234
LOWERCASE_HUE = 90
DIGIT_HUE = 1

UPPERCASE_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE_CHARS = "abcdefghijklmnopqrstuvwxyz"
DIGIT_CHARS = "0123456789"

# (character, hue, value) in definition order; later entries win on shared colors
PUNCTUATION_ENTRIES = (
    (" ", 0, 50),
    (".", 300, 60),
    (",", 60, 65),
    ("?", 180, 70),
    ("!", 15, 75),
    (":", 45, 80),
    (";", 75, 85),
    ("'", 105, 90),
    ('"', 135, 95),
    ("-", 165, 100),
    ("_", 195, 105),
    ("/", 225, 110),
    ("\\", 255, 115),
    ("(", 285, 120),
    (")", 285, 120),
    ("[", 315, 125),
    ("]", 315, 125),
    ("{", 345, 130),
    ("}", 345, 130),
)

# Gray assigned to characters outside the table
SENTINEL_HUE = 0
SENTINEL_SATURATION = 0
SENTINEL_VALUE = 128

UNKNOWN_SYMBOL = "?"               # Decode output for colors with no known character

# ==========================================
# CLI UI & Data Structures
# ==========================================

# Keys of the boundary record exchanged with renderers
RECORD_KEYS = [
    'character',
    'hue',
    'saturation',
    'value',
    'hexColor',
]

OUTPUT_FORMATS = ["blocks", "json", "prettyjson"]
TABLE_FORMATS = ["text", "json", "prettyjson"]

MAX_TEXT_LENGTH = 10000            # Longest message accepted on the command line

# Printable names for characters that are invisible in a listing
DISPLAY_NAMES = {
    " ": "space",
}

# Log levels printed to stdout; all others go to stderr
STDOUT_LOG_LEVELS = ("info", "success")

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
