#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromacipher/logic/table/renderer.py

import json

from chromacipher.core import config as c
from chromacipher.core.conversions import hsv_to_hex
from chromacipher.core.table import CharacterColorTable
from chromacipher.shared.formatting import display_char, format_colorspace
from chromacipher.shared.preview import print_color_block
from chromacipher.shared.records import table_to_records


def render_table(table: CharacterColorTable, fmt: str) -> None:
    """Print the canonical table in definition order."""
    if fmt in ("json", "prettyjson"):
        records = table_to_records(table.entries())
        indent = 4 if fmt == "prettyjson" else None
        print(json.dumps(records, indent=indent, ensure_ascii=False))
        return

    print()
    for ch, hsv in table.entries():
        label = f"{c.BOLD_WHITE}{display_char(ch)}{c.RESET}"
        print_color_block(hsv_to_hex(*hsv), label, end="")
        note = ""
        aliases = [a for a in table.aliases(ch) if a != ch]
        if aliases:
            shared = ", ".join(display_char(a) for a in aliases)
            note = f"  {c.MSG_BOLD_COLORS['warning']}shares color with {shared}{c.RESET}"
        print(f"  {c.MSG_BOLD_COLORS['dim']}{format_colorspace('hsv', *hsv)}{c.RESET}{note}")
    print()
