#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromacipher/shared/logger.py

import sys
import argparse

from chromacipher.core import config as c


def log(level: str, message: str) -> None:
    level = str(level).lower()
    stream = sys.stdout if level in c.STDOUT_LOG_LEVELS else sys.stderr
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)


class ChromacipherArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Logs the error prefixed with the (sub)command that rejected it,
        then exits with the standard CLI error code 2.
        """
        log('error', f"{self.prog}: {message}")
        sys.exit(2)
