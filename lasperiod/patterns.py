"""
Compiled regular expressions shared by the parser.

Compiled once at import time and only ever read afterwards.
"""

from __future__ import annotations

import re

# Literal words as printed on the Swedish calendar page
PERIOD_MARKER = "Läsperiod"
YEAR_MARKER = "Läsår"

# Whole token must be a date, e.g. "2024-08-26"
DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# "Läsperiod 1" -> group(1) == "1"
PERIOD_LABEL_RE = re.compile(PERIOD_MARKER + r"\s([0-9])")

# "Läsår 2024/2025" -> group("year") == "2024"
YEAR_RE = re.compile(YEAR_MARKER + r"\s(?P<year>[0-9]{4})/[0-9]{4}")

DATE_FORMAT = "%Y-%m-%d"


def is_date_token(token: str) -> bool:
    return DATE_RE.fullmatch(token) is not None


def is_period_label(token: str) -> bool:
    return PERIOD_LABEL_RE.search(token) is not None
