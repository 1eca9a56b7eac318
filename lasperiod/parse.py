"""
Parsing (HTML -> StudyYear / StudyPeriod).

- Finds the academic year in the "Läsår YYYY/YYYY" marker
- Selects every <tr> whose text contains "Läsperiod"
- Turns EACH such row into exactly ONE StudyPeriod

Row format rules (DO NOT CHANGE):
- After trimming, the first text in the row is the "Läsperiod N" label
- Exactly 3 tokens survive filtering: label, start date, end date
- One bad row fails the whole page, no partial results
"""

from __future__ import annotations

import enum
from datetime import date, datetime
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from lasperiod.errors import (
    DateParseError,
    NumberParseError,
    StructureError,
    YearNotFoundError,
)
from lasperiod.model import StudyPeriod, StudyYear
from lasperiod.patterns import (
    DATE_FORMAT,
    PERIOD_LABEL_RE,
    PERIOD_MARKER,
    YEAR_RE,
    is_date_token,
    is_period_label,
)

EXPECTED_ROW_TOKENS = 3


class YearFallback(enum.Enum):
    """
    What to do when the page has no year marker.

    STRICT raises YearNotFoundError, TODAY uses the current calendar year.
    """

    STRICT = "strict"
    TODAY = "today"


# ---------------------------------------------------------------------------
# Year extraction
# ---------------------------------------------------------------------------


def find_year(text: str) -> Optional[int]:
    """
    Return the first year of the first "Läsår YYYY/YYYY" marker, or None.
    """
    match = YEAR_RE.search(text)
    if not match:
        return None

    raw = match.group("year")
    try:
        return int(raw)
    except ValueError as exc:
        raise NumberParseError(raw, "year") from exc


def resolve_year(text: str, fallback: YearFallback) -> int:
    year = find_year(text)
    if year is not None:
        return year
    if fallback is YearFallback.TODAY:
        return date.today().year
    raise YearNotFoundError()


def study_year_for(year: int) -> StudyYear:
    """
    Derive the Aug 1 .. Jul 31 boundaries of an academic year.
    """
    try:
        start = date(year, 8, 1)
    except (ValueError, OverflowError) as exc:
        raise DateParseError(str(year), "start of study year", str(exc)) from exc
    try:
        end = date(year + 1, 7, 31)
    except (ValueError, OverflowError) as exc:
        raise DateParseError(str(year + 1), "end of study year", str(exc)) from exc
    return StudyYear(year=year, start_date=start, end_date=end)


# ---------------------------------------------------------------------------
# Row helpers
# ---------------------------------------------------------------------------


def find_period_rows(soup: BeautifulSoup) -> List[Tag]:
    """
    All <tr> elements mentioning "Läsperiod", in document order.
    """
    return [tr for tr in soup.find_all("tr") if PERIOD_MARKER in tr.get_text()]


def clean_tokens(row: Tag) -> List[str]:
    """
    Trimmed, non-empty text nodes of a row (order preserved).
    """
    return list(row.stripped_strings)


def filter_tokens(tokens: List[str]) -> List[str]:
    """
    Keep only date tokens and "Läsperiod N" labels.
    """
    return [t for t in tokens if is_date_token(t) or is_period_label(t)]


def _parse_date(token: str, role: str) -> date:
    try:
        return datetime.strptime(token, DATE_FORMAT).date()
    except ValueError as exc:
        raise DateParseError(token, role, str(exc)) from exc


# ---------------------------------------------------------------------------
# Period parsing (CORE LOGIC)
# ---------------------------------------------------------------------------


def parse_period_tokens(cleaned: List[str], year: int) -> StudyPeriod:
    """
    Build one StudyPeriod from the cleaned tokens of one row.

    The period number is read from cleaned[0], not from the filtered list:
    the label is assumed to be the first text in the row.
    """
    filtered = filter_tokens(cleaned)

    if len(filtered) != EXPECTED_ROW_TOKENS:
        raise StructureError(
            f"Expected {EXPECTED_ROW_TOKENS} elements in filtered text, "
            f"got {len(filtered)}: {filtered!r}",
            tokens=filtered,
            expected=EXPECTED_ROW_TOKENS,
            actual=len(filtered),
        )

    match = PERIOD_LABEL_RE.search(cleaned[0])
    if not match:
        raise StructureError(
            f"First text in row is not a '{PERIOD_MARKER} N' label: {cleaned[0]!r}",
            tokens=cleaned,
        )

    period_str = match.group(1)
    try:
        period = int(period_str)
    except ValueError as exc:
        raise NumberParseError(period_str, "period") from exc

    return StudyPeriod(
        year=year,
        period=period,
        start_date=_parse_date(filtered[1], "start date"),
        end_date=_parse_date(filtered[2], "end date"),
    )


def parse_period_row(row: Tag, year: int) -> StudyPeriod:
    return parse_period_tokens(clean_tokens(row), year)


# ---------------------------------------------------------------------------
# Page parsing
# ---------------------------------------------------------------------------


def parse_study_year(html: str, fallback: YearFallback = YearFallback.STRICT) -> StudyYear:
    """
    Parse the academic year of an already fetched calendar page.
    """
    return study_year_for(resolve_year(html, fallback))


def parse_study_periods(html: str, fallback: YearFallback = YearFallback.TODAY) -> List[StudyPeriod]:
    """
    Parse all study periods of an already fetched calendar page.

    Raises on the first row that cannot be parsed.
    """
    year = resolve_year(html, fallback)
    soup = BeautifulSoup(html, "lxml")
    return [parse_period_row(tr, year) for tr in find_period_rows(soup)]
