from __future__ import annotations

from typing import List

import requests

from lasperiod.errors import FetchError
from lasperiod.model import StudyPeriod, StudyYear
from lasperiod.parse import YearFallback, parse_study_periods, parse_study_year


# ---------------------------------------------------------------------------
# URLs & defaults
# ---------------------------------------------------------------------------

DEFAULT_URL = (
    "https://www.chalmers.se/utbildning/dina-studier/"
    "planera-och-genomfora-studier/datum-och-tider-for-lasaret/"
)
DEFAULT_TIMEOUT = 30.0


# ---------------------------------------------------------------------------
# Core logic
# ---------------------------------------------------------------------------


def fetch_html(url: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """
    Download one page and return its body as text.

    Any transport or HTTP status error is raised as FetchError.
    """
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(url, str(exc)) from exc

    # no charset in Content-Type: requests would fall back to ISO-8859-1
    if "charset" not in resp.headers.get("Content-Type", "").lower():
        resp.encoding = "utf-8"
    return resp.text


def get_study_year(
    url: str = DEFAULT_URL,
    fallback: YearFallback = YearFallback.STRICT,
    timeout: float = DEFAULT_TIMEOUT,
) -> StudyYear:
    """
    Fetch the calendar page and return its academic year.

    By default a page without a "Läsår YYYY/YYYY" marker is an error;
    pass fallback=YearFallback.TODAY to use the current year instead.
    """
    return parse_study_year(fetch_html(url, timeout=timeout), fallback=fallback)


def get_study_periods(
    url: str = DEFAULT_URL,
    fallback: YearFallback = YearFallback.TODAY,
    timeout: float = DEFAULT_TIMEOUT,
) -> List[StudyPeriod]:
    """
    Fetch the calendar page and return its study periods in page order.

    Every period gets the page-wide year; if the page has none, the current
    year is used unless fallback=YearFallback.STRICT.
    """
    return parse_study_periods(fetch_html(url, timeout=timeout), fallback=fallback)
