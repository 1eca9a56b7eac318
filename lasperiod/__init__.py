"""
Scrape the Chalmers academic calendar into StudyYear / StudyPeriod objects.

    from lasperiod import get_study_year, get_study_periods

    year = get_study_year()
    periods = get_study_periods()
"""

from lasperiod.errors import (
    DateParseError,
    FetchError,
    NumberParseError,
    ScraperError,
    StructureError,
    YearNotFoundError,
)
from lasperiod.model import StudyPeriod, StudyYear
from lasperiod.parse import YearFallback, parse_study_periods, parse_study_year
from lasperiod.scrape import DEFAULT_URL, get_study_periods, get_study_year

__all__ = [
    "DEFAULT_URL",
    "DateParseError",
    "FetchError",
    "NumberParseError",
    "ScraperError",
    "StructureError",
    "StudyPeriod",
    "StudyYear",
    "YearFallback",
    "YearNotFoundError",
    "get_study_periods",
    "get_study_year",
    "parse_study_periods",
    "parse_study_year",
]
