"""
Central data model definitions.

StudyYear and StudyPeriod are built fresh for every query and never mutated,
so both are frozen dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict


@dataclass(frozen=True)
class StudyYear:
    """
    One academic year, e.g. year=2024 for "Läsår 2024/2025".

    start_date is August 1 of `year`, end_date is July 31 of `year + 1`.
    """

    year: int
    start_date: date
    end_date: date

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
        }


@dataclass(frozen=True)
class StudyPeriod:
    """
    One "läsperiod" row of the calendar table.

    `year` is the page-wide academic year, not something read from the row.
    start_date <= end_date is not checked.
    """

    year: int
    period: int
    start_date: date
    end_date: date

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "period": self.period,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
        }
