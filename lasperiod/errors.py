"""
Error types raised while fetching and parsing the calendar page.

Every failure is a ScraperError. The subclasses form a closed set so callers
can branch on the kind instead of parsing messages:

    FetchError        the page could not be downloaded
    StructureError    the page did not have the expected shape
    NumberParseError  a captured digit group was not an integer
    DateParseError    a token or derived boundary was not a valid date
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple


class ScraperError(Exception):
    """
    Base class for all errors raised by lasperiod.
    """


class FetchError(ScraperError):
    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch HTML from {url}: {reason}")
        self.url = url
        self.reason = reason


class StructureError(ScraperError):
    """
    Raised when a row or the page does not look like the calendar we expect.

    `tokens` holds the offending tokens (if any) for diagnostics,
    `expected` / `actual` the token counts when a count check failed.
    """

    def __init__(
        self,
        message: str,
        tokens: Sequence[str] = (),
        expected: Optional[int] = None,
        actual: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.tokens: Tuple[str, ...] = tuple(tokens)
        self.expected = expected
        self.actual = actual


class YearNotFoundError(StructureError):
    def __init__(self) -> None:
        super().__init__("No 'Läsår YYYY/YYYY' marker found in document")


class NumberParseError(ScraperError):
    def __init__(self, value: str, what: str) -> None:
        super().__init__(f"Failed to parse {what} {value!r} as an integer")
        self.value = value
        self.what = what


class DateParseError(ScraperError):
    def __init__(self, value: str, role: str, reason: str) -> None:
        super().__init__(f"Failed to parse {role} {value!r}: {reason}")
        self.value = value
        self.role = role
        self.reason = reason
