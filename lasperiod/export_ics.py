"""
iCalendar (.ics) export.

Each study period becomes one all-day event that can be imported into:
- Google Calendar
- Outlook
- Apple Calendar
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Iterable

from lasperiod.model import StudyPeriod


def _ics_escape(text: str) -> str:
    """
    Escape text for ICS fields (very small subset, sufficient for our use).
    """
    return (
        text.replace("\\", "\\\\").replace("\r\n", "\\n").replace("\n", "\\n").replace(";", "\\;").replace(",", "\\,")
    )


def _summary(period: StudyPeriod) -> str:
    return f"Läsperiod {period.period} {period.year}/{period.year + 1}"


def export_periods_to_ics(periods: Iterable[StudyPeriod], out_path: str | Path) -> int:
    """
    Export study periods to an .ics file. Returns number of exported events.
    """
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    lines: list[str] = []
    lines.append("BEGIN:VCALENDAR")
    lines.append("VERSION:2.0")
    lines.append("PRODID:-//lasperiod//EN")
    lines.append("CALSCALE:GREGORIAN")

    dtstamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")

    count = 0
    for p in periods:
        # all-day events: DTEND is exclusive
        dtstart = p.start_date.strftime("%Y%m%d")
        dtend = (p.end_date + timedelta(days=1)).strftime("%Y%m%d")
        uid = f"lasperiod-{p.year}-lp{p.period}-{dtstart}"

        lines.append("BEGIN:VEVENT")
        lines.append(f"UID:{_ics_escape(uid)}")
        lines.append(f"DTSTAMP:{dtstamp}")
        lines.append(f"DTSTART;VALUE=DATE:{dtstart}")
        lines.append(f"DTEND;VALUE=DATE:{dtend}")
        lines.append(f"SUMMARY:{_ics_escape(_summary(p))}")
        lines.append("END:VEVENT")
        count += 1

    lines.append("END:VCALENDAR")

    # ICS standard uses CRLF
    out.write_text("\r\n".join(lines) + "\r\n", encoding="utf-8")
    return count
