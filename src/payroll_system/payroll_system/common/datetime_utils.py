from __future__ import annotations

from datetime import date, datetime, timedelta

from ..core.constants import DAYS_PER_WEEK


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def week_id_for(start: date) -> str:
    """Week identifier in ``YYYY-Www`` form.

    Counted the way the payroll sheets always have: week 1 is the one holding
    January 1st and weeks roll over on Sunday.
    """
    jan1 = date(start.year, 1, 1)
    day_of_year = (start - jan1).days + 1
    jan1_weekday = (jan1.weekday() + 1) % 7  # Sunday == 0
    week_num = -(-(day_of_year + jan1_weekday) // 7)
    return f"{start.year}-W{week_num:02d}"


def week_end_for(start: date) -> date:
    return start + timedelta(days=DAYS_PER_WEEK - 1)


def month_label(year: int, month: int) -> str:
    return date(year, month, 1).strftime("%B %Y")
