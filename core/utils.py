import datetime
from typing import Optional

import config

# Ages use a fixed 365-day year; leap days are ignored on purpose.
DAYS_PER_YEAR = 365


def parse_dob(text: str) -> datetime.date:
    """
    Parses a date of birth in YYYY-MM-DD form.
    Impossible dates (month 13, day 32, Feb 30) raise ValueError.
    """
    return datetime.datetime.strptime(text.strip(), config.DATE_FORMAT).date()


def format_dob(dob: datetime.date) -> str:
    return dob.strftime(config.DATE_FORMAT)


def calculate_age(dob: datetime.date, today: Optional[datetime.date] = None) -> int:
    """
    Returns the age in whole 365-day years.
    Example: born 2000-01-01, today 2018-01-01 -> 18 (6575 days // 365).
    """
    if today is None:
        today = datetime.date.today()
    return (today - dob).days // DAYS_PER_YEAR


def format_member_id(value: int) -> str:
    """Zero-pads a numeric ID to the roster width (42 -> '00000042')."""
    return f"{value:0{config.MEMBER_ID_WIDTH}d}"
