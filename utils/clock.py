# utils/clock.py
# Date helpers used for expiry checks.
import re
from datetime import datetime, timedelta


class InvalidDateFormat(ValueError):
    pass


def now() -> datetime:
    return datetime.now()


def parse_date(date_str: str) -> datetime:
    """
    Parse a 'YYYY-MM-DD' string into a naive datetime at midnight.

    Only the ranges are checked (year >= 1900, month 1-12, day 1-31).
    Day-of-month is not checked against the month, so "2025-02-31" is
    accepted and rolls over into March.
    """
    parts = str(date_str).strip().split("-")
    try:
        if len(parts) != 3 or not all(re.fullmatch(r"\d+", p) for p in parts):
            raise ValueError(date_str)
        year, month, day = (int(p) for p in parts)
    except ValueError:
        raise InvalidDateFormat("Invalid date format. Use YYYY-MM-DD.") from None

    if year < 1900 or not 1 <= month <= 12 or not 1 <= day <= 31:
        raise InvalidDateFormat("Invalid date format. Use YYYY-MM-DD.")

    # day overflow carries into the following month
    return datetime(year, month, 1) + timedelta(days=day - 1)
