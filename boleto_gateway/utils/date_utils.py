"""Date manipulation utilities"""

from datetime import date, datetime


def as_date(value: date) -> date:
    """Drop the time of day from a datetime; plain dates pass through"""
    if isinstance(value, datetime):
        return value.date()
    return value


def days_between(start: date, end: date) -> int:
    """Signed number of days from start to end, both taken at midnight"""
    return (as_date(end) - as_date(start)).days
