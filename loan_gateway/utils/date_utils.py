"""Date manipulation utilities"""

from datetime import date


def months_between(start: date, end: date) -> int:
    """
    Count whole calendar months from start to end.

    A month is only complete once the day of month has been reached again,
    so 2000-01-31 -> 2000-02-29 is 0 months. Negative when end precedes start.
    """
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if months > 0 and end.day < start.day:
        months -= 1
    elif months < 0 and end.day > start.day:
        months += 1
    return months
