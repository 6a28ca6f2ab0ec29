"""Date manipulation utilities"""

from datetime import date, datetime

CLERK_DATE_FORMAT = "%m/%d/%y"  # accepts unpadded input such as 7/2/20


def parse_checkout_date(value: str) -> date:
    """
    Parse a clerk-entered checkout date.

    Accepts M/d/yy (e.g. "7/2/20") and ISO "2020-07-02".

    Raises:
        ValueError: If the text matches neither format
    """
    text = value.strip()
    try:
        return datetime.strptime(text, CLERK_DATE_FORMAT).date()
    except ValueError:
        return date.fromisoformat(text)


def format_short_date(value: date) -> str:
    """Zero-padded MM/DD/YY"""
    return value.strftime(CLERK_DATE_FORMAT)
