"""Shared value normalizers for request data."""

from datetime import date, datetime
from typing import Any

DATE_FIELDS = ("date_of_joining", "date_of_birth")


def normalize_date(value: date | datetime | str, field_name: str = "date") -> date:
    """
    Normalize a date-like value to a calendar date.

    Accepts date objects, datetimes (time of day is dropped) and ISO 8601
    strings, with or without a time part (e.g. "2021-03-04" or
    "2021-03-04T00:00:00.000Z").

    Args:
        value: Value to normalize
        field_name: Name of the field for error messages

    Returns:
        The calendar date

    Raises:
        ValueError: If the value is not a recognizable date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        # A time part follows the date after "T" or a space
        if len(text) > 10 and text[10] in "T ":
            try:
                return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
            except ValueError:
                pass
        raise ValueError(f"{field_name} must be an ISO 8601 date, got '{value}'")

    raise ValueError(f"{field_name} must be a date, got {type(value).__name__}")


def normalize_date_fields(data: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of data with every supplied date field normalized."""
    normalized = dict(data)
    for key in DATE_FIELDS:
        if normalized.get(key) is not None:
            normalized[key] = normalize_date(normalized[key], key)
    return normalized
