"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the application.
All datetimes are timezone-aware UTC.

Functions:
- now(): Returns timezone-aware datetime object
- today(): Returns the current calendar date
- parse_date(): Parse an ISO 8601 date string (YYYY-MM-DD)
- to_iso_date(): Convert a date to its ISO 8601 string
"""
from datetime import date, datetime, timezone
from typing import Optional


def now() -> datetime:
    """
    Get current datetime in UTC.

    Returns:
        timezone-aware datetime object
    """
    return datetime.now(timezone.utc)


def today() -> date:
    """Current date in UTC."""
    return now().date()


def parse_date(value: Optional[str]) -> Optional[date]:
    """
    Parse an ISO 8601 date string.

    Args:
        value: Date string such as "2019-04-17"

    Returns:
        date object, or None if value is empty

    Raises:
        ValueError: If value is not a valid YYYY-MM-DD date
    """
    if not value:
        return None
    return datetime.strptime(value.strip(), "%Y-%m-%d").date()


def to_iso_date(value: Optional[date]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat()
