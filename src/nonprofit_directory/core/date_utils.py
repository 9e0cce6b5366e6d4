"""
Date and timezone utilities.

Centralizes all date/time operations with proper timezone handling.
"""

from datetime import datetime
from typing import Any, Optional
import pytz
from pytz.tzinfo import BaseTzInfo


class DateUtils:
    """Utilities for date and timezone handling."""

    @staticmethod
    def parse_timezone(timezone_str: str) -> BaseTzInfo:
        """
        Parse timezone string to pytz timezone object.

        Args:
            timezone_str: Timezone string (e.g., 'America/Los_Angeles', 'UTC')

        Returns:
            pytz timezone object

        Raises:
            ValueError: If timezone is invalid
        """
        try:
            return pytz.timezone(timezone_str)
        except pytz.exceptions.UnknownTimeZoneError:
            raise ValueError(f"Invalid timezone: {timezone_str}")

    @staticmethod
    def now_utc() -> datetime:
        """Return the current time as an aware UTC datetime."""
        return datetime.now(pytz.UTC)

    @staticmethod
    def to_utc(dt: datetime) -> datetime:
        """
        Convert datetime to UTC.

        Args:
            dt: Datetime object (can be naive or aware)

        Returns:
            Datetime in UTC (timezone-aware)
        """
        if dt.tzinfo is None:
            # Assume UTC if no timezone
            return pytz.UTC.localize(dt)
        return dt.astimezone(pytz.UTC)

    @classmethod
    def parse_timestamp(cls, value: Any) -> Optional[datetime]:
        """
        Parse a datastore timestamp into an aware UTC datetime.

        Accepts ISO 8601 strings as returned by PostgREST, including a
        trailing 'Z', and datetime objects.

        Args:
            value: Raw timestamp value

        Returns:
            UTC datetime, or None if the value is empty or unparseable
        """
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            return cls.to_utc(value)
        if not isinstance(value, str):
            return None

        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return cls.to_utc(datetime.fromisoformat(text))
        except ValueError:
            return None

    @classmethod
    def convert_to_timezone(cls, dt: datetime, timezone_str: str) -> datetime:
        """
        Convert an aware datetime to a different timezone.

        Args:
            dt: Timezone-aware datetime
            timezone_str: Target timezone string

        Returns:
            Datetime in the target timezone

        Raises:
            ValueError: If datetime is naive or the timezone is unknown
        """
        if dt.tzinfo is None:
            raise ValueError("Datetime must be timezone-aware")

        return dt.astimezone(cls.parse_timezone(timezone_str))

    @classmethod
    def format_local(cls, dt: datetime, timezone_str: str) -> str:
        """Format an aware datetime for display in the given timezone."""
        return cls.convert_to_timezone(dt, timezone_str).strftime("%Y-%m-%d %H:%M %Z")
