# shop_api/shared/utils/datetime_utils.py

"""
Utilities for datetime operations.

Everything is stored as naive UTC; these helpers keep the conversions in one
place so no module compares aware and naive datetimes by accident.
"""

from datetime import datetime, timezone, timedelta
from typing import Optional


class DateTimeUtil:
    """
    Utility class for datetime operations.

    Provides static methods for:
    - Getting current UTC time
    - Converting timestamps to datetimes
    - Formatting datetimes for storage
    """

    @staticmethod
    def utcnow() -> datetime:
        """
        Get current UTC time.

        This is a replacement for datetime.utcnow() which is deprecated in Python 3.12+.
        It returns a timezone-aware datetime object in UTC.
        """
        return datetime.now(timezone.utc)

    @staticmethod
    def utcnow_naive() -> datetime:
        """Get current UTC time as naive datetime (without timezone)."""
        return datetime.now(timezone.utc).replace(tzinfo=None)

    @staticmethod
    def for_storage(dt: Optional[datetime] = None) -> datetime:
        """
        Format a datetime for database storage.

        Converts to UTC and strips timezone info for consistent storage.
        If no datetime is provided, uses current time.

        Args:
            dt: Datetime to format (optional)

        Returns:
            datetime: UTC naive datetime ready for storage
        """
        if dt is None:
            dt = DateTimeUtil.utcnow()

        if dt.tzinfo is not None:
            dt = dt.astimezone(timezone.utc)

        return dt.replace(tzinfo=None)

    @staticmethod
    def timestamp_to_datetime(timestamp: float) -> datetime:
        """Convert a UTC timestamp to an aware datetime."""
        return datetime.fromtimestamp(timestamp, tz=timezone.utc)

    @staticmethod
    def add_minutes(dt: datetime, minutes: int) -> datetime:
        return dt + timedelta(minutes=minutes)
