"""
Date calculation service.
Handles calendar-day windows, date argument parsing and summary periods.
"""
import calendar
from datetime import datetime, timedelta, date
from typing import Union

from wellness.exceptions import InvalidDateException

DateLike = Union[date, datetime, str, None]


class DateService:
    """Service for date-related operations"""

    @staticmethod
    def today() -> date:
        """Current local calendar date"""
        return datetime.now().date()

    @staticmethod
    def coerce_date(value: DateLike) -> date:
        """
        Interpret a caller-supplied date argument.

        Accepts a date, a datetime (its date part), an ISO "YYYY-MM-DD"
        string, or None for today.

        Args:
            value: Date argument

        Returns:
            Calendar date

        Raises:
            InvalidDateException: If value cannot be read as a date
        """
        if value is None:
            return DateService.today()

        # datetime is a subclass of date, check it first
        if isinstance(value, datetime):
            return value.date()

        if isinstance(value, date):
            return value

        if isinstance(value, str):
            try:
                return date.fromisoformat(value.strip())
            except ValueError:
                raise InvalidDateException(value)

        raise InvalidDateException(value)

    @staticmethod
    def get_day_range(target_date: date) -> tuple[datetime, datetime]:
        """
        Get the half-open local datetime range for a calendar day.

        Args:
            target_date: Date to get range for

        Returns:
            Tuple of (day_start, next_day_start) datetimes
        """
        day_start = datetime.combine(target_date, datetime.min.time())
        day_end = datetime.combine(target_date + timedelta(days=1), datetime.min.time())
        return day_start, day_end

    @staticmethod
    def subtract_month(target_date: date) -> date:
        """
        Same day one month earlier, clamped to the end of a shorter month.

        Example: 2026-03-31 -> 2026-02-28

        This intentionally does not roll over into the next month the way a
        naive month decrement would (03-31 -> 03-03), so the monthly window
        always starts in the previous month.
        """
        year = target_date.year
        month = target_date.month - 1
        if month == 0:
            month = 12
            year -= 1
        last_day = calendar.monthrange(year, month)[1]
        return date(year, month, min(target_date.day, last_day))
