"""
duration_calculator.py - Calendar span between two dates.

Pure functions: plain year/month/day subtraction with borrowing, where a
negative day count borrows the length of the month preceding the end date.
"""

import calendar
from datetime import date

from experience_calculator.models.duration import Duration


class DurationCalculator:
    """Calculate (years, months, days) spans for experience entries."""

    @staticmethod
    def days_in_month(year: int, month: int) -> int:
        return calendar.monthrange(year, month)[1]

    @staticmethod
    def previous_month_length(day: date) -> int:
        """Length of the month before ``day``'s month (December of the prior year for January)."""
        if day.month == 1:
            return DurationCalculator.days_in_month(day.year - 1, 12)
        return DurationCalculator.days_in_month(day.year, day.month - 1)

    @staticmethod
    def calculate(start: date, end: date) -> Duration:
        """
        Calculate the span from ``start`` to ``end``.

        Args:
            start: First day (must not be after ``end``; callers validate).
            end:   Last day.

        Returns:
            Duration with months in [0, 11] and non-negative days.
        """
        years = end.year - start.year
        months = end.month - start.month
        days = end.day - start.day

        if days < 0:
            months -= 1
            days += DurationCalculator.previous_month_length(end)

        if months < 0:
            years -= 1
            months += 12

        # Start day past the end of the borrowed month (e.g. Jan 31 -> Mar 1).
        if days < 0:
            days = 0

        return Duration(years=years, months=months, days=days)

    @staticmethod
    def render(start: date, end: date) -> str:
        return DurationCalculator.calculate(start, end).render()
