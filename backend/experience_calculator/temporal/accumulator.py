"""
accumulator.py - Overall experience across entries.

This is not a calendar sum. Each entry's span is recomputed from its dates
and added field-wise; after every entry at most one 30-day -> month carry and
one 12-month -> year carry are applied. The 30 is a flat month length and
deliberately differs from the calendar borrow in DurationCalculator.
"""

from typing import Iterable

from experience_calculator.models.duration import Duration
from .duration_calculator import DurationCalculator

DAYS_PER_MONTH = 30
MONTHS_PER_YEAR = 12


class ExperienceAccumulator:

    @staticmethod
    def accumulate(entries: Iterable) -> Duration:
        """
        Fold entries (anything with ``start_date`` / ``end_date``) into one Duration.

        An empty iterable yields a zero Duration.
        """
        total_years = 0
        total_months = 0
        total_days = 0

        for entry in entries:
            span = DurationCalculator.calculate(entry.start_date, entry.end_date)
            total_years += span.years
            total_months += span.months
            total_days += span.days

            if total_days >= DAYS_PER_MONTH:
                total_months += 1
                total_days -= DAYS_PER_MONTH

            if total_months >= MONTHS_PER_YEAR:
                total_years += 1
                total_months -= MONTHS_PER_YEAR

        return Duration(years=total_years, months=total_months, days=total_days)
