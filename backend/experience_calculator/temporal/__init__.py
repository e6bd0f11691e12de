from .duration_calculator import DurationCalculator
from .accumulator import ExperienceAccumulator, DAYS_PER_MONTH, MONTHS_PER_YEAR

__all__ = ["DurationCalculator", "ExperienceAccumulator", "DAYS_PER_MONTH", "MONTHS_PER_YEAR"]
