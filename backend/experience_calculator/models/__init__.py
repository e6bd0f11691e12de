from .duration import Duration
from .experience_entry import ExperienceEntry
from .report import DEFAULT_TITLE, REPORT_HEADER, SUMMARY_PREFIX, ExperienceReport

__all__ = [
    "Duration",
    "ExperienceEntry",
    "ExperienceReport",
    "DEFAULT_TITLE",
    "REPORT_HEADER",
    "SUMMARY_PREFIX",
]
