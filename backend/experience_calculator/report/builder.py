from typing import Iterable, Optional

from experience_calculator.models.experience_entry import ExperienceEntry
from experience_calculator.models.report import DEFAULT_TITLE, REPORT_HEADER, SUMMARY_PREFIX, ExperienceReport
from experience_calculator.temporal import ExperienceAccumulator


class ReportBuilder:
    """
    Assemble entries into the export payload handed to writers.
    """
    @staticmethod
    def summary_line(entries: Iterable[ExperienceEntry]) -> str:
        return f"{SUMMARY_PREFIX}{ExperienceAccumulator.accumulate(entries).render()}"

    @staticmethod
    def build(entries: Iterable[ExperienceEntry], title: Optional[str] = None) -> ExperienceReport:
        entries = list(entries)
        return ExperienceReport(
            title=title or DEFAULT_TITLE,
            header=list(REPORT_HEADER),
            rows=[entry.to_row() for entry in entries],
            summary_line=ReportBuilder.summary_line(entries),
        )

    @staticmethod
    def from_session(session, title: Optional[str] = None) -> ExperienceReport:
        return ReportBuilder.build(session.entries, title)
