import logging
from datetime import date
from typing import List, Optional, Tuple, Union

from experience_calculator.models.duration import Duration
from experience_calculator.models.experience_entry import ExperienceEntry
from experience_calculator.temporal import DurationCalculator, ExperienceAccumulator
from experience_calculator.utils.date_utils import parse_date
from experience_calculator.validation import EntryValidationError, validate_entry

DateInput = Union[date, str]


class ExperienceSession:
    """
    In-memory, insertion-ordered list of experience entries.

    Entries are only created through ``add`` (validated) and are immutable;
    an edit is a delete followed by a new add. The overall summary is
    recomputed from the full list on every read.
    Methods:
        add(company_name, start_date, end_date) -> ExperienceEntry
        remove_at(index) -> ExperienceEntry
        clear()
        summary() -> Optional[Duration]
        rows() -> List[List[str]]
    """

    def __init__(self, session_id: Optional[str] = None):
        self.session_id = session_id
        self._entries: List[ExperienceEntry] = []
        self._logger = logging.getLogger("expcalc.session")

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> Tuple[ExperienceEntry, ...]:
        return tuple(self._entries)

    def add(self, company_name: str, start_date: DateInput, end_date: DateInput) -> ExperienceEntry:
        start = parse_date(start_date)
        end = parse_date(end_date)
        errors = validate_entry(company_name, start, end)
        if errors:
            self._logger.info("Rejected entry company=%r errors=%s", company_name, sorted(errors))
            raise EntryValidationError(errors)
        entry = ExperienceEntry(
            company_name=company_name.strip(),
            start_date=start,
            end_date=end,
            duration=DurationCalculator.calculate(start, end),
        )
        self._entries.append(entry)
        self._logger.info("Added entry #%d company=%s duration=%s", len(self._entries) - 1, entry.company_name, entry.total_experience)
        return entry

    def remove_at(self, index: int) -> ExperienceEntry:
        # Negative positions are not valid row indexes.
        if index < 0 or index >= len(self._entries):
            raise IndexError(f"No entry at index {index}")
        entry = self._entries.pop(index)
        self._logger.info("Removed entry #%d company=%s", index, entry.company_name)
        return entry

    def clear(self) -> None:
        count = len(self._entries)
        self._entries.clear()
        self._logger.info("Cleared %d entries", count)

    def summary(self) -> Optional[Duration]:
        if not self._entries:
            return None
        return ExperienceAccumulator.accumulate(self._entries)

    def summary_text(self) -> Optional[str]:
        total = self.summary()
        return total.render() if total is not None else None

    def rows(self) -> List[List[str]]:
        return [entry.to_row() for entry in self._entries]
