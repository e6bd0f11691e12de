from datetime import date
from typing import Dict

COMPANY_NAME_REQUIRED = "Company Name is required"
DATE_ORDER_INVALID = "Start Date cannot be greater than End Date"


class EntryValidationError(ValueError):
    """Raised when a candidate entry fails validation; ``errors`` maps field -> message."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__("; ".join(self.errors.values()))


def validate_entry(company_name: str, start_date: date, end_date: date) -> Dict[str, str]:
    """Return field-level errors for a candidate entry; empty when it may be created."""
    errors: Dict[str, str] = {}
    if not (company_name or "").strip():
        errors["company_name"] = COMPANY_NAME_REQUIRED
    if start_date > end_date:
        errors["date"] = DATE_ORDER_INVALID
    return errors
