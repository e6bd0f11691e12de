from datetime import date
from typing import Annotated, List

from pydantic import BaseModel, ConfigDict

from .duration import Duration


class ExperienceEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    company_name: Annotated[str, "Company name, trimmed and non-empty"]
    start_date: Annotated[date, "First day of the stint"]
    end_date: Annotated[date, "Last day of the stint"]
    duration: Annotated[Duration, "Computed once when the entry is added"]

    @property
    def total_experience(self) -> str:
        return self.duration.render()

    def to_row(self) -> List[str]:
        return [
            self.company_name,
            self.start_date.isoformat(),
            self.end_date.isoformat(),
            self.total_experience,
        ]
