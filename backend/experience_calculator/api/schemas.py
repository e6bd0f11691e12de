from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from experience_calculator.models.experience_entry import ExperienceEntry


class ExperienceRequest(BaseModel):
    company_name: str = ""
    # The form starts both dates on today
    start_date: date = Field(default_factory=date.today)
    end_date: date = Field(default_factory=date.today)


class ExperienceRow(BaseModel):
    company_name: str
    start_date: str
    end_date: str
    total_experience: str

    @classmethod
    def from_entry(cls, entry: ExperienceEntry) -> "ExperienceRow":
        return cls(
            company_name=entry.company_name,
            start_date=entry.start_date.isoformat(),
            end_date=entry.end_date.isoformat(),
            total_experience=entry.total_experience,
        )


class ExperienceListOut(BaseModel):
    entries: List[ExperienceRow] = Field(default_factory=list)
    summary: Optional[str] = None


class UploadOut(BaseModel):
    added: int
    rejected: List[Dict] = Field(default_factory=list)
    rows: int


class ExportRequest(BaseModel):
    format: str = "pdf"  # pdf, latex or word
    title: Optional[str] = None
    to_pdf: bool = True
