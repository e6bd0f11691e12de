from typing import Annotated, List

import pandas as pd
from pydantic import BaseModel, Field

REPORT_HEADER = ["Company Name", "Start Date", "End Date", "Total Experience"]
SUMMARY_PREFIX = "Overall Experience: "
DEFAULT_TITLE = "Experience Calculator"


class ExperienceReport(BaseModel):
    title: Annotated[str, "Document title"] = DEFAULT_TITLE
    header: Annotated[List[str], "Column names of the table"] = Field(default_factory=lambda: list(REPORT_HEADER))
    rows: Annotated[List[List[str]], "One row of rendered strings per entry"] = Field(default_factory=list)
    summary_line: Annotated[str, "Trailing 'Overall Experience: ...' line"] = ""

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.rows, columns=self.header)
