from pydantic import BaseModel, ConfigDict
from typing import Annotated


class Duration(BaseModel):
    model_config = ConfigDict(frozen=True)

    years: Annotated[int, "Whole years"] = 0
    months: Annotated[int, "Remaining months, 0-11"] = 0
    days: Annotated[int, "Remaining days"] = 0

    def render(self) -> str:
        # Always plural: the display format is fixed.
        return f"{self.years} years, {self.months} months, {self.days} days"

    def __str__(self) -> str:
        return self.render()
