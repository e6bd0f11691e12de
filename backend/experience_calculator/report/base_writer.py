import os
from abc import ABC, abstractmethod
from typing import List, Optional

from experience_calculator.models.report import ExperienceReport


class BaseWriter(ABC):
    """
    BaseWriter is an abstract base class for writers that turn an experience
    report into a document. Writers only consume already-rendered strings; no
    duration is computed here.
    Attributes:
        file_ending (str): Extension of the source file the writer produces.
    Methods:
        write(report: ExperienceReport, output: str = None, to_pdf: bool = False):
            Abstract method to write the report to a file or other output.
        to_pdf(output: str, src_path: str = None) -> str:
            Abstract method to convert the generated file to a PDF.
        generate_file(report: ExperienceReport, output: str = None):
            Abstract method to generate a file from the report.
        export_rows(title, header, rows, summary_line, output, to_pdf=True):
            Package the four export values into a report and write it.
    """

    def __init__(self, template: str = None, file_ending: str = None):
        self.file_ending = "." + template.split(".")[-1] if template else file_ending

    def export_rows(
        self,
        title: str,
        header: List[str],
        rows: List[List[str]],
        summary_line: str,
        output: Optional[str] = None,
        to_pdf: bool = True,
    ):
        report = ExperienceReport(title=title, header=list(header), rows=[list(r) for r in rows], summary_line=summary_line)
        return self.write(report, output=output, to_pdf=to_pdf)

    @staticmethod
    def with_suffix(path: str, suffix: str) -> str:
        """Swap the extension of ``path`` only; directory names are left alone."""
        return os.path.splitext(path)[0] + suffix

    @abstractmethod
    def write(self, report: ExperienceReport, output: str = None, to_pdf: bool = False):
        """Write the report to a file or other output."""
        pass

    @abstractmethod
    def to_pdf(self, output: str, src_path: str = None) -> str:
        """Convert the generated file to a PDF format."""
        pass

    @abstractmethod
    def generate_file(self, report: ExperienceReport, output: str = None):
        """Generate a file from the report."""
        pass
