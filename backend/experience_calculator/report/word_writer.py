import os
import shutil
import logging
import subprocess
from docx import Document
from docx.shared import Cm
from docx.enum.text import WD_ALIGN_PARAGRAPH

from experience_calculator.models.report import ExperienceReport
from experience_calculator.utils.word_utils import set_paragraph_font, set_paragraph_format, set_heading_font, set_cell_text
from .base_writer import BaseWriter


class WordReportWriter(BaseWriter):
    """
    A class for generating experience reports as Word documents and optionally converting them to PDF.
    Methods
    -------
    write(report: ExperienceReport, output: str = None, to_pdf: bool = False) -> Union[str, Document]:
        Generates a Word document for the report and optionally converts it to a PDF.
    generate_file(report: ExperienceReport, output: str = None) -> Union[str, Document]:
        Creates the document: title heading, experience table and overall-experience line.
    to_pdf(output: str, src_path: str = None) -> str:
        Converts the Word document to PDF with LibreOffice when it is installed.
    """
    def __init__(self, template: str = None):
        super().__init__(template, ".docx")
        self._logger = logging.getLogger("expcalc.writer")

    def write(self, report: ExperienceReport, output: str = None, to_pdf: bool = False):
        file = self.generate_file(report, self.with_suffix(output, ".docx") if output else None)
        if not output:
            return file
        self._logger.info("DOCX generated: %s", file)
        if not to_pdf:
            return file
        pdf = self.to_pdf(self.with_suffix(output, ".pdf"), file)
        self._logger.info("PDF step finished: %s", pdf)
        return pdf

    def generate_file(self, report: ExperienceReport, output: str = None):
        frame = report.to_frame()
        document = Document()

        for section in document.sections:
            section.top_margin = Cm(2)
            section.bottom_margin = Cm(1)
            section.left_margin = Cm(2)
            section.right_margin = Cm(2)

        heading = document.add_heading(report.title, 0)
        heading.alignment = WD_ALIGN_PARAGRAPH.CENTER
        set_heading_font(heading, font_name="Times New Roman", font_size=16)

        table = document.add_table(rows=1, cols=len(report.header))
        table.style = "Table Grid"
        for cell, name in zip(table.rows[0].cells, report.header):
            set_cell_text(cell, name, bold=True)
        for row in frame.itertuples(index=False):
            cells = table.add_row().cells
            for cell, value in zip(cells, row):
                set_cell_text(cell, str(value))

        if report.summary_line:
            p = document.add_paragraph()
            p.alignment = WD_ALIGN_PARAGRAPH.CENTER
            p.add_run(report.summary_line).bold = True
            set_paragraph_font(p, font_size=12)
            set_paragraph_format(p, space_before=12)

        if output:
            document.save(output)
            return output

        return document

    def to_pdf(self, output: str, src_path: str = None):
        if not output.endswith(".pdf"):
            return output
        # LibreOffice is optional; without it the .docx is the deliverable
        if not (shutil.which("soffice") and src_path):
            self._logger.warning("soffice not available; keeping %s", src_path)
            return src_path
        out_dir = os.path.dirname(os.path.abspath(output))
        try:
            subprocess.run(
                ["soffice", "--headless", "--convert-to", "pdf", "--outdir", out_dir, os.path.abspath(src_path)],
                check=True, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL,
            )
        except (OSError, subprocess.CalledProcessError):
            self._logger.warning("LibreOffice conversion failed for %s", src_path, exc_info=True)
            return src_path
        # LibreOffice names the file after the source; ensure expected name exists
        generated = os.path.join(out_dir, os.path.splitext(os.path.basename(src_path))[0] + ".pdf")
        if os.path.isfile(generated) and generated != os.path.abspath(output):
            os.replace(generated, output)
        return output
