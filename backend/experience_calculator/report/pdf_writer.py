import logging
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

from experience_calculator.models.report import ExperienceReport
from .base_writer import BaseWriter

HEADER_BACKGROUND = colors.HexColor("#1d4ed8")
ROW_BACKGROUND = colors.HexColor("#f3f4f6")
COLUMN_WIDTHS = [2.1 * inch, 1.2 * inch, 1.2 * inch, 2.3 * inch]


class PdfReportWriter(BaseWriter):
    """
    Renders the experience table straight to PDF with ReportLab, so no
    external converter is needed.
    """
    def __init__(self, template: str = None):
        super().__init__(template, ".pdf")
        self._logger = logging.getLogger("expcalc.writer")

    def write(self, report: ExperienceReport, output: str = None, to_pdf: bool = True):
        if not output:
            raise ValueError("PdfReportWriter requires an output path")
        pdf = self.generate_file(report, output)
        self._logger.info("PDF generated: %s", pdf)
        return self.to_pdf(pdf, pdf) if to_pdf else pdf

    def generate_file(self, report: ExperienceReport, output: str = None):
        doc = SimpleDocTemplate(
            str(output), pagesize=A4, topMargin=0.75 * inch, bottomMargin=0.75 * inch,
            leftMargin=0.75 * inch, rightMargin=0.75 * inch, title=report.title,
        )
        styles = getSampleStyleSheet()
        title_style = ParagraphStyle('ReportTitle', parent=styles['Title'], fontSize=18, alignment=TA_CENTER, spaceAfter=16)
        cell_style = ParagraphStyle('Cell', parent=styles['Normal'], fontSize=9, leading=11)
        head_style = ParagraphStyle('HeadCell', parent=cell_style, textColor=colors.white, fontName='Helvetica-Bold')
        summary_style = ParagraphStyle('Summary', parent=styles['Normal'], fontSize=12, alignment=TA_CENTER,
                                       fontName='Helvetica-Bold', spaceBefore=18)

        frame = report.to_frame()
        data = [[Paragraph(escape(h), head_style) for h in report.header]]
        for row in frame.itertuples(index=False):
            data.append([Paragraph(escape(str(cell)), cell_style) for cell in row])

        widths = COLUMN_WIDTHS if len(report.header) == len(COLUMN_WIDTHS) else None
        table = Table(data, repeatRows=1, colWidths=widths)
        table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, 0), HEADER_BACKGROUND),
            ('ROWBACKGROUNDS', (0, 1), (-1, -1), [colors.white, ROW_BACKGROUND]),
            ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
            ('TOPPADDING', (0, 0), (-1, -1), 6),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 6),
        ]))

        story = [Paragraph(escape(report.title), title_style), Spacer(1, 0.1 * inch), table]
        if report.summary_line:
            story.append(Paragraph(escape(report.summary_line), summary_style))
        doc.build(story)
        return output

    def to_pdf(self, output: str, src_path: str = None):
        # Already a PDF
        return output
