from .base_writer import BaseWriter
from .builder import ReportBuilder
from .latex_writer import LatexReportWriter
from .pdf_writer import PdfReportWriter
from .word_writer import WordReportWriter

WRITERS = {
    "pdf": PdfReportWriter,
    "latex": LatexReportWriter,
    "word": WordReportWriter,
}


def get_writer(fmt: str) -> BaseWriter:
    """Return a writer instance for ``pdf``, ``latex`` or ``word``."""
    try:
        return WRITERS[(fmt or "").lower()]()
    except KeyError:
        raise ValueError(f"Unsupported export format '{fmt}'. Choose one of: {', '.join(WRITERS)}")


__all__ = [
    "BaseWriter",
    "ReportBuilder",
    "LatexReportWriter",
    "PdfReportWriter",
    "WordReportWriter",
    "WRITERS",
    "get_writer",
]
