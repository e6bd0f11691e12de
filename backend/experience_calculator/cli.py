import argparse
import logging
import os
import sys
from typing import List, Optional

from experience_calculator.models.report import DEFAULT_TITLE
from experience_calculator.report import ReportBuilder, WRITERS, get_writer
from experience_calculator.session import ExperienceSession
from experience_calculator.utils.ingest import ingest_entries, load_entries_csv
from experience_calculator.utils.logging_utils import setup_logging

logger = logging.getLogger("expcalc.cli")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="expcalc", description="Compute total experience from a CSV of entries and export it.")
    p.add_argument("entries", help="CSV with company_name,start_date,end_date columns")
    p.add_argument("--output", help="Output path (defaults to experience<ext> next to the CSV)")
    p.add_argument("--format", default="pdf", choices=sorted(WRITERS), help="Document format")
    p.add_argument("--title", default=DEFAULT_TITLE)
    p.add_argument("--no-pdf", action="store_true", help="Keep the LaTeX/Word source without converting to PDF")
    p.add_argument("--log-level", default="WARNING")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    a = build_parser().parse_args(argv)
    setup_logging(getattr(logging, a.log_level.upper(), logging.WARNING))

    try:
        df = load_entries_csv(a.entries)
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    session = ExperienceSession()
    added, rejected = ingest_entries(session, df)
    for item in rejected:
        print(f"row {item['row']}: " + "; ".join(item["errors"].values()), file=sys.stderr)
    if not added:
        print("error: no valid entries", file=sys.stderr)
        return 1

    writer = get_writer(a.format)
    output = a.output or os.path.join(os.path.dirname(os.path.abspath(a.entries)), f"experience{writer.file_ending}")
    report = ReportBuilder.from_session(session, a.title)
    try:
        path = writer.write(report, output=output, to_pdf=not a.no_pdf)
    except RuntimeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    logger.info("Wrote %s", path)

    for row in report.rows:
        print(" | ".join(row))
    print(report.summary_line)
    print(f"Written: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
