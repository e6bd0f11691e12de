import logging
from typing import Any, Dict, List, Tuple

import pandas as pd

from experience_calculator.session import ExperienceSession
from experience_calculator.utils.date_utils import normalize_date
from experience_calculator.validation import EntryValidationError

REQUIRED_COLUMNS = ("company_name", "start_date", "end_date")
COLUMN_ALIASES = {"company": "company_name"}

logger = logging.getLogger("expcalc.utils")


def load_entries_csv(source: Any) -> pd.DataFrame:
    """Load an entries CSV (path or file-like) into a DataFrame of strings.

    Args:
        source: CSV file path or buffer.

    Returns:
        DataFrame with at least ``company_name``, ``start_date`` and ``end_date``.

    Raises:
        ValueError: If the CSV cannot be parsed or required columns are missing.
    """
    try:
        df = pd.read_csv(source, dtype=str, keep_default_na=False)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise ValueError(f"Failed to parse CSV: {e}") from e
    df.columns = [str(c).strip().lower() for c in df.columns]
    df = df.rename(columns={k: v for k, v in COLUMN_ALIASES.items() if v not in df.columns})
    missing = sorted(set(REQUIRED_COLUMNS) - set(df.columns))
    if missing:
        raise ValueError(f"Missing required columns: {', '.join(missing)}")
    return df


def ingest_entries(session: ExperienceSession, df: pd.DataFrame) -> Tuple[int, List[Dict[str, Any]]]:
    """Add every CSV row to the session through the validated add.

    Returns:
        (number of rows added, list of ``{"row": i, "errors": {...}}`` for rejected rows)
    """
    added = 0
    rejected: List[Dict[str, Any]] = []
    for i, row in enumerate(df[list(REQUIRED_COLUMNS)].itertuples(index=False)):
        record = row._asdict()
        try:
            start = normalize_date(record["start_date"])
            end = normalize_date(record["end_date"])
        except ValueError as e:
            rejected.append({"row": i, "errors": {"date": str(e)}})
            continue
        try:
            session.add(record["company_name"], start, end)
        except EntryValidationError as e:
            rejected.append({"row": i, "errors": e.errors})
            continue
        added += 1
    logger.info("Ingested CSV rows=%d added=%d rejected=%d", len(df), added, len(rejected))
    return added, rejected
