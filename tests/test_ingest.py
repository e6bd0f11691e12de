"""
test_ingest.py - Date normalization and CSV ingest.
"""
import io
from datetime import date, datetime

import pytest

from experience_calculator.utils.date_utils import normalize_date, parse_date
from experience_calculator.utils.ingest import ingest_entries, load_entries_csv


# ===================================================================
# 1. DATE PARSING
# ===================================================================

def test_parse_date_iso():
    assert parse_date("2024-02-29") == date(2024, 2, 29)
    assert parse_date(" 2024-02-29 ") == date(2024, 2, 29)


def test_parse_date_passthrough():
    assert parse_date(date(2020, 5, 1)) == date(2020, 5, 1)
    assert parse_date(datetime(2020, 5, 1, 13, 30)) == date(2020, 5, 1)


@pytest.mark.parametrize("value", ["2023-02-29", "15/01/2020", "", None, 20200101])
def test_parse_date_rejects(value):
    with pytest.raises(ValueError):
        parse_date(value)


@pytest.mark.parametrize("raw, expected", [
    ("2020-01-15", date(2020, 1, 15)),
    ("15/01/2020", date(2020, 1, 15)),
    ("5-3-2021", date(2021, 3, 5)),
    ("03/2021", date(2021, 3, 1)),
    ("2021-03", date(2021, 3, 1)),
])
def test_normalize_date(raw, expected):
    assert normalize_date(raw) == expected


@pytest.mark.parametrize("raw", ["", "present", "31/02/2020", "13/2020"])
def test_normalize_date_rejects(raw):
    with pytest.raises(ValueError):
        normalize_date(raw)


# ===================================================================
# 2. CSV INGEST
# ===================================================================

CSV = """company_name,start_date,end_date
Acme,2020-01-15,2022-03-20
  ,2020-01-01,2020-02-01
Globex,01/04/2022,15/04/2023
Initech,2023-05-01,2023-04-01
Hooli,not a date,2023-01-01
"""


def test_ingest_reports_rejected_rows(session):
    df = load_entries_csv(io.StringIO(CSV))
    added, rejected = ingest_entries(session, df)
    assert added == 2
    assert [e.company_name for e in session.entries] == ["Acme", "Globex"]
    assert [r["row"] for r in rejected] == [1, 3, 4]
    assert "company_name" in rejected[0]["errors"]
    assert rejected[1]["errors"] == {"date": "Start Date cannot be greater than End Date"}
    assert "date" in rejected[2]["errors"]
    assert session.summary_text() == "3 years, 2 months, 19 days"


def test_company_alias_and_case_insensitive_headers(session):
    df = load_entries_csv(io.StringIO("Company,Start_Date,End_Date,Notes\nAcme,2020-01-01,2021-01-01,x\n"))
    added, rejected = ingest_entries(session, df)
    assert (added, rejected) == (1, [])
    assert session.entries[0].company_name == "Acme"


def test_missing_columns():
    with pytest.raises(ValueError, match="end_date"):
        load_entries_csv(io.StringIO("company_name,start_date\nAcme,2020-01-01\n"))


def test_empty_file():
    with pytest.raises(ValueError):
        load_entries_csv(io.StringIO(""))
