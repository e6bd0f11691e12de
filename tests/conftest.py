"""
conftest.py - Pytest configuration for experience calculator tests

Puts backend/ on the path and points DATA_DIR at a temporary directory
before the API config module creates its output folders.
"""
import os
import sys
import tempfile
from pathlib import Path

import pytest

BACKEND_DIR = Path(__file__).parent.parent / "backend"
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="expcalc-test-"))

from experience_calculator.session import ExperienceSession  # noqa: E402


@pytest.fixture
def session():
    return ExperienceSession(session_id="test-session")


@pytest.fixture
def filled_session(session):
    session.add("Acme", "2020-01-15", "2022-03-20")
    session.add("Globex", "2022-04-01", "2023-04-15")
    return session
