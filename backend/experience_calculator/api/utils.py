import os
import re
import shutil
import logging
from typing import Optional
from fastapi import HTTPException

from experience_calculator.api.config import OUTPUTS_BASE
from experience_calculator.api.state import SESSIONS
from experience_calculator.session import ExperienceSession

logger = logging.getLogger("expcalc.api.utils")


def _validate_session_id(session_id: str):
    """Basic server-side guard against guessable or path-like session ids."""
    if not re.fullmatch(r"[A-Za-z0-9_-]{8,128}", session_id or ""):
        raise HTTPException(status_code=400, detail="Invalid session id format")


def find_session(session_id: str) -> Optional[ExperienceSession]:
    """Look up a registered session without creating one."""
    return SESSIONS.get(session_id)


def get_session(session_id: str) -> ExperienceSession:
    """Return the session, registering it first. Only writes should call this."""
    session = SESSIONS.get(session_id)
    if session is None:
        session = ExperienceSession(session_id=session_id)
        SESSIONS[session_id] = session
        logger.info("Created session %s", session_id)
    return session


def session_output_dir(session_id: str) -> str:
    return os.path.join(OUTPUTS_BASE, session_id)


def clean_output_dir(path: str):
    """Remove all existing files in the session's output directory."""
    if not os.path.isdir(path):
        os.makedirs(path, exist_ok=True)
        return
    for name in os.listdir(path):
        full = os.path.join(path, name)
        try:
            if os.path.isfile(full) or os.path.islink(full):
                os.remove(full)
            elif os.path.isdir(full):
                shutil.rmtree(full, ignore_errors=True)
        except OSError:
            logger.warning("Could not remove %s", full, exc_info=True)


def drop_session_outputs(session_id: str):
    shutil.rmtree(session_output_dir(session_id), ignore_errors=True)
