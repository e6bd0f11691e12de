import logging
from fastapi import APIRouter, HTTPException

from experience_calculator.api.state import SESSIONS
from experience_calculator.api.utils import _validate_session_id, drop_session_outputs
from experience_calculator.utils.logging_utils import bind_session

logger = logging.getLogger("expcalc.api.sessions")
router = APIRouter()


@router.get("/sessions")
async def list_sessions():
    return {"sessions": list(SESSIONS.keys())}


@router.delete("/sessions/{session_id}")
async def drop_session(session_id: str):
    _validate_session_id(session_id)
    bind_session(session_id)
    if session_id not in SESSIONS:
        raise HTTPException(status_code=404, detail="Session not found")
    SESSIONS.pop(session_id)
    drop_session_outputs(session_id)
    logger.info("Dropped session")
    return {"status": "deleted", "session_id": session_id}
