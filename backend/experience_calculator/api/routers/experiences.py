import io
import logging
from typing import Optional
from fastapi import APIRouter, File, HTTPException, UploadFile
from fastapi.responses import JSONResponse

from experience_calculator.api.config import MAX_UPLOAD_BYTES
from experience_calculator.api.schemas import ExperienceListOut, ExperienceRequest, ExperienceRow, UploadOut
from experience_calculator.api.utils import _validate_session_id, find_session, get_session
from experience_calculator.session import ExperienceSession
from experience_calculator.utils.ingest import ingest_entries, load_entries_csv
from experience_calculator.utils.logging_utils import bind_session
from experience_calculator.validation import EntryValidationError

logger = logging.getLogger("expcalc.api.experiences")
router = APIRouter()


def _list_out(session: Optional[ExperienceSession]) -> ExperienceListOut:
    # Unknown ids read as an empty list
    if session is None:
        return ExperienceListOut(entries=[], summary=None)
    return ExperienceListOut(
        entries=[ExperienceRow.from_entry(e) for e in session.entries],
        summary=session.summary_text(),
    )


@router.get("/sessions/{session_id}/experiences", response_model=ExperienceListOut)
async def list_experiences(session_id: str):
    _validate_session_id(session_id)
    bind_session(session_id)
    return _list_out(find_session(session_id))


@router.post("/sessions/{session_id}/experiences", status_code=201, response_model=ExperienceRow)
async def add_experience(session_id: str, req: ExperienceRequest):
    _validate_session_id(session_id)
    bind_session(session_id)
    session = get_session(session_id)
    try:
        entry = session.add(req.company_name, req.start_date, req.end_date)
    except EntryValidationError as e:
        # Form keeps its values; the caller shows errors next to the fields
        return JSONResponse(status_code=400, content={"errors": e.errors})
    return ExperienceRow.from_entry(entry)


@router.delete("/sessions/{session_id}/experiences/{index}", response_model=ExperienceListOut)
async def remove_experience(session_id: str, index: int):
    _validate_session_id(session_id)
    bind_session(session_id)
    session = find_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"No experience at index {index}")
    try:
        session.remove_at(index)
    except IndexError:
        raise HTTPException(status_code=404, detail=f"No experience at index {index}")
    return _list_out(session)


@router.delete("/sessions/{session_id}/experiences", response_model=ExperienceListOut)
async def clear_experiences(session_id: str):
    _validate_session_id(session_id)
    bind_session(session_id)
    session = find_session(session_id)
    if session is not None:
        session.clear()
    return _list_out(session)


@router.post("/sessions/{session_id}/upload-entries", response_model=UploadOut)
async def upload_entries(session_id: str, file: UploadFile = File(...)):
    _validate_session_id(session_id)
    bind_session(session_id)
    if not (file.filename or "").lower().endswith(".csv"):
        raise HTTPException(status_code=400, detail="File must be a .csv")
    contents = await file.read()
    if not contents:
        raise HTTPException(status_code=400, detail="File is empty")
    if len(contents) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=400, detail=f"File too large (max {MAX_UPLOAD_BYTES} bytes)")
    logger.info("Uploading entries CSV filename=%s size=%d bytes", file.filename, len(contents))
    try:
        df = load_entries_csv(io.BytesIO(contents))
    except ValueError as e:
        logger.warning("Rejected CSV upload: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    added, rejected = ingest_entries(get_session(session_id), df)
    return UploadOut(added=added, rejected=rejected, rows=len(df))
