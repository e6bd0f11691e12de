import os
import logging
from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

from experience_calculator.api.config import REPORT_BASENAME, REPORT_TITLE
from experience_calculator.api.schemas import ExportRequest
from experience_calculator.api.utils import _validate_session_id, clean_output_dir, find_session, session_output_dir
from experience_calculator.report import ReportBuilder, get_writer
from experience_calculator.utils.logging_utils import bind_session

logger = logging.getLogger("expcalc.api.export")
router = APIRouter()

MEDIA_TYPES = {
    ".pdf": "application/pdf",
    ".tex": "application/x-tex",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


@router.post("/sessions/{session_id}/export")
async def export_experiences(session_id: str, req: ExportRequest):
    _validate_session_id(session_id)
    bind_session(session_id)
    session = find_session(session_id)
    if session is None or not len(session):
        raise HTTPException(status_code=400, detail="No experiences to export. Add at least one entry first.")
    try:
        writer = get_writer(req.format)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info("Export requested; format=%s rows=%d", req.format, len(session))

    report = ReportBuilder.from_session(session, req.title or REPORT_TITLE)
    out_dir = session_output_dir(session_id)
    clean_output_dir(out_dir)
    output_name = os.path.join(out_dir, f"{REPORT_BASENAME}{writer.file_ending}")
    try:
        path = writer.export_rows(
            report.title, report.header, report.rows, report.summary_line,
            output=output_name, to_pdf=req.to_pdf,
        )
    except Exception as exc:
        logger.exception("Failed writing export: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to render export")
    if not path or not os.path.isfile(path):
        raise HTTPException(status_code=500, detail="Export produced no file")
    ext = os.path.splitext(path)[1]
    logger.info("Export ready %s", os.path.basename(path))
    return FileResponse(path, media_type=MEDIA_TYPES.get(ext), filename=os.path.basename(path))
