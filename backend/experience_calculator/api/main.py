import logging
import time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from experience_calculator import __version__
from experience_calculator.api.config import CORS_ORIGINS
from experience_calculator.api.routers import experiences, export, health, sessions
from experience_calculator.utils.logging_utils import request_context, setup_logging

setup_logging()
app = FastAPI(title="Experience Calculator API", version=__version__)
# Module logger (relies on configured handlers)
logger = logging.getLogger("expcalc.api")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

@app.middleware("http")
async def add_request_context(request: Request, call_next):
    """Attach a correlation id to every request and basic access log lines."""
    with request_context() as request_id:
        start = time.time()
        path = request.url.path
        method = request.method
        logger.info("Inbound request %s %s", method, path)
        response = await call_next(request)
        duration_ms = int((time.time() - start) * 1000)
        logger.info("Completed %s %s -> %s in %dms", method, path, response.status_code, duration_ms)
        response.headers["X-Request-ID"] = request_id
        return response

app.include_router(health.router)
app.include_router(sessions.router)
app.include_router(experiences.router)
app.include_router(export.router)

# Convenience root
@app.get("/")
async def root():
    return {"message": "Experience Calculator API. POST /sessions/{session_id}/experiences then POST /sessions/{session_id}/export."}
