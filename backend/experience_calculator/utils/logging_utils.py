"""
logging_utils.py - Log configuration shared by the API and the CLI.

Records emitted under the ``expcalc`` logger are stamped with the id of the
request being served and the experience session it touches, so lines from
interleaved requests can be told apart.
"""
import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional, Tuple

LOG_ROOT = "expcalc"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s req=%(request_id)s session=%(session_id)s - %(message)s"

_request_id: ContextVar[Optional[str]] = ContextVar("expcalc_request_id", default=None)
_session_id: ContextVar[Optional[str]] = ContextVar("expcalc_session_id", default=None)

_handler: Optional[logging.Handler] = None


class SessionContextFilter(logging.Filter):
    """Copy the current request and session ids onto each record ("-" when unset)."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.request_id = _request_id.get() or "-"
        record.session_id = _session_id.get() or "-"
        return True


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach the stamped stream handler to the ``expcalc`` logger.

    Child loggers (``expcalc.api.*``, ``expcalc.session``, ``expcalc.writer``,
    ``expcalc.cli``) propagate to it. Calling again only changes the level.
    """
    global _handler
    root = logging.getLogger(LOG_ROOT)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        _handler.addFilter(SessionContextFilter())
        root.addHandler(_handler)
        root.propagate = False
    root.setLevel(level)
    return root


def bind_session(session_id: Optional[str]) -> None:
    """Tag the rest of the current request's log lines with ``session_id``."""
    _session_id.set(session_id)


def current_context() -> Tuple[Optional[str], Optional[str]]:
    return _request_id.get(), _session_id.get()


@contextmanager
def request_context(request_id: Optional[str] = None) -> Iterator[str]:
    """Scope a request id, and any session bound under it, to one request.

    Both ids are restored to their previous values on exit.
    """
    rid = request_id or uuid.uuid4().hex
    rid_token = _request_id.set(rid)
    sid_token = _session_id.set(None)
    try:
        yield rid
    finally:
        _session_id.reset(sid_token)
        _request_id.reset(rid_token)
