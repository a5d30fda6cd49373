"""In-memory fileserver hit counter shown on GET /admin/metrics."""
from __future__ import annotations

from threading import Lock

from starlette.requests import Request
from starlette.responses import Response

FILESERVER_PREFIX = "/app/"

_lock = Lock()
_hits = 0


def record_hit() -> None:
    with _lock:
        global _hits
        _hits += 1


def get_hits() -> int:
    with _lock:
        return _hits


def reset_hits() -> None:
    with _lock:
        global _hits
        _hits = 0


async def fileserver_hits_middleware(request: Request, call_next) -> Response:
    """Count every request served under /app/."""
    if request.url.path.startswith(FILESERVER_PREFIX):
        record_hit()
    return await call_next(request)
