import logging
import uuid

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ChirpyError(Exception):
    """Base for errors raised by the chirp and credential core."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ContentTooLong(ChirpyError):
    status_code = 400
    message = "Chirp is too long"


class HashingFailure(ChirpyError):
    status_code = 500
    message = "Couldn't hash password"


class CredentialMismatch(ChirpyError):
    status_code = 401
    message = "Incorrect email or password"


def get_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


def error_response(
    request: Request,
    *,
    message: str,
    status_code: int,
    exc: Exception | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    if exc is not None:
        logger.info("%s | request_id=%s", exc, get_request_id(request))
    if status_code > 499:
        logger.error("Responding with 5XX error: %s | request_id=%s", message, get_request_id(request))
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def chirpy_exception_handler(request: Request, exc: ChirpyError):
    cause = exc.__cause__ if exc.__cause__ is not None else exc
    return error_response(request, message=exc.message, status_code=exc.status_code, exc=cause)


async def http_exception_handler(request: Request, exc: HTTPException):
    # Routing 404/405 and StaticFiles misses raise starlette's HTTPException directly.
    return error_response(request, message=str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("Request validation failed: %s | request_id=%s", exc.errors(), get_request_id(request))
    return error_response(request, message="Couldn't decode parameters", status_code=422)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception | request_id=%s", get_request_id(request), exc_info=exc)
    return error_response(request, message="Internal server error", status_code=500)


async def request_id_middleware(request: Request, call_next):
    incoming = request.headers.get("x-request-id")
    request.state.request_id = incoming or str(uuid.uuid4())
    response = await call_next(request)
    response.headers["x-request-id"] = request.state.request_id
    return response
