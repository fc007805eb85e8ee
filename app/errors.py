"""
Error taxonomy and its translation to HTTP responses.

Two mappings live here:

* pydantic validation errors are flattened into an ordered list of
  messages and answered with ``400 {"errors": [...]}``;
* persistence failures are classified into a ``PersistenceErrorCode`` by the
  CRUD layer and each route operation owns an ``ErrorMessages`` table that
  turns the code into ``{"error": "..."}`` with the right status.

Unexpected failures are logged with their cause and answered with a generic
message; internal details never reach the client.
"""
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, NoResultFound, SQLAlchemyError
from sqlalchemy.orm import Session

from app.constants import messages

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION_SQLSTATE = "23505"
FOREIGN_KEY_VIOLATION_SQLSTATE = "23503"


class PersistenceErrorCode(str, Enum):
    UNIQUE_VIOLATION = "unique_violation"
    FOREIGN_KEY_VIOLATION = "foreign_key_violation"
    NOT_FOUND = "not_found"
    OTHER = "other"


class PersistenceError(Exception):
    """Raised by the CRUD layer for any failed database round-trip."""

    def __init__(self, code: PersistenceErrorCode, detail: str = "") -> None:
        self.code = code
        self.detail = detail
        super().__init__(f"{code.value}: {detail}")


class ApiError(Exception):
    """A failure already resolved to a status code and a client message."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class PayloadValidationError(Exception):
    """A request payload broke one or more schema rules."""

    def __init__(self, errors: List[str]) -> None:
        self.errors = errors
        super().__init__("; ".join(errors))


def classify_persistence_error(exc: SQLAlchemyError) -> PersistenceErrorCode:
    """Map a SQLAlchemy exception to a discriminated code.

    PostgreSQL drivers expose the SQLSTATE (``pgcode`` for psycopg2,
    ``sqlstate`` for psycopg 3); SQLite only reports it in the message.
    """
    if isinstance(exc, NoResultFound):
        return PersistenceErrorCode.NOT_FOUND
    if isinstance(exc, IntegrityError):
        orig = exc.orig
        sqlstate = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
        text = str(orig)
        if sqlstate == UNIQUE_VIOLATION_SQLSTATE or "UNIQUE constraint failed" in text:
            return PersistenceErrorCode.UNIQUE_VIOLATION
        if sqlstate == FOREIGN_KEY_VIOLATION_SQLSTATE or "FOREIGN KEY constraint failed" in text:
            return PersistenceErrorCode.FOREIGN_KEY_VIOLATION
    return PersistenceErrorCode.OTHER


@contextmanager
def persistence_errors(db: Session) -> Iterator[None]:
    """Roll back and re-raise database failures as ``PersistenceError``."""
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        raise PersistenceError(classify_persistence_error(exc), str(exc)) from exc


@dataclass(frozen=True)
class ErrorMessages:
    """What one route operation answers for each persistence code.

    A code without a message falls back to ``500`` with ``fallback``.
    """

    fallback: str
    unique: Optional[str] = None
    not_found: Optional[str] = None
    foreign_key: Optional[str] = None
    foreign_key_status: int = status.HTTP_409_CONFLICT

    def translate(self, error: PersistenceError) -> ApiError:
        outcomes = {
            PersistenceErrorCode.UNIQUE_VIOLATION: (status.HTTP_409_CONFLICT, self.unique),
            PersistenceErrorCode.NOT_FOUND: (status.HTTP_404_NOT_FOUND, self.not_found),
            PersistenceErrorCode.FOREIGN_KEY_VIOLATION: (self.foreign_key_status, self.foreign_key),
            PersistenceErrorCode.OTHER: (status.HTTP_500_INTERNAL_SERVER_ERROR, None),
        }
        status_code, message = outcomes[error.code]
        if message is None:
            logger.error("Persistence failure (%s): %s", error.code.value, error.detail, exc_info=error)
            return ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, self.fallback)
        return ApiError(status_code, message)


def flatten_validation_errors(errors: Iterable[Dict[str, Any]]) -> List[str]:
    """Turn pydantic error entries into one message per violated rule.

    Entries keep field declaration order; an entry carrying several rule
    messages in ``ctx["messages"]`` expands in rule order.
    """
    flat: List[str] = []
    for error in errors:
        ctx = error.get("ctx") or {}
        loc = error.get("loc") or ()
        if "messages" in ctx:
            flat.extend(ctx["messages"])
        elif error.get("type") == "json_invalid":
            flat.append(messages.INVALID_JSON)
        elif loc and loc[0] == "path":
            flat.append(messages.INVALID_IDENTIFIER)
        else:
            flat.append(error.get("msg", messages.INTERNAL_ERROR))
    return flat


def _error_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error})


def register_error_handlers(app: FastAPI) -> None:
    """Register the exception handlers that render every failure as JSON."""

    @app.exception_handler(PayloadValidationError)
    async def handle_payload_validation(_request: Request, exc: PayloadValidationError) -> JSONResponse:
        logger.warning("Rejected payload with %d violation(s)", len(exc.errors))
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": exc.errors})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(_request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = flatten_validation_errors(exc.errors())
        logger.warning("Rejected request: %s", errors)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
        if exc.status_code < status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.warning("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, messages.INTERNAL_ERROR)
