# bank_api/core/errors.py
"""
Error taxonomy and JSON error envelope.

Every failure that reaches a client is rendered as ``{"error": "<message>"}``
with the HTTP status carried by the exception. Details that should not leak
(decode errors, database messages on the auth path) are logged server-side only.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from tortoise.exceptions import BaseORMException

logger = logging.getLogger("uvicorn.error")


class BankAPIError(Exception):
    """Base error; ``message`` is what the client sees."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {"error": self.message}


class HashingError(BankAPIError):
    """Password hashing failed (backend error or password over the size limit)."""


class SigningError(BankAPIError):
    """Token could not be signed (missing secret or encoder failure)."""


class StorageError(BankAPIError):
    """Database operation failed."""


class AccountNotFound(StorageError):
    """No row for the requested id or number."""


class AuthError(BankAPIError):
    """Authorization gate rejection. Messages are deliberately generic."""

    status_code = status.HTTP_401_UNAUTHORIZED


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _handle_bank_error(request: Request, exc: BankAPIError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("[api] %s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def _handle_orm_error(request: Request, exc: BaseORMException) -> JSONResponse:
    logger.error("[api] %s %s storage error: %s", request.method, request.url.path, exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


async def _handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        where = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{where}: {first.get('msg')}" if where else str(first.get("msg"))
    else:
        message = "invalid request"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


def register_error_handlers(app: FastAPI) -> None:
    """Install the ``{"error": ...}`` envelope for every error class the API raises."""
    app.add_exception_handler(BankAPIError, _handle_bank_error)
    app.add_exception_handler(BaseORMException, _handle_orm_error)
    app.add_exception_handler(StarletteHTTPException, _handle_http_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
