# todo_api/utils/errors.py
from typing import Dict, Optional

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class ApiError(Exception):
    """Base error rendered as {"message": ..., "error": ...}"""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, error: Optional[str] = None, headers: Optional[Dict[str, str]] = None):
        self.message = message or self.default_message
        self.error = error
        self.headers = headers
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.error is not None:
            body["error"] = self.error
        return body


class DuplicateIdentity(ApiError):
    status_code = 400
    default_message = "User already exists"


class InvalidCredentials(ApiError):
    # Same body for unknown email and wrong password
    status_code = 401
    default_message = "Invalid credentials"


class Unauthenticated(ApiError):
    status_code = 401
    default_message = "Could not validate credentials"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class NotFound(ApiError):
    # Same body for a missing task and someone else's task
    status_code = 404
    default_message = "Task not found"


class ValidationError(ApiError):
    status_code = 400
    default_message = "Validation failed"


class StoreFailure(ApiError):
    status_code = 500
    default_message = "Database error"


class InvalidToken(Exception):
    """Token is malformed, badly signed or expired"""


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=exc.headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = ValidationError(error="; ".join(_describe(err) for err in exc.errors()))
    return JSONResponse(
        status_code=error.status_code,
        content={**error.to_dict(), "details": jsonable_encoder(exc.errors())},
    )


def _describe(err: dict) -> str:
    location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
    return f"{location}: {err.get('msg')}" if location else str(err.get("msg"))
