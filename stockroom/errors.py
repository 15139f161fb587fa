# stockroom/errors.py
"""
Error kinds raised by the handlers and the single translator that turns
them (and anything unhandled) into the JSON envelope.
"""
from __future__ import annotations

import enum

from flask import jsonify, request
from werkzeug.exceptions import HTTPException

from stockroom.extensions import db
from stockroom.schemas.common import ApiResponse


class ErrorKind(enum.Enum):
    INVALID_PARAMETER = (400, "Invalid parameter")
    INVALID_ARGUMENT = (400, "Invalid argument")
    UNAUTHORIZED = (401, "Unauthorized access")
    NOT_FOUND = (404, "Resource not found")
    INVALID_OPERATION = (400, "Invalid operation")
    VALIDATION = (400, "Validation failed")
    SERVER_ERROR = (500, "A server error occurred")

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message


class ServiceError(Exception):
    """Base for every expected failure a handler reports."""

    kind = ErrorKind.SERVER_ERROR

    def __init__(self, message: str | None = None, errors=None, field: str | None = None):
        self.message = message or self.kind.message
        self.errors = list(errors) if errors else None
        self.field = field
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return self.kind.status_code


class InvalidParameter(ServiceError):
    kind = ErrorKind.INVALID_PARAMETER


class InvalidArgument(ServiceError):
    kind = ErrorKind.INVALID_ARGUMENT


class Unauthorized(ServiceError):
    kind = ErrorKind.UNAUTHORIZED


class NotFound(ServiceError):
    kind = ErrorKind.NOT_FOUND


class InvalidOperation(ServiceError):
    kind = ErrorKind.INVALID_OPERATION


class ValidationFailed(ServiceError):
    kind = ErrorKind.VALIDATION


class RuleViolation(ValidationFailed):
    """A business rule rejected the write; ``field`` names the offending input."""


def error_payload(message: str, errors=None) -> dict:
    return ApiResponse(success=False, message=message, errors=errors).model_dump(by_alias=True)


def _envelope(kind: ErrorKind, message: str | None = None, errors=None):
    return jsonify(error_payload(message or kind.message, errors)), kind.status_code


def _is_html_request() -> bool:
    return (request.blueprint or "").startswith("admin")


def register_error_handlers(app) -> None:
    @app.errorhandler(ServiceError)
    def handle_service_error(exc: ServiceError):
        db.session.rollback()
        return jsonify(error_payload(exc.message, exc.errors)), exc.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(exc: HTTPException):
        if _is_html_request():
            return exc
        if exc.code == 404:
            return _envelope(ErrorKind.NOT_FOUND)
        return jsonify(error_payload(exc.name, [exc.description] if exc.description else None)), exc.code

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        db.session.rollback()
        if isinstance(exc, (ValueError, OverflowError)):
            app.logger.warning("Invalid argument: %s", exc)
            return _envelope(ErrorKind.INVALID_ARGUMENT, errors=[str(exc)])
        if isinstance(exc, PermissionError):
            app.logger.warning("Unauthorized access: %s", exc)
            return _envelope(ErrorKind.UNAUTHORIZED)

        app.logger.exception("Unexpected error while handling %s %s: %s", request.method, request.path, exc)
        return _envelope(ErrorKind.SERVER_ERROR)
