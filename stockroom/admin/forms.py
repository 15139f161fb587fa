"""Helpers that turn validation failures into per-field form messages."""
from __future__ import annotations

from flask import flash
from pydantic import ValidationError

from stockroom.errors import ServiceError


def field_errors(exc: ValidationError) -> dict[str, str]:
    """Map each failing field (by its wire name) to its first message."""
    errors: dict[str, str] = {}
    for err in exc.errors():
        loc = err.get("loc") or ("__all__",)
        reason = err.get("msg", "Invalid value")
        if reason.startswith("Value error, "):
            reason = reason[len("Value error, "):]
        errors.setdefault(str(loc[-1]), reason)
    return errors


def service_errors(exc: ServiceError) -> dict[str, str]:
    """Field-scoped errors go next to the field, the rest are flashed."""
    if exc.field:
        return {exc.field: exc.message}
    for message in exc.errors or [exc.message]:
        flash(message, "danger")
    return {}
