from __future__ import annotations

from flask import jsonify
from pydantic import BaseModel

from stockroom.schemas import ApiResponse


def _jsonable(value):
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


def ok(data=None, message: str = "", status: int = 200):
    """Wrap ``data`` in the success envelope."""
    body = ApiResponse(success=True, message=message, data=_jsonable(data))
    return jsonify(body.model_dump(by_alias=True)), status


def created(data=None, message: str = "", location: str | None = None):
    response, status = ok(data, message, status=201)
    if location:
        response.headers["Location"] = location
    return response, status
