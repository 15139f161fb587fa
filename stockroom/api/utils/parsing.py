from __future__ import annotations

from flask import request
from pydantic import TypeAdapter, ValidationError

from stockroom.errors import InvalidArgument, InvalidParameter, ValidationFailed
from stockroom.schemas import PageRequest, validation_messages


def _get_payload():
    data = request.get_json(silent=True)
    if data is None:
        raise InvalidParameter(errors=["A JSON request body is required"])
    return data


def parse_body(schema):
    """Validate the JSON body against ``schema`` (a model class or a type such as ``list[Model]``)."""
    data = _get_payload()
    try:
        return TypeAdapter(schema).validate_python(data)
    except ValidationError as exc:
        raise ValidationFailed(errors=validation_messages(exc))


def parse_args(model):
    """Validate query-string arguments; malformed values are invalid arguments."""
    try:
        return model.model_validate(request.args.to_dict())
    except ValidationError as exc:
        raise InvalidArgument(errors=validation_messages(exc))


def page_request() -> PageRequest:
    return parse_args(PageRequest)
