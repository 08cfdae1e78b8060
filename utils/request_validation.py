"""Utilities for validating incoming Flask requests."""

from __future__ import annotations

import re
from typing import TypeVar

from flask import Request
from pydantic import BaseModel, ValidationError
from werkzeug.exceptions import BadRequest

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def parse_json_request(req: Request) -> dict:
    """Return the parsed JSON object body (possibly empty) or raise a 400 error."""

    if not req.is_json:
        raise BadRequest("Content-Type permintaan harus application/json.")

    data = req.get_json(silent=False)
    if data is None:
        raise BadRequest("Body JSON diperlukan.")

    if not isinstance(data, dict):
        raise BadRequest("Body JSON harus berupa objek.")

    return data


def load_request(req: Request, schema: type[SchemaT], *, message: str) -> SchemaT:
    """Validate the JSON body against ``schema``.

    Any missing or malformed field is reported with the endpoint's own
    ``message`` so clients see a single, stable error per endpoint.
    """

    data = parse_json_request(req)
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise BadRequest(message) from exc


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value))


def normalize_email(raw_email: str | None) -> str:
    """Normalize an email string by stripping whitespace and lowering case."""
    return (raw_email or "").strip().lower()
