"""Helpers for turning upstream failures into HTTP errors."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from werkzeug.exceptions import InternalServerError

from models import db

UNIQUE_VIOLATION = "23505"


@contextmanager
def database_guard(message: str) -> Iterator[None]:
    """Roll back and raise a 500 with ``message`` on any database error."""

    try:
        yield
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.exception("%s: %s", message, exc)
        raise InternalServerError(message) from exc


def is_unique_violation(exc: IntegrityError) -> bool:
    """Return True when ``exc`` came from a unique constraint."""

    orig = getattr(exc, "orig", None)
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code is not None:
        return code == UNIQUE_VIOLATION
    return "unique" in str(orig).lower()
