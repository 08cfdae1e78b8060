"""Database initialization and model exports."""

from datetime import UTC, datetime

from flask_sqlalchemy import SQLAlchemy


db = SQLAlchemy()


def utcnow() -> datetime:
    """Naive UTC timestamp, matching how the columns are stored."""
    return datetime.now(UTC).replace(tzinfo=None)


# Import models to register them with SQLAlchemy metadata.
from .user import User  # noqa: E402,F401
from .otp_code import OtpCode  # noqa: E402,F401
from .worker import WorkerInfo, WorkerSkill  # noqa: E402,F401

__all__ = [
    "db",
    "utcnow",
    "User",
    "OtpCode",
    "WorkerInfo",
    "WorkerSkill",
]
