"""Shared pytest fixtures for the application tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from config import Config  # noqa: E402
from mailer import AbstractMailer, MailDeliveryError  # noqa: E402
from models import db  # noqa: E402
from models.user import User  # noqa: E402


class BaseTestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    BCRYPT_ROUNDS = 4
    MAIL_USERNAME = "noreply@example.com"
    MAIL_PASSWORD = "app-password"
    MAIL_SUPPRESS_SEND = True
    CORS_ORIGINS = "*"


class RecordingMailer(AbstractMailer):
    """Keeps sent codes in memory instead of talking to SMTP."""

    def __init__(self):
        self.sent: list[tuple[str, str, int]] = []
        self.fail_with: str | None = None

    def send_otp(self, recipient: str, code: str, ttl_minutes: int) -> None:
        if self.fail_with:
            raise MailDeliveryError(self.fail_with)
        self.sent.append((recipient, code, ttl_minutes))

    def last_code_for(self, recipient: str) -> str:
        codes = [code for to, code, _ in self.sent if to == recipient]
        assert codes, f"no OTP sent to {recipient}"
        return codes[-1]


@pytest.fixture()
def mailer() -> RecordingMailer:
    return RecordingMailer()


@pytest.fixture()
def app(mailer: RecordingMailer) -> Flask:
    """Create a Flask application instance for tests."""

    application = create_app(BaseTestConfig, mailer=mailer)

    with application.app_context():
        db.create_all()

    yield application

    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Return a test client for the Flask app."""

    return app.test_client()


@pytest.fixture()
def make_user(app: Flask):
    """Persist a user and return its id."""

    def _make_user(
        email: str = "worker@example.com",
        phone_number: str = "081234567890",
        password: str = "rahasia123",
        *,
        full_name: str = "Budi Santoso",
        role: str = "worker",
        verified: bool = True,
    ) -> int:
        with app.app_context():
            user = User(
                email=email,
                phone_number=phone_number,
                full_name=full_name,
                is_verified=verified,
                user_role=[role],
            )
            user.set_password(password)
            db.session.add(user)
            db.session.commit()
            return user.id

    return _make_user
