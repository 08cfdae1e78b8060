"""Mail backends."""

from flask import current_app

from .abstract_mailer import AbstractMailer, MailDeliveryError
from .flask_mail_mailer import FlaskMailMailer


def get_mailer() -> AbstractMailer:
    """Return the mailer bound to the current application."""
    return current_app.extensions["mailer"]


__all__ = ["AbstractMailer", "FlaskMailMailer", "MailDeliveryError", "get_mailer"]
