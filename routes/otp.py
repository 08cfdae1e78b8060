"""OTP blueprint: issue and verify email one-time codes."""

from __future__ import annotations

import secrets
from datetime import timedelta

from flask import Blueprint, current_app, request
from werkzeug.exceptions import BadRequest, InternalServerError

from mailer import MailDeliveryError, get_mailer
from models import db
from models.otp_code import OtpCode
from schemas.otp_schemas import SendOtpRequest, VerifyOtpRequest
from utils.errors import database_guard
from utils.request_validation import is_valid_email, load_request, normalize_email
from utils.responses import success

OTP_MIN = 100000
OTP_MAX = 999999
INVALID_OTP_MESSAGE = "Kode OTP tidak valid atau sudah kadaluarsa"

otp_bp = Blueprint("otp", __name__)


def generate_otp() -> str:
    """Return a uniformly distributed six digit code."""
    return str(OTP_MIN + secrets.randbelow(OTP_MAX - OTP_MIN + 1))


def require_valid_otp(email: str, code: str) -> OtpCode:
    """Return the matching live code or raise the invalid-or-expired error."""

    otp = OtpCode.find_valid(email, code)
    if otp is None:
        raise BadRequest(INVALID_OTP_MESSAGE)
    return otp


@otp_bp.route("/send-otp", methods=["POST"])
def send_otp():
    """Issue a new code for an email address and mail it out."""

    payload = load_request(request, SendOtpRequest, message="Email diperlukan")
    email = normalize_email(payload.email)
    if not is_valid_email(email):
        raise BadRequest("Format email tidak valid")

    ttl_minutes = int(current_app.config.get("OTP_TTL_MINUTES", 5))
    code = generate_otp()

    with database_guard("Gagal menyimpan OTP"):
        OtpCode.issue(email, code, timedelta(minutes=ttl_minutes))
        db.session.commit()

    # The code stays persisted even if delivery fails.
    try:
        get_mailer().send_otp(email, code, ttl_minutes)
    except MailDeliveryError as exc:
        current_app.logger.exception("Error sending OTP to %s", email)
        raise InternalServerError(f"Gagal mengirim OTP: {exc}") from exc

    current_app.logger.info("OTP sent to %s", email)
    return success("Kode OTP telah dikirim ke email Anda")


@otp_bp.route("/verify-otp", methods=["POST"])
def verify_otp():
    """Mark a live code as used."""

    payload = load_request(request, VerifyOtpRequest, message="Email dan OTP diperlukan")
    email = normalize_email(payload.email)

    with database_guard("Gagal memverifikasi OTP"):
        otp = require_valid_otp(email, payload.otp)
        otp.mark_used()
        db.session.commit()

    current_app.logger.info("OTP verified for %s", email)
    return success("OTP berhasil diverifikasi")
