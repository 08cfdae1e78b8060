"""Authentication blueprint providing register and login endpoints."""

from __future__ import annotations

from flask import Blueprint, current_app, request
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import BadRequest, Unauthorized

from models import db
from models.user import USER_ROLES, User
from routes.otp import require_valid_otp
from schemas.auth_schemas import LoginRequest, RegisterRequest
from utils.errors import database_guard, is_unique_violation
from utils.request_validation import load_request, normalize_email
from utils.responses import success

DUPLICATE_USER_MESSAGE = "Email atau Nomor HP sudah terdaftar"

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/register", methods=["POST"])
def register():
    """Create a verified account once the caller proves the email with an OTP."""

    payload = load_request(
        request, RegisterRequest, message="Semua field wajib diisi (termasuk OTP)"
    )
    email = normalize_email(payload.email)
    role = payload.role.lower()
    if role not in USER_ROLES:
        raise BadRequest("Role tidak valid")

    with database_guard("Gagal registrasi"):
        otp = require_valid_otp(email, payload.otp)

        user = User(
            email=email,
            phone_number=payload.phone_number,
            full_name=payload.full_name,
            is_verified=True,
            user_role=[role],
        )
        user.set_password(payload.password)
        db.session.add(user)
        try:
            db.session.flush()
        except IntegrityError as exc:
            db.session.rollback()
            if is_unique_violation(exc):
                raise BadRequest(DUPLICATE_USER_MESSAGE) from exc
            raise

        otp.mark_used()
        db.session.commit()

    current_app.logger.info("Registered user %s as %s", user.id, role)
    return success("Registrasi berhasil")


@auth_bp.route("/login", methods=["POST"])
def login():
    """Check credentials for a verified user. No token is issued."""

    payload = load_request(
        request, LoginRequest, message="Identifier dan password wajib diisi"
    )
    identifier = payload.identifier
    email = normalize_email(identifier)

    with database_guard("Gagal login"):
        user = (
            User.query.filter(
                or_(User.email == email, User.phone_number == identifier),
                User.is_verified.is_(True),
            )
            .order_by(User.id)
            .first()
        )
    if user is None:
        raise Unauthorized("User tidak ditemukan")

    if not user.check_password(payload.password):
        raise Unauthorized("Password salah")

    return success(
        "Login berhasil",
        user={"id": user.id, "full_name": user.full_name, "role": list(user.user_role or [])},
    )
