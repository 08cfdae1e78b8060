"""Self-service account endpoints: password, profile and location."""

from __future__ import annotations

from flask import Blueprint, current_app, request
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import BadRequest, NotFound

from models import db
from models.user import User
from schemas.account_schemas import (
    ChangeLocationRequest,
    ChangePasswordRequest,
    ChangeProfileRequest,
)
from utils.errors import database_guard, is_unique_violation
from utils.request_validation import load_request
from utils.responses import success

INCOMPLETE_MESSAGE = "Data tidak lengkap"
USER_NOT_FOUND_MESSAGE = "User tidak ditemukan"
DUPLICATE_PHONE_MESSAGE = "Nomor HP sudah terdaftar"

account_bp = Blueprint("account", __name__)


def get_user_or_404(user_id: int) -> User:
    user = db.session.get(User, user_id)
    if user is None:
        raise NotFound(USER_NOT_FOUND_MESSAGE)
    return user


def commit_user_changes() -> None:
    """Commit, mapping a phone/email clash to a 400."""

    try:
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        if is_unique_violation(exc):
            raise BadRequest(DUPLICATE_PHONE_MESSAGE) from exc
        raise


@account_bp.route("/change-password", methods=["POST"])
def change_password():
    payload = load_request(request, ChangePasswordRequest, message=INCOMPLETE_MESSAGE)

    with database_guard("Gagal mengubah password"):
        user = get_user_or_404(payload.user_id)
        if not user.check_password(payload.old_password):
            raise BadRequest("Password lama salah")

        user.set_password(payload.new_password)
        db.session.commit()

    current_app.logger.info("Password changed for user %s", user.id)
    return success("Password berhasil diubah")


@account_bp.route("/change-profile", methods=["POST"])
def change_profile():
    payload = load_request(request, ChangeProfileRequest, message=INCOMPLETE_MESSAGE)

    with database_guard("Gagal mengubah profil"):
        user = get_user_or_404(payload.user_id)
        user.full_name = payload.full_name
        user.phone_number = payload.phone_number
        commit_user_changes()

    return success("Profil berhasil diubah")


@account_bp.route("/change-location", methods=["POST"])
def change_location():
    """Update coordinates; the working flag only changes when it is sent non-null."""

    payload = load_request(request, ChangeLocationRequest, message=INCOMPLETE_MESSAGE)

    with database_guard("Gagal mengubah lokasi"):
        user = get_user_or_404(payload.user_id)
        user.latitude = payload.latitude
        user.longitude = payload.longitude
        if payload.is_working is not None:
            user.is_working = payload.is_working
        db.session.commit()

    return success("Lokasi berhasil diubah")
