"""Admin blueprint for user management and worker review."""

from __future__ import annotations

from flask import Blueprint, current_app, request
from werkzeug.exceptions import NotFound

from models import db
from models.worker import WorkerInfo, WorkerSkill
from routes.account import commit_user_changes, get_user_or_404
from schemas.account_schemas import AdminUpdateUserRequest, UserIdRequest
from schemas.worker_schemas import VerifyAccountRequest, VerifySkillRequest
from utils.errors import database_guard
from utils.request_validation import load_request
from utils.responses import success

USER_ID_REQUIRED_MESSAGE = "User ID diperlukan"
INVALID_DATA_MESSAGE = "Data invalid"

admin_bp = Blueprint("admin", __name__)


@admin_bp.route("/update-user", methods=["POST"])
def update_user():
    """Partially update a user's name, phone and daily rate."""

    payload = load_request(request, AdminUpdateUserRequest, message=USER_ID_REQUIRED_MESSAGE)

    with database_guard("Gagal memperbarui profil"):
        user = get_user_or_404(payload.user_id)
        if payload.full_name:
            user.full_name = payload.full_name
        if payload.phone_number:
            user.phone_number = payload.phone_number
        # An explicit null clears the rate; an absent key leaves it alone.
        if "daily_rate" in payload.model_fields_set:
            user.daily_rate = payload.daily_rate
        commit_user_changes()
        data = user.to_dict()

    return success("Profil berhasil diperbarui", data=data)


@admin_bp.route("/reset-password", methods=["POST"])
def reset_password():
    payload = load_request(request, UserIdRequest, message=USER_ID_REQUIRED_MESSAGE)
    default_password = current_app.config.get("DEFAULT_RESET_PASSWORD", "12345678")

    with database_guard("Gagal reset password"):
        user = get_user_or_404(payload.user_id)
        user.set_password(default_password)
        db.session.commit()

    current_app.logger.info("Password reset for user %s", payload.user_id)
    return success(f"Password berhasil direset ke {default_password}")


@admin_bp.route("/delete-user", methods=["POST"])
def delete_user():
    payload = load_request(request, UserIdRequest, message=USER_ID_REQUIRED_MESSAGE)

    with database_guard("Gagal menghapus user"):
        user = get_user_or_404(payload.user_id)
        db.session.delete(user)
        db.session.commit()

    current_app.logger.info("Deleted user %s", payload.user_id)
    return success("User berhasil dihapus")


@admin_bp.route("/verify-skill", methods=["POST"])
def verify_skill():
    payload = load_request(request, VerifySkillRequest, message=INVALID_DATA_MESSAGE)

    with database_guard("Gagal verifikasi"):
        skill = db.session.get(WorkerSkill, payload.skill_id)
        if skill is None:
            raise NotFound("Keahlian tidak ditemukan")
        skill.verification_status = payload.status
        db.session.commit()

    return success(f"Status keahlian diubah menjadi {payload.status}")


@admin_bp.route("/verify-account", methods=["POST"])
def verify_account():
    """Decide a worker's account and every skill still waiting on review."""

    payload = load_request(request, VerifyAccountRequest, message=INVALID_DATA_MESSAGE)

    with database_guard("Gagal verifikasi"):
        worker = WorkerInfo.query.filter_by(user_id=payload.user_id).first()
        if worker is None:
            raise NotFound("Data pekerja tidak ditemukan")
        moved = worker.set_account_status(payload.status)
        db.session.commit()

    current_app.logger.info(
        "Worker %s marked %s (%d pending skills updated)",
        payload.user_id,
        payload.status,
        moved,
    )
    return success(f"Akun dan keahlian berhasil di-{payload.status}")
