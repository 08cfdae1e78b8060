"""Worker blueprint for skill and identity submissions."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from models import db
from models.worker import WorkerInfo
from routes.account import INCOMPLETE_MESSAGE, get_user_or_404
from schemas.worker_schemas import AddSkillRequest, SubmitInitialRequest
from utils.errors import database_guard
from utils.request_validation import load_request
from utils.responses import success

worker_bp = Blueprint("worker", __name__)


def _get_or_create_worker_info(user_id: int) -> WorkerInfo:
    user = get_user_or_404(user_id)
    if user.worker_info is None:
        user.worker_info = WorkerInfo(user_id=user.id)
    return user.worker_info


@worker_bp.route("/add-skill", methods=["POST"])
def add_skill():
    """Submit a skill for review, creating the worker profile if needed."""

    payload = load_request(request, AddSkillRequest, message=INCOMPLETE_MESSAGE)

    with database_guard("Gagal menambahkan keahlian"):
        worker = _get_or_create_worker_info(payload.user_id)
        worker.add_skill(payload.skill_name, payload.certificate_url)
        db.session.commit()

    return success("Keahlian berhasil ditambahkan dan menunggu verifikasi")


@worker_bp.route("/submit-initial", methods=["POST"])
def submit_initial():
    """Submit identity documents and the first skill; the account goes to pending."""

    payload = load_request(request, SubmitInitialRequest, message=INCOMPLETE_MESSAGE)

    with database_guard("Gagal mengirim data"):
        worker = _get_or_create_worker_info(payload.user_id)
        worker.address = payload.address
        worker.ktp_url = payload.ktp_url
        worker.account_status = "pending"
        worker.add_skill(payload.skill_name, payload.certificate_url)
        db.session.commit()

    current_app.logger.info("Worker %s submitted initial verification", payload.user_id)
    return success("Verifikasi berhasil dikirim. Mohon tunggu persetujuan admin.")
