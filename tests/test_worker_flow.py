"""End-to-end tests for the worker verification workflow."""

from __future__ import annotations

import pytest

from models import db
from models.worker import WorkerInfo, WorkerSkill


def _add_skill(client, user_id: int, name: str = "Tukang kayu"):
    return client.post(
        "/worker/add-skill",
        json={"userId": user_id, "skillName": name, "certificateUrl": f"https://cdn/{name}.pdf"},
    )


def _submit_initial(client, user_id: int):
    return client.post(
        "/worker/submit-initial",
        json={
            "userId": user_id,
            "ktpUrl": "https://cdn/ktp.jpg",
            "address": "Jl. Malioboro 1, Yogyakarta",
            "skillName": "Tukang batu",
            "certificateUrl": "https://cdn/batu.pdf",
        },
    )


def _statuses(app, user_id: int) -> tuple[str, dict[str, str]]:
    with app.app_context():
        worker = WorkerInfo.query.filter_by(user_id=user_id).one()
        return worker.account_status, {
            skill.skill_name: skill.verification_status for skill in worker.skills
        }


def test_add_skill_creates_worker_info_lazily(app, client, make_user):
    user_id = make_user()

    response = _add_skill(client, user_id)

    assert response.status_code == 200
    assert response.get_json()["message"] == (
        "Keahlian berhasil ditambahkan dan menunggu verifikasi"
    )
    assert _statuses(app, user_id) == ("none", {"Tukang kayu": "pending"})

    _add_skill(client, user_id, "Tukang cat")
    with app.app_context():
        assert WorkerInfo.query.count() == 1
        assert WorkerSkill.query.count() == 2


def test_add_skill_unknown_user(client):
    response = _add_skill(client, 404)

    assert response.status_code == 404
    assert response.get_json()["message"] == "User tidak ditemukan"


def test_add_skill_incomplete(client, make_user):
    user_id = make_user()

    response = client.post("/worker/add-skill", json={"userId": user_id, "skillName": "x"})

    assert response.status_code == 400
    assert response.get_json()["message"] == "Data tidak lengkap"


def test_submit_initial_upserts_worker_info(app, client, make_user):
    user_id = make_user()
    _add_skill(client, user_id)

    response = _submit_initial(client, user_id)

    assert response.status_code == 200
    assert response.get_json()["message"] == (
        "Verifikasi berhasil dikirim. Mohon tunggu persetujuan admin."
    )
    with app.app_context():
        worker = WorkerInfo.query.filter_by(user_id=user_id).one()
        assert worker.account_status == "pending"
        assert worker.ktp_url == "https://cdn/ktp.jpg"
        assert worker.address == "Jl. Malioboro 1, Yogyakarta"
        assert [s.skill_name for s in worker.skills] == ["Tukang kayu", "Tukang batu"]
        assert WorkerInfo.query.count() == 1


def test_submit_initial_resets_rejected_account_to_pending(app, client, make_user):
    user_id = make_user()
    _submit_initial(client, user_id)
    client.post("/admin/verify-account", json={"userId": user_id, "status": "rejected"})

    _submit_initial(client, user_id)

    status, _ = _statuses(app, user_id)
    assert status == "pending"


def test_verify_skill_sets_single_status(app, client, make_user):
    user_id = make_user()
    _add_skill(client, user_id, "A")
    _add_skill(client, user_id, "B")
    with app.app_context():
        skill_id = WorkerSkill.query.filter_by(skill_name="A").one().id

    response = client.post("/admin/verify-skill", json={"skillId": skill_id, "status": "verified"})

    assert response.status_code == 200
    assert response.get_json()["message"] == "Status keahlian diubah menjadi verified"
    assert _statuses(app, user_id)[1] == {"A": "verified", "B": "pending"}


@pytest.mark.parametrize(
    "payload",
    [
        {"skillId": 1, "status": "approved"},
        {"skillId": 1},
        {"status": "verified"},
    ],
)
def test_verify_skill_invalid_input(client, payload):
    response = client.post("/admin/verify-skill", json=payload)

    assert response.status_code == 400
    assert response.get_json()["message"] == "Data invalid"


def test_verify_skill_unknown_skill(client):
    response = client.post("/admin/verify-skill", json={"skillId": 99, "status": "pending"})

    assert response.status_code == 404


def test_verify_account_moves_only_pending_skills(app, client, make_user):
    user_id = make_user()
    _submit_initial(client, user_id)
    for name in ("done", "refused", "waiting"):
        _add_skill(client, user_id, name)
    with app.app_context():
        for name, status in (("done", "verified"), ("refused", "rejected")):
            WorkerSkill.query.filter_by(skill_name=name).one().verification_status = status
        db.session.commit()

    response = client.post("/admin/verify-account", json={"userId": user_id, "status": "verified"})

    assert response.status_code == 200
    assert response.get_json()["message"] == "Akun dan keahlian berhasil di-verified"
    assert _statuses(app, user_id) == (
        "verified",
        {
            "Tukang batu": "verified",
            "done": "verified",
            "refused": "rejected",
            "waiting": "verified",
        },
    )


def test_verify_account_rejection(app, client, make_user):
    user_id = make_user()
    _submit_initial(client, user_id)

    response = client.post("/admin/verify-account", json={"userId": user_id, "status": "rejected"})

    assert response.status_code == 200
    assert _statuses(app, user_id) == ("rejected", {"Tukang batu": "rejected"})


def test_verify_account_rejects_pending_status_and_unknown_worker(client, make_user):
    user_id = make_user()

    pending = client.post("/admin/verify-account", json={"userId": user_id, "status": "pending"})
    assert pending.status_code == 400
    assert pending.get_json()["message"] == "Data invalid"

    missing = client.post("/admin/verify-account", json={"userId": user_id, "status": "verified"})
    assert missing.status_code == 404


def test_submit_initial_unknown_user(app, client):
    response = _submit_initial(client, 404)

    assert response.status_code == 404
    assert response.get_json()["message"] == "User tidak ditemukan"
    with app.app_context():
        assert WorkerInfo.query.count() == 0
        assert WorkerSkill.query.count() == 0
