"""Tests for self-service account endpoints."""

from __future__ import annotations

import pytest

from models import db
from models.user import User


def _get_user(app, user_id: int) -> User:
    with app.app_context():
        user = db.session.get(User, user_id)
        db.session.expunge(user)
        return user


def test_change_password_requires_old_password(app, client, make_user):
    user_id = make_user(password="lama12345")

    wrong = client.post(
        "/change-password",
        json={"userId": user_id, "oldPassword": "salah", "newPassword": "baru12345"},
    )
    assert wrong.status_code == 400
    assert wrong.get_json()["message"] == "Password lama salah"

    right = client.post(
        "/change-password",
        json={"userId": user_id, "oldPassword": "lama12345", "newPassword": "baru12345"},
    )
    assert right.status_code == 200
    assert right.get_json() == {"success": True, "message": "Password berhasil diubah"}

    login = client.post(
        "/login", json={"identifier": "worker@example.com", "password": "baru12345"}
    )
    assert login.status_code == 200


def test_change_password_unknown_user(client):
    response = client.post(
        "/change-password",
        json={"userId": 999, "oldPassword": "a", "newPassword": "b"},
    )

    assert response.status_code == 404
    assert response.get_json()["message"] == "User tidak ditemukan"


@pytest.mark.parametrize(
    "payload",
    [
        {"oldPassword": "a", "newPassword": "b"},
        {"userId": 1, "newPassword": "b"},
        {"userId": 1, "oldPassword": "a"},
        {"userId": "abc", "oldPassword": "a", "newPassword": "b"},
    ],
)
def test_change_password_incomplete(client, payload):
    response = client.post("/change-password", json=payload)

    assert response.status_code == 400
    assert response.get_json()["message"] == "Data tidak lengkap"


def test_change_profile_updates_name_and_phone(app, client, make_user):
    user_id = make_user()

    response = client.post(
        "/change-profile",
        json={"userId": str(user_id), "fullName": "Budi S.", "phoneNumber": "0822"},
    )

    assert response.status_code == 200
    user = _get_user(app, user_id)
    assert user.full_name == "Budi S."
    assert user.phone_number == "0822"


def test_change_profile_rejects_taken_phone(app, client, make_user):
    user_id = make_user()
    make_user(email="other@example.com", phone_number="0833")

    response = client.post(
        "/change-profile",
        json={"userId": user_id, "fullName": "Budi", "phoneNumber": "0833"},
    )

    assert response.status_code == 400
    assert response.get_json()["message"] == "Nomor HP sudah terdaftar"
    assert _get_user(app, user_id).phone_number == "081234567890"


def test_change_profile_incomplete(client, make_user):
    user_id = make_user()

    response = client.post("/change-profile", json={"userId": user_id, "fullName": "Budi"})

    assert response.status_code == 400


def test_change_location_with_working_flag(app, client, make_user):
    user_id = make_user()

    response = client.post(
        "/change-location",
        json={"userId": user_id, "latitude": -7.8, "longitude": 110.36, "isWorking": True},
    )

    assert response.status_code == 200
    assert response.get_json()["message"] == "Lokasi berhasil diubah"
    user = _get_user(app, user_id)
    assert (user.latitude, user.longitude, user.is_working) == (-7.8, 110.36, True)


@pytest.mark.parametrize("extra", [{"isWorking": None}, {}])
def test_change_location_without_working_flag_keeps_it(app, client, make_user, extra):
    user_id = make_user()
    client.post(
        "/change-location",
        json={"userId": user_id, "latitude": 1.0, "longitude": 2.0, "isWorking": True},
    )

    response = client.post(
        "/change-location",
        json={"userId": user_id, "latitude": 0, "longitude": 0, **extra},
    )

    assert response.status_code == 200
    user = _get_user(app, user_id)
    assert (user.latitude, user.longitude, user.is_working) == (0.0, 0.0, True)


def test_change_location_incomplete(client, make_user):
    user_id = make_user()

    response = client.post("/change-location", json={"userId": user_id, "latitude": 1.0})

    assert response.status_code == 400
    assert response.get_json()["message"] == "Data tidak lengkap"


def test_non_json_body_is_rejected(client):
    response = client.post("/change-profile", data="userId=1", content_type="text/plain")

    assert response.status_code == 400
    body = response.get_json()
    assert body["success"] is False
    assert "application/json" in body["message"]
