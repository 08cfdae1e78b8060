"""JSON response envelope shared by every endpoint."""

from __future__ import annotations

from http import HTTPStatus

from flask import jsonify


def success(message: str, status: int = HTTPStatus.OK, **extra) -> tuple:
    payload = {"success": True, "message": message}
    payload.update(extra)
    return jsonify(payload), status


def failure(message: str, status: int, **extra) -> tuple:
    payload = {"success": False, "message": message}
    payload.update(extra)
    return jsonify(payload), status
