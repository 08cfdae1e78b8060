"""Application factory."""

from __future__ import annotations

import uuid

from flask import Flask, g, request
from flask_cors import CORS
from flask_mail import Mail
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException

from config import Config
from mailer import AbstractMailer, FlaskMailMailer
from models import db, utcnow
from routes.account import account_bp
from routes.admin import admin_bp
from routes.auth import auth_bp
from routes.otp import otp_bp
from routes.worker import worker_bp
from utils.responses import failure

migrate = Migrate()
mail = Mail()


def create_app(
    config_class: type[Config] = Config,
    mailer: AbstractMailer | None = None,
) -> Flask:
    """Create and configure the Flask application.

    ``mailer`` overrides the default Flask-Mail transport.
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Core subsystems
    db.init_app(app)
    migrate.init_app(app, db)
    mail.init_app(app)

    if mailer is None:
        mailer = FlaskMailMailer(
            mail,
            sender_name=app.config.get("MAIL_SENDER_NAME", "Aplikasi Tukang PUPR"),
            sender_address=app.config.get("MAIL_USERNAME"),
        )
    app.extensions["mailer"] = mailer

    # CORS
    CORS(
        app,
        resources={r"/*": {"origins": app.config.get("CORS_ORIGINS", "*")}},
    )

    # Blueprints
    app.register_blueprint(otp_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(account_bp)
    app.register_blueprint(worker_bp, url_prefix="/worker")
    app.register_blueprint(admin_bp, url_prefix="/admin")

    # Health
    @app.route("/health", methods=["GET"])
    def health_check():
        return {"status": "ok", "timestamp": utcnow().isoformat() + "Z"}

    # Errors
    _register_error_handlers(app)

    return app


def _register_error_handlers(app: Flask) -> None:
    """Register JSON error handlers with request IDs."""

    @app.before_request
    def _assign_request_id():
        g.request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    @app.after_request
    def _add_request_id_header(response):
        request_id = g.get("request_id")
        if request_id:
            response.headers.setdefault("X-Request-ID", request_id)
        return response

    @app.errorhandler(HTTPException)
    def _handle_http_exception(error: HTTPException):
        request_id = g.get("request_id") or str(uuid.uuid4())
        if error.code and error.code >= 500:
            app.logger.error("Request %s failed: %s", request_id, error.description)
        else:
            app.logger.info("Request %s rejected: %s", request_id, error.description)
        response, status = failure(
            error.description or error.name,
            error.code or 500,
            request_id=request_id,
        )
        for key, value in error.get_response().headers.items():
            if key.lower() not in {"content-type", "content-length"}:
                response.headers.setdefault(key, value)
        response.headers.setdefault("X-Request-ID", request_id)
        return response, status

    @app.errorhandler(Exception)
    def _handle_unexpected(error: Exception):
        request_id = g.get("request_id") or str(uuid.uuid4())
        app.logger.exception("Unhandled application error", exc_info=error)
        db.session.rollback()
        response, status = failure(
            "Terjadi kesalahan pada server", 500, request_id=request_id
        )
        response.headers.setdefault("X-Request-ID", request_id)
        return response, status


if __name__ == "__main__":
    application = create_app()
    port = application.config["PORT"]
    application.logger.info("Server running on port %s", port)
    application.logger.info("Mail account: %s", application.config.get("MAIL_USERNAME"))
    application.run(host="0.0.0.0", port=port)
