"""Seed an administrator user."""

import os
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from config import Config  # noqa: E402
from models import db  # noqa: E402
from models.user import User  # noqa: E402

ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@example.com")
ADMIN_PHONE = os.getenv("ADMIN_PHONE", "080000000000")
ADMIN_NAME = os.getenv("ADMIN_NAME", "Administrator")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "AdminPass123")


def main(config_class: type[Config] = Config) -> str:
    app = create_app(config_class)
    with app.app_context():
        admin = User.query.filter_by(email=ADMIN_EMAIL).first()
        if admin is None:
            admin = User(
                email=ADMIN_EMAIL,
                phone_number=ADMIN_PHONE,
                full_name=ADMIN_NAME,
                is_verified=True,
                user_role=["admin"],
            )
            db.session.add(admin)
            action = "created"
        else:
            roles = list(admin.user_role or [])
            if "admin" not in roles:
                roles.append("admin")
            admin.user_role = roles
            admin.is_verified = True
            action = "updated"
        admin.set_password(ADMIN_PASSWORD)
        db.session.commit()
        app.logger.info("Admin user %s: %s", action, ADMIN_EMAIL)
    return action


if __name__ == "__main__":
    print(f"Admin user {main()}: {ADMIN_EMAIL}")
