"""User model definition."""

from decimal import Decimal

from utils.passwords import hash_password, verify_password

from . import db, utcnow


USER_ROLES = ("worker", "employer", "admin")


class User(db.Model):
    """Represents a registered app user (worker, employer or admin)."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False)
    phone_number = db.Column(db.String(32), unique=True, nullable=False)
    full_name = db.Column(db.String(255), nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    is_verified = db.Column(
        db.Boolean,
        nullable=False,
        default=False,
        server_default=db.false(),
    )
    user_role = db.Column(db.JSON, nullable=False, default=list)
    daily_rate = db.Column(db.Numeric(12, 2), nullable=True)
    latitude = db.Column(db.Float, nullable=True)
    longitude = db.Column(db.Float, nullable=True)
    is_working = db.Column(
        db.Boolean,
        nullable=False,
        default=False,
        server_default=db.false(),
    )
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    worker_info = db.relationship(
        "WorkerInfo",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )

    def set_password(self, password: str) -> None:
        """Hash and store the password."""

        self.password_hash = hash_password(password)

    def check_password(self, password: str) -> bool:
        """Verify a password against the stored hash."""

        return verify_password(password, self.password_hash)

    def to_dict(self) -> dict:
        """Serialize the user without its password hash."""

        daily_rate = (
            float(self.daily_rate) if isinstance(self.daily_rate, Decimal) else self.daily_rate
        )
        return {
            "id": self.id,
            "email": self.email,
            "phone_number": self.phone_number,
            "full_name": self.full_name,
            "is_verified": self.is_verified,
            "user_role": list(self.user_role or []),
            "daily_rate": daily_rate,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "is_working": self.is_working,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<User {self.email}>"
