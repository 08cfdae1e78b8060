"""OtpCode model definition."""

from __future__ import annotations

from datetime import datetime, timedelta

from . import db, utcnow


class OtpCode(db.Model):
    """A one-time code mailed to an address to prove ownership of it."""

    __tablename__ = "otp_codes"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), nullable=False, index=True)
    code = db.Column(db.String(6), nullable=False)
    expires_at = db.Column(db.DateTime, nullable=False)
    used = db.Column(
        db.Boolean,
        nullable=False,
        default=False,
        server_default=db.false(),
    )
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    @classmethod
    def issue(cls, email: str, code: str, ttl: timedelta, now: datetime | None = None) -> OtpCode:
        """Invalidate outstanding codes for ``email`` and stage a fresh one.

        The caller commits; both statements land in the same transaction.
        """

        now = now or utcnow()
        cls.query.filter_by(email=email, used=False).update(
            {cls.used: True}, synchronize_session=False
        )
        otp = cls(email=email, code=code, created_at=now, expires_at=now + ttl, used=False)
        db.session.add(otp)
        return otp

    @classmethod
    def find_valid(cls, email: str, code: str, now: datetime | None = None) -> OtpCode | None:
        """Return the newest unused, unexpired code matching ``email`` and ``code``."""

        now = now or utcnow()
        return (
            cls.query.filter(
                cls.email == email,
                cls.code == code,
                cls.used.is_(False),
                cls.expires_at >= now,
            )
            .order_by(cls.created_at.desc(), cls.id.desc())
            .first()
        )

    def mark_used(self) -> None:
        self.used = True

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<OtpCode id={self.id} email={self.email} used={self.used}>"
