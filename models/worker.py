"""Worker profile and skill models."""

from . import db, utcnow


ACCOUNT_STATUSES = ("none", "pending", "verified", "rejected")
SKILL_STATUSES = ("pending", "verified", "rejected")


class WorkerInfo(db.Model):
    """Identity details a worker submits for account verification."""

    __tablename__ = "worker_info"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )
    address = db.Column(db.Text, nullable=True)
    ktp_url = db.Column(db.String(1024), nullable=True)
    account_status = db.Column(
        db.Enum(*ACCOUNT_STATUSES, name="worker_account_status"),
        nullable=False,
        default="none",
        server_default=db.text("'none'"),
    )
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    user = db.relationship("User", back_populates="worker_info")
    skills = db.relationship(
        "WorkerSkill",
        back_populates="worker",
        cascade="all, delete-orphan",
        order_by="WorkerSkill.id",
    )

    def add_skill(self, skill_name: str, certificate_url: str) -> "WorkerSkill":
        """Attach a new skill awaiting review."""

        skill = WorkerSkill(
            skill_name=skill_name,
            certificate_url=certificate_url,
            verification_status="pending",
        )
        self.skills.append(skill)
        return skill

    def set_account_status(self, status: str) -> int:
        """Set the account status and carry pending skills along with it.

        Skills that were already verified or rejected keep their status.
        Returns the number of skills moved.
        """

        self.account_status = status
        return (
            WorkerSkill.query.filter_by(worker_id=self.id, verification_status="pending")
            .update({WorkerSkill.verification_status: status}, synchronize_session=False)
        )

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<WorkerInfo id={self.id} user_id={self.user_id} status={self.account_status}>"


class WorkerSkill(db.Model):
    """A single skill claim backed by a certificate."""

    __tablename__ = "worker_skills"

    id = db.Column(db.Integer, primary_key=True)
    worker_id = db.Column(
        db.Integer,
        db.ForeignKey("worker_info.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    skill_name = db.Column(db.String(255), nullable=False)
    certificate_url = db.Column(db.String(1024), nullable=False)
    verification_status = db.Column(
        db.Enum(*SKILL_STATUSES, name="worker_skill_status"),
        nullable=False,
        default="pending",
        server_default=db.text("'pending'"),
    )
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    worker = db.relationship("WorkerInfo", back_populates="skills")

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<WorkerSkill id={self.id} worker_id={self.worker_id} status={self.verification_status}>"
