"""create users, otp codes and worker tables"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f1c9a7b2d10"
down_revision = None
branch_labels = None
depends_on = None


ACCOUNT_STATUSES = ("none", "pending", "verified", "rejected")
SKILL_STATUSES = ("pending", "verified", "rejected")


def upgrade():
    account_status_enum = sa.Enum(*ACCOUNT_STATUSES, name="worker_account_status")
    skill_status_enum = sa.Enum(*SKILL_STATUSES, name="worker_skill_status")

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone_number", sa.String(length=32), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("is_verified", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("user_role", sa.JSON(), nullable=False),
        sa.Column("daily_rate", sa.Numeric(12, 2), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        sa.Column("is_working", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.UniqueConstraint("phone_number", name="uq_users_phone_number"),
    )

    op.create_table(
        "otp_codes",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("code", sa.String(length=6), nullable=False),
        sa.Column("expires_at", sa.DateTime(), nullable=False),
        sa.Column("used", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_otp_codes_email", "otp_codes", ["email"])

    op.create_table(
        "worker_info",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("ktp_url", sa.String(length=1024), nullable=True),
        sa.Column(
            "account_status",
            account_status_enum,
            nullable=False,
            server_default=sa.text("'none'"),
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_worker_info_user_id", "worker_info", ["user_id"], unique=True)

    op.create_table(
        "worker_skills",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "worker_id",
            sa.Integer(),
            sa.ForeignKey("worker_info.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("skill_name", sa.String(length=255), nullable=False),
        sa.Column("certificate_url", sa.String(length=1024), nullable=False),
        sa.Column(
            "verification_status",
            skill_status_enum,
            nullable=False,
            server_default=sa.text("'pending'"),
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_worker_skills_worker_id", "worker_skills", ["worker_id"])


def downgrade():
    op.drop_index("ix_worker_skills_worker_id", table_name="worker_skills")
    op.drop_table("worker_skills")
    op.drop_index("ix_worker_info_user_id", table_name="worker_info")
    op.drop_table("worker_info")
    op.drop_index("ix_otp_codes_email", table_name="otp_codes")
    op.drop_table("otp_codes")
    op.drop_table("users")

    sa.Enum(name="worker_skill_status").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="worker_account_status").drop(op.get_bind(), checkfirst=True)
