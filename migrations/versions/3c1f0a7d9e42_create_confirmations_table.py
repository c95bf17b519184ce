"""create_confirmations_table

Create the confirmations store shared by the invite flows:
- Confirmation type and status ENUMs
- Confirmations keyed by invite key, with the creator snapshot flattened
- Lookup indexes for recipient email, clinic and user

Revision ID: 3c1f0a7d9e42
Revises:
Create Date: 2026-10-17 09:12:44.210391

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a7d9e42"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE confirmation_type AS ENUM (
                'password_reset',
                'signup_confirmation',
                'careteam_invitation',
                'clinician_invite'
            );
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE confirmation_status AS ENUM (
                'pending', 'completed', 'declined', 'canceled'
            );
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.create_table(
        "confirmations",
        sa.Column("key", sa.String(64), nullable=False),
        sa.Column(
            "type",
            postgresql.ENUM(name="confirmation_type", create_type=False),
            nullable=False,
        ),
        sa.Column(
            "status",
            postgresql.ENUM(name="confirmation_status", create_type=False),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=True),
        sa.Column("clinic_id", sa.String(64), nullable=True),
        sa.Column("creator_id", sa.String(64), nullable=True),
        sa.Column("creator_clinic_id", sa.String(64), nullable=True),
        sa.Column("creator_clinic_name", sa.String(255), nullable=True),
        sa.Column("creator_full_name", sa.String(255), nullable=True),
        sa.Column("template_name", sa.String(64), nullable=False),
        sa.Column(
            "created",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("modified", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("key"),
    )
    op.create_index(
        "idx_confirmations_email_type_status",
        "confirmations",
        ["email", "type", "status"],
    )
    op.create_index(
        "idx_confirmations_clinic_type_status",
        "confirmations",
        ["clinic_id", "type", "status"],
    )
    op.create_index(
        "idx_confirmations_user_type_status",
        "confirmations",
        ["user_id", "type", "status"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("confirmations")

    op.execute("DROP TYPE IF EXISTS confirmation_status")
    op.execute("DROP TYPE IF EXISTS confirmation_type")
