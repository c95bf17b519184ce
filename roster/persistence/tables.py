"""SQLAlchemy table definitions.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, Enum, Index, MetaData, String, Table
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# CONFIRMATIONS TABLE (shared by every invite flow, discriminated by type)
# ============================================================================
confirmations_table = Table(
    "confirmations",
    metadata,
    Column("key", String(64), primary_key=True),  # Also the remote invite id
    Column(
        "type",
        Enum(
            "password_reset",
            "signup_confirmation",
            "careteam_invitation",
            "clinician_invite",
            name="confirmation_type",
            create_type=False,
        ),
        nullable=False,
    ),
    Column(
        "status",
        Enum(
            "pending",
            "completed",
            "declined",
            "canceled",
            name="confirmation_status",
            create_type=False,
        ),
        nullable=False,
        server_default="pending",
    ),
    Column("email", String(255), nullable=False),
    Column("user_id", String(64), nullable=True),
    Column("clinic_id", String(64), nullable=True),  # Clinician invites only
    Column("creator_id", String(64), nullable=True),
    Column("creator_clinic_id", String(64), nullable=True),
    Column("creator_clinic_name", String(255), nullable=True),
    Column("creator_full_name", String(255), nullable=True),
    Column("template_name", String(64), nullable=False),
    Column("created", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
    Column("modified", TIMESTAMP(timezone=True), nullable=True),
)

# Recipient listing: pending invites by email
Index(
    "idx_confirmations_email_type_status",
    confirmations_table.c.email,
    confirmations_table.c.type,
    confirmations_table.c.status,
)
Index(
    "idx_confirmations_clinic_type_status",
    confirmations_table.c.clinic_id,
    confirmations_table.c.type,
    confirmations_table.c.status,
)
Index(
    "idx_confirmations_user_type_status",
    confirmations_table.c.user_id,
    confirmations_table.c.type,
    confirmations_table.c.status,
)
