"""initial_schema

Create the booking schema:
- Events (one slot per date and start time)
- Bookings (performer requests, pending until approved)
- Invitations (single-use, short-lived signup links)

Revision ID: 3c1f0a9d2b47
Revises:
Create Date: 2026-10-19 09:12:40.518204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b47"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE event_status AS ENUM ('pending', 'booked');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE booking_status AS ENUM ('pending', 'approved');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.create_table(
        "events",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("date", sa.String(10), nullable=False),
        sa.Column("start_time", sa.String(5), nullable=False),
        sa.Column("end_time", sa.String(5), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("performer_email", sa.String(255), nullable=True),
        sa.Column("admin_id", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("calendar_event_id", sa.String(1024), nullable=True),
        sa.Column(
            "status",
            postgresql.ENUM(name="event_status", create_type=False),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("booked_performer_id", sa.String(255), nullable=True),
        sa.Column("booked_booking_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("booked_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.CheckConstraint(
            "status = 'pending' OR booked_booking_id IS NOT NULL",
            name="ck_events_booked_has_booking",
        ),
    )
    op.create_index("idx_events_status", "events", ["status"])
    op.create_index("idx_events_date", "events", ["date", "start_time"])

    op.create_table(
        "bookings",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("event_id", sa.String(64), nullable=False),
        sa.Column("performer_id", sa.String(255), nullable=False),
        sa.Column("performer_name", sa.String(200), nullable=False),
        sa.Column("performer_email", sa.String(255), nullable=False),
        sa.Column("event_title", sa.String(200), nullable=False),
        sa.Column("event_date", sa.String(10), nullable=False),
        sa.Column("event_start_time", sa.String(5), nullable=False),
        sa.Column("event_end_time", sa.String(5), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("invitation_id", sa.String(255), nullable=True),
        sa.Column(
            "status",
            postgresql.ENUM(name="booking_status", create_type=False),
            nullable=False,
            server_default="pending",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("approved_at", sa.TIMESTAMP(timezone=True), nullable=True),
    )
    op.create_index("idx_bookings_status", "bookings", ["status"])
    op.create_index("idx_bookings_event_status", "bookings", ["event_id", "status"])

    # At most one approved booking per event
    op.create_index(
        "idx_bookings_unique_approved_event",
        "bookings",
        ["event_id"],
        unique=True,
        postgresql_where=sa.text("status = 'approved'"),
    )

    op.create_table(
        "invitations",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("token", sa.String(255), nullable=False, unique=True),
        sa.Column("event_id", sa.String(64), nullable=False),
        sa.Column("performer_email", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("claimed", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("claimed_at", sa.TIMESTAMP(timezone=True), nullable=True),
    )
    op.create_index("idx_invitations_event_id", "invitations", ["event_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("invitations")
    op.drop_table("bookings")
    op.drop_table("events")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS booking_status")
    op.execute("DROP TYPE IF EXISTS event_status")
