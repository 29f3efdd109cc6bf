"""SQLAlchemy table definitions for the venue booking store.

These Core tables back the Postgres repositories and match the schema
defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# EVENTS TABLE
# ============================================================================
events_table = Table(
    "events",
    metadata,
    Column("id", String(64), primary_key=True),  # {date}_{HHMM}
    Column("title", String(200), nullable=False),
    Column("date", String(10), nullable=False),  # YYYY-MM-DD
    Column("start_time", String(5), nullable=False),  # HH:MM
    Column("end_time", String(5), nullable=False),  # HH:MM
    Column("description", Text, nullable=False, server_default=""),
    Column("performer_email", String(255), nullable=True),
    Column("admin_id", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("updated_at", TIMESTAMP(timezone=True), nullable=True),
    Column("calendar_event_id", String(1024), nullable=True),
    Column(
        "status",
        Enum("pending", "booked", name="event_status", create_type=False),
        nullable=False,
        server_default="pending",
    ),
    Column("booked_performer_id", String(255), nullable=True),
    Column("booked_booking_id", UUID(as_uuid=True), nullable=True),
    Column("booked_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint(
        "status = 'pending' OR booked_booking_id IS NOT NULL",
        name="ck_events_booked_has_booking",
    ),
)

Index("idx_events_status", events_table.c.status)
Index("idx_events_date", events_table.c.date, events_table.c.start_time)

# ============================================================================
# BOOKINGS TABLE
# ============================================================================
# No foreign key to events: pending bookings outlive a deleted event
bookings_table = Table(
    "bookings",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("event_id", String(64), nullable=False),
    Column("performer_id", String(255), nullable=False),
    Column("performer_name", String(200), nullable=False),
    Column("performer_email", String(255), nullable=False),
    Column("event_title", String(200), nullable=False),
    Column("event_date", String(10), nullable=False),
    Column("event_start_time", String(5), nullable=False),
    Column("event_end_time", String(5), nullable=False),
    Column("notes", Text, nullable=True),
    Column("invitation_id", String(255), nullable=True),
    Column(
        "status",
        Enum("pending", "approved", name="booking_status", create_type=False),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("approved_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_bookings_status", bookings_table.c.status)
Index("idx_bookings_event_status", bookings_table.c.event_id, bookings_table.c.status)

# At most one approved booking per event
Index(
    "idx_bookings_unique_approved_event",
    bookings_table.c.event_id,
    unique=True,
    postgresql_where=bookings_table.c.status == "approved",
)

# ============================================================================
# INVITATIONS TABLE
# ============================================================================
invitations_table = Table(
    "invitations",
    metadata,
    Column("id", String(255), primary_key=True),  # {contact}_{millis}
    Column("token", String(255), nullable=False, unique=True),  # URL-safe token
    Column("event_id", String(64), nullable=False),
    Column("performer_email", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column("claimed", Boolean, nullable=False, server_default="false"),
    Column("claimed_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_invitations_event_id", invitations_table.c.event_id)
