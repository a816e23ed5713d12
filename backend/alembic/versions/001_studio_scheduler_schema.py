# backend/alembic/versions/001_studio_scheduler_schema.py
"""Studio scheduler schema - studios, roster, bookings and email log

Revision ID: 001_studio_scheduler_schema
Revises:
Create Date: 2026-10-19 00:00:00.000000

Creates every table in its final form. Times of day are stored as UTC
``HH:MM`` strings; each booking row populates exactly one of its AM/PM
time pairs.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001_studio_scheduler_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _slot_time_columns() -> list:
    return [
        sa.Column("am_start_time", sa.String(5), nullable=True),
        sa.Column("am_end_time", sa.String(5), nullable=True),
        sa.Column("pm_start_time", sa.String(5), nullable=True),
        sa.Column("pm_end_time", sa.String(5), nullable=True),
    ]


def _timestamps() -> list:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    """Create studio scheduler tables."""
    print("Creating studio scheduler tables...")

    op.create_table(
        "studios",
        sa.Column("id", sa.String(26), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_slot_time_columns(),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_studios_id", "studios", ["id"])

    op.create_table(
        "rooms",
        sa.Column("id", sa.String(26), nullable=False),
        sa.Column("studio_id", sa.String(26), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("room_number", sa.String(50), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["studio_id"], ["studios.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_rooms_id", "rooms", ["id"])
    op.create_index("ix_rooms_studio_id", "rooms", ["studio_id"])

    op.create_table(
        "voice_actors",
        sa.Column("id", sa.String(26), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("code", sa.String(50), nullable=True),
        sa.Column("dietary_notes", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_voice_actors_id", "voice_actors", ["id"])
    op.create_index("ix_voice_actors_email", "voice_actors", ["email"], unique=True)

    op.create_table(
        "directors",
        sa.Column("id", sa.String(26), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_directors_id", "directors", ["id"])

    op.create_table(
        "director_weekly_availability",
        sa.Column("id", sa.String(26), nullable=False),
        sa.Column("director_id", sa.String(26), nullable=False),
        sa.Column("day_of_week", sa.Integer(), nullable=False),
        *_slot_time_columns(),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["director_id"], ["directors.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("director_id", "day_of_week", name="uq_director_weekly_day"),
        sa.CheckConstraint("day_of_week >= 0 AND day_of_week <= 6", name="ck_weekly_day_range"),
    )
    op.create_index(
        "ix_director_weekly_availability_director_id",
        "director_weekly_availability",
        ["director_id"],
    )

    op.create_table(
        "director_date_overrides",
        sa.Column("id", sa.String(26), nullable=False),
        sa.Column("director_id", sa.String(26), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("override_type", sa.String(50), nullable=True),
        *_slot_time_columns(),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["director_id"], ["directors.id"], ondelete="CASCADE"),
    )
    op.create_index(
        "ix_director_date_overrides_director_id", "director_date_overrides", ["director_id"]
    )
    op.create_index("ix_director_date_overrides_date", "director_date_overrides", ["date"])

    op.create_table(
        "bookings",
        sa.Column("id", sa.String(26), nullable=False),
        # Participants are restricted: people with bookings cannot be deleted
        sa.Column("voice_actor_id", sa.String(26), nullable=False),
        sa.Column("voice_actor_id_2", sa.String(26), nullable=False),
        sa.Column("director_id", sa.String(26), nullable=False),
        sa.Column("room_id", sa.String(26), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        *_slot_time_columns(),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("am_emails_sent", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("pm_emails_sent", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["voice_actor_id"], ["voice_actors.id"]),
        sa.ForeignKeyConstraint(["voice_actor_id_2"], ["voice_actors.id"]),
        sa.ForeignKeyConstraint(["director_id"], ["directors.id"]),
        sa.ForeignKeyConstraint(["room_id"], ["rooms.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_bookings_id", "bookings", ["id"])
    op.create_index("ix_bookings_date", "bookings", ["date"])
    op.create_index("ix_bookings_date_room", "bookings", ["date", "room_id"])
    op.create_index("ix_bookings_date_actor_1", "bookings", ["date", "voice_actor_id"])
    op.create_index("ix_bookings_date_actor_2", "bookings", ["date", "voice_actor_id_2"])

    op.create_table(
        "saved_schedules",
        sa.Column("id", sa.String(26), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("created_by", sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_saved_schedules_id", "saved_schedules", ["id"])
    op.create_index("ix_saved_schedules_date", "saved_schedules", ["date"])
    op.create_index("ix_saved_schedules_created_at", "saved_schedules", ["created_at"])

    op.create_table(
        "email_logs",
        sa.Column("id", sa.String(26), nullable=False),
        sa.Column("voice_actor_id", sa.String(26), nullable=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("subject", sa.Text(), nullable=False),
        sa.Column("sent_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("success", sa.Boolean(), nullable=False),
        sa.Column("error_message", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["voice_actor_id"], ["voice_actors.id"], ondelete="SET NULL"),
    )
    op.create_index("ix_email_logs_id", "email_logs", ["id"])
    op.create_index("ix_email_logs_voice_actor_id", "email_logs", ["voice_actor_id"])
    op.create_index("ix_email_logs_email", "email_logs", ["email"])
    op.create_index("ix_email_logs_sent_at", "email_logs", ["sent_at"])

    print("Studio scheduler tables created successfully!")


def downgrade() -> None:
    """Drop studio scheduler tables."""
    print("Dropping studio scheduler tables...")

    for table in (
        "email_logs",
        "saved_schedules",
        "bookings",
        "director_date_overrides",
        "director_weekly_availability",
        "directors",
        "voice_actors",
        "rooms",
        "studios",
    ):
        op.drop_table(table)
