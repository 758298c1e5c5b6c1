"""Create scheduling tables

Revision ID: 4e1b7c2a9d30
Revises:
Create Date: 2026-10-19
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "4e1b7c2a9d30"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "projects",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("client_id", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("project_type", sa.String(), nullable=False, server_default="algemeen"),
        sa.Column("project_number", sa.String(), nullable=False),
        sa.Column("deadline", sa.Date(), nullable=True),
        sa.Column("status", sa.String(), nullable=False, server_default="concept"),
        sa.Column("requested_on", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index(op.f("ix_projects_client_id"), "projects", ["client_id"], unique=False)
    op.create_index(op.f("ix_projects_project_number"), "projects", ["project_number"], unique=False)

    op.create_table(
        "project_phases",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("project_id", sa.String(), sa.ForeignKey("projects.id", ondelete="CASCADE"), nullable=False),
        sa.Column("phase_name", sa.String(), nullable=False),
        sa.Column("employees", sa.JSON(), nullable=False),
        sa.Column("duration_days", sa.Integer(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False),
    )
    op.create_index(op.f("ix_project_phases_project_id"), "project_phases", ["project_id"], unique=False)

    op.create_table(
        "time_blocks",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("employee", sa.String(), nullable=False),
        sa.Column("week_start", sa.Date(), nullable=False),
        sa.Column("day_of_week", sa.Integer(), nullable=False),
        sa.Column("start_hour", sa.Integer(), nullable=False),
        sa.Column("duration_hours", sa.Integer(), nullable=False),
        sa.Column("discipline", sa.String(), nullable=False, server_default="Algemeen"),
        sa.Column("status", sa.String(), nullable=False, server_default="concept"),
        sa.Column("is_hard_lock", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_by", sa.String(), nullable=True),
        sa.Column("project_id", sa.String(), sa.ForeignKey("projects.id", ondelete="CASCADE"), nullable=True),
        sa.Column("phase_id", sa.String(), sa.ForeignKey("project_phases.id", ondelete="SET NULL"), nullable=True),
        sa.Column("client_name", sa.String(), nullable=True),
        sa.Column("project_number", sa.String(), nullable=True),
        sa.Column("phase_name", sa.String(), nullable=True),
        sa.Column("work_type", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index(op.f("ix_time_blocks_employee"), "time_blocks", ["employee"], unique=False)
    op.create_index(op.f("ix_time_blocks_project_id"), "time_blocks", ["project_id"], unique=False)
    op.create_index(
        "ix_time_blocks_employee_week_day", "time_blocks", ["employee", "week_start", "day_of_week"], unique=False
    )

    op.create_table(
        "leave_records",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("employee", sa.String(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("status", sa.String(), nullable=False, server_default="pending"),
        sa.Column("leave_type", sa.String(), nullable=False, server_default="vacation"),
        sa.Column("reason", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index(op.f("ix_leave_records_employee"), "leave_records", ["employee"], unique=False)
    op.create_index(op.f("ix_leave_records_start_date"), "leave_records", ["start_date"], unique=False)
    op.create_index(op.f("ix_leave_records_end_date"), "leave_records", ["end_date"], unique=False)

    op.create_table(
        "meetings",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("subject", sa.String(), nullable=False),
        sa.Column("meeting_type", sa.String(), nullable=False, server_default="meeting"),
        sa.Column("meeting_date", sa.Date(), nullable=False),
        sa.Column("start_time", sa.String(), nullable=False),
        sa.Column("end_time", sa.String(), nullable=False),
        sa.Column("location", sa.String(), nullable=True),
        sa.Column("participants", sa.JSON(), nullable=False),
        sa.Column("is_hard_lock", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("status", sa.String(), nullable=False, server_default="concept"),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index(op.f("ix_meetings_meeting_date"), "meetings", ["meeting_date"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_meetings_meeting_date"), table_name="meetings")
    op.drop_table("meetings")

    op.drop_index(op.f("ix_leave_records_end_date"), table_name="leave_records")
    op.drop_index(op.f("ix_leave_records_start_date"), table_name="leave_records")
    op.drop_index(op.f("ix_leave_records_employee"), table_name="leave_records")
    op.drop_table("leave_records")

    op.drop_index("ix_time_blocks_employee_week_day", table_name="time_blocks")
    op.drop_index(op.f("ix_time_blocks_project_id"), table_name="time_blocks")
    op.drop_index(op.f("ix_time_blocks_employee"), table_name="time_blocks")
    op.drop_table("time_blocks")

    op.drop_index(op.f("ix_project_phases_project_id"), table_name="project_phases")
    op.drop_table("project_phases")

    op.drop_index(op.f("ix_projects_project_number"), table_name="projects")
    op.drop_index(op.f("ix_projects_client_id"), table_name="projects")
    op.drop_table("projects")
