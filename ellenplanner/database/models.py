"""SQLAlchemy database models for ellenplanner."""

from datetime import datetime
import uuid
from sqlalchemy import Column, String, Integer, Boolean, Date, DateTime, JSON, ForeignKey, Index

from ellenplanner.database.database import Base
from ellenplanner.models.leave import LeaveStatus, LeaveType
from ellenplanner.models.time_block import PlanStatus


class TimeBlockDB(Base):
    """Database model for TimeBlock (the Task Store's rows)."""

    __tablename__ = "time_blocks"
    __table_args__ = (
        # The scheduler always reads by (employee, week, day).
        Index("ix_time_blocks_employee_week_day", "employee", "week_start", "day_of_week"),
    )

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    employee = Column(String, nullable=False, index=True)
    week_start = Column(Date, nullable=False)
    day_of_week = Column(Integer, nullable=False)
    start_hour = Column(Integer, nullable=False)
    duration_hours = Column(Integer, nullable=False)
    discipline = Column(String, nullable=False, default="Algemeen")
    status = Column(String, nullable=False, default=PlanStatus.CONCEPT.value)
    is_hard_lock = Column(Boolean, nullable=False, default=False)
    created_by = Column(String, nullable=True)

    project_id = Column(String, ForeignKey("projects.id", ondelete="CASCADE"), nullable=True, index=True)
    phase_id = Column(String, ForeignKey("project_phases.id", ondelete="SET NULL"), nullable=True)
    client_name = Column(String, nullable=True)
    project_number = Column(String, nullable=True)
    phase_name = Column(String, nullable=True)
    work_type = Column(String, nullable=True)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    def to_pydantic(self):
        from ellenplanner.models.time_block import TimeBlock

        return TimeBlock(
            id=self.id,
            employee=self.employee,
            week_start=self.week_start,
            day_of_week=self.day_of_week,
            start_hour=self.start_hour,
            duration_hours=self.duration_hours,
            discipline=self.discipline,
            status=self.status,
            is_hard_lock=self.is_hard_lock,
            created_by=self.created_by,
            project_id=self.project_id,
            phase_id=self.phase_id,
            client_name=self.client_name,
            project_number=self.project_number,
            phase_name=self.phase_name,
            work_type=self.work_type,
        )

    @classmethod
    def from_pydantic(cls, block):
        return cls(
            id=block.id,
            employee=block.employee,
            week_start=block.week_start,
            day_of_week=block.day_of_week,
            start_hour=block.start_hour,
            duration_hours=block.duration_hours,
            discipline=block.discipline,
            status=block.status,
            is_hard_lock=block.is_hard_lock,
            created_by=block.created_by,
            project_id=block.project_id,
            phase_id=block.phase_id,
            client_name=block.client_name,
            project_number=block.project_number,
            phase_name=block.phase_name,
            work_type=block.work_type,
        )


class LeaveRecordDB(Base):
    """Database model for LeaveRecord (the Leave Directory's rows)."""

    __tablename__ = "leave_records"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    employee = Column(String, nullable=False, index=True)
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False, index=True)
    status = Column(String, nullable=False, default=LeaveStatus.PENDING.value)
    leave_type = Column(String, nullable=False, default=LeaveType.VACATION.value)
    reason = Column(String, nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    def to_pydantic(self):
        from ellenplanner.models.leave import LeaveRecord

        return LeaveRecord(
            id=self.id,
            employee=self.employee,
            start_date=self.start_date,
            end_date=self.end_date,
            status=self.status,
            leave_type=self.leave_type,
            reason=self.reason,
        )

    @classmethod
    def from_pydantic(cls, record):
        return cls(
            id=record.id,
            employee=record.employee,
            start_date=record.start_date,
            end_date=record.end_date,
            status=record.status,
            leave_type=record.leave_type,
            reason=record.reason,
        )


class ProjectDB(Base):
    """Database model for Project."""

    __tablename__ = "projects"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    client_id = Column(String, nullable=False, index=True)
    description = Column(String, nullable=False)
    project_type = Column(String, nullable=False, default="algemeen")
    project_number = Column(String, nullable=False, index=True)
    deadline = Column(Date, nullable=True)
    status = Column(String, nullable=False, default="concept")
    requested_on = Column(Date, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    def to_pydantic(self):
        from ellenplanner.models.project import Project

        return Project(
            id=self.id,
            client_id=self.client_id,
            description=self.description,
            project_type=self.project_type,
            project_number=self.project_number,
            deadline=self.deadline,
            status=self.status,
            requested_on=self.requested_on,
            created_at=self.created_at,
        )


class ProjectPhaseDB(Base):
    """Database model for a project's phase."""

    __tablename__ = "project_phases"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    project_id = Column(String, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    phase_name = Column(String, nullable=False)
    employees = Column(JSON, nullable=False, default=list)
    duration_days = Column(Integer, nullable=False)
    start_date = Column(Date, nullable=False)
    order = Column(Integer, nullable=False)

    def to_pydantic(self):
        from ellenplanner.models.project import Phase

        return Phase(
            id=self.id,
            project_id=self.project_id,
            phase_name=self.phase_name,
            employees=list(self.employees or []),
            duration_days=self.duration_days,
            start_date=self.start_date,
            order=self.order,
        )


class MeetingDB(Base):
    """Database model for Meeting."""

    __tablename__ = "meetings"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    subject = Column(String, nullable=False)
    meeting_type = Column(String, nullable=False, default="meeting")
    meeting_date = Column(Date, nullable=False, index=True)
    start_time = Column(String, nullable=False)
    end_time = Column(String, nullable=False)
    location = Column(String, nullable=True)
    participants = Column(JSON, nullable=False, default=list)
    is_hard_lock = Column(Boolean, nullable=False, default=True)
    status = Column(String, nullable=False, default="concept")
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    def to_pydantic(self):
        from ellenplanner.models.project import Meeting

        return Meeting(
            id=self.id,
            subject=self.subject,
            meeting_type=self.meeting_type,
            meeting_date=self.meeting_date,
            start_time=self.start_time,
            end_time=self.end_time,
            location=self.location,
            participants=list(self.participants or []),
            is_hard_lock=self.is_hard_lock,
            status=self.status,
        )

    @classmethod
    def from_pydantic(cls, meeting):
        return cls(
            id=meeting.id,
            subject=meeting.subject,
            meeting_type=meeting.meeting_type,
            meeting_date=meeting.meeting_date,
            start_time=meeting.start_time,
            end_time=meeting.end_time,
            location=meeting.location,
            participants=list(meeting.participants),
            is_hard_lock=meeting.is_hard_lock,
            status=meeting.status,
        )
