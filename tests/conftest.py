"""Pytest fixtures and configuration for ellenplanner tests."""

import pytest
import uuid
from datetime import date
from typing import List
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from ellenplanner.config import SchedulerSettings
from ellenplanner.database.database import Base
from ellenplanner.database import models  # noqa: F401
from ellenplanner.database.leave_repository import LeaveRepository
from ellenplanner.database.project_repository import MeetingRepository, ProjectRepository
from ellenplanner.database.time_block_repository import TimeBlockRepository
from ellenplanner.engine.availability import AvailabilityProber
from ellenplanner.engine.calendar import business_index, week_start
from ellenplanner.engine.fase_scheduler import FaseScheduler
from ellenplanner.engine.leave_checker import LeaveChecker
from ellenplanner.engine.slot_finder import SlotFinder
from ellenplanner.models.leave import LeaveRecord, LeaveStatus
from ellenplanner.models.project import Meeting, Phase, Project, ProjectPhase, ProjectRequest
from ellenplanner.models.time_block import PlanStatus, TimeBlock, TimeSlot


# Use in-memory SQLite database for tests
TEST_DATABASE_URL = "sqlite:///:memory:"

# 2024-01-01 is a Monday
MONDAY = date(2024, 1, 1)
TUESDAY = date(2024, 1, 2)
WEDNESDAY = date(2024, 1, 3)
FRIDAY = date(2024, 1, 5)
SATURDAY = date(2024, 1, 6)
SUNDAY = date(2024, 1, 7)
NEXT_MONDAY = date(2024, 1, 8)


def make_block(employee: str, day: date, start_hour: int, duration_hours: int, **overrides) -> TimeBlock:
    """Build a TimeBlock for employee on day."""
    data = {
        "id": str(uuid.uuid4()),
        "employee": employee,
        "week_start": week_start(day),
        "day_of_week": business_index(day),
        "start_hour": start_hour,
        "duration_hours": duration_hours,
        "discipline": "Algemeen",
        "status": PlanStatus.CONCEPT,
        "is_hard_lock": False,
    }
    data.update(overrides)
    return TimeBlock(**data)


class InMemoryTaskStore:
    """Task Store fake with switchable read/insert failures."""

    def __init__(self):
        self.blocks: List[TimeBlock] = []
        self.fail_reads = False
        self.fail_inserts = False
        self.read_count = 0

    def query(self, employee, week_start, day_index):
        self.read_count += 1
        if self.fail_reads:
            raise RuntimeError("task store unavailable")
        return [
            b.slot
            for b in self.blocks
            if b.employee == employee and b.week_start == week_start and b.day_of_week == day_index
        ]

    def insert(self, block):
        if self.fail_inserts:
            raise RuntimeError("insert rejected")
        self.blocks.append(block)
        return block

    def add(self, employee, day, start_hour, duration_hours, **overrides):
        block = make_block(employee, day, start_hour, duration_hours, **overrides)
        self.blocks.append(block)
        return block

    def blocks_for(self, employee):
        return [b for b in self.blocks if b.employee == employee]


class InMemoryLeaveDirectory:
    """Leave Directory fake."""

    def __init__(self):
        self.records: List[LeaveRecord] = []
        self.fail_reads = False

    def query(self, employee, day):
        if self.fail_reads:
            raise RuntimeError("leave directory unavailable")
        return [
            r for r in self.records
            if r.employee == employee and r.status == LeaveStatus.APPROVED and r.covers(day)
        ]

    def add(self, employee, start_date, end_date, status=LeaveStatus.APPROVED):
        record = LeaveRecord(
            id=str(uuid.uuid4()),
            employee=employee,
            start_date=start_date,
            end_date=end_date,
            status=status,
        )
        self.records.append(record)
        return record


class InMemoryProjectStore:
    """Project/Phase store fake; fail_project or failing phase names inject errors."""

    def __init__(self):
        self.projects: List[Project] = []
        self.phases: List[Phase] = []
        self.fail_project = False
        self.failing_phases = set()

    def insert_project(self, request: ProjectRequest) -> Project:
        if self.fail_project:
            raise RuntimeError("projects table unavailable")
        project = Project(
            id=str(uuid.uuid4()),
            client_id=request.client_id,
            description=request.project_name,
            project_type=request.project_type,
            project_number=f"P-{len(self.projects) + 1:06d}",
            deadline=request.deadline,
            requested_on=date(2024, 1, 1),
            created_at="2024-01-01T09:00:00",
        )
        self.projects.append(project)
        return project

    def insert_phase(self, project_id: str, phase: ProjectPhase, order: int) -> Phase:
        if phase.phase_name in self.failing_phases:
            raise RuntimeError(f"cannot create phase {phase.phase_name}")
        record = Phase(
            id=str(uuid.uuid4()),
            project_id=project_id,
            phase_name=phase.phase_name,
            employees=list(phase.employees),
            duration_days=phase.duration_days,
            start_date=phase.start_date,
            order=order,
        )
        self.phases.append(record)
        return record


class InMemoryMeetingStore:
    """Meeting store fake."""

    def __init__(self):
        self.meetings: List[Meeting] = []
        self.fail_inserts = False

    def insert_meeting(self, meeting: Meeting) -> Meeting:
        if self.fail_inserts:
            raise RuntimeError("meetings table unavailable")
        self.meetings.append(meeting)
        return meeting


@pytest.fixture
def settings():
    return SchedulerSettings()


@pytest.fixture
def task_store():
    return InMemoryTaskStore()


@pytest.fixture
def leave_directory():
    return InMemoryLeaveDirectory()


@pytest.fixture
def project_store():
    return InMemoryProjectStore()


@pytest.fixture
def meeting_store():
    return InMemoryMeetingStore()


@pytest.fixture
def leave_checker(leave_directory):
    return LeaveChecker(leave_directory)


@pytest.fixture
def prober(task_store, leave_checker, settings):
    return AvailabilityProber(task_store, leave_checker=leave_checker, settings=settings)


@pytest.fixture
def slot_finder(prober, settings):
    return SlotFinder(prober, settings)


@pytest.fixture
def fase_scheduler(task_store, slot_finder, leave_checker, settings):
    return FaseScheduler(task_store, slot_finder, leave_checker, settings)


@pytest.fixture
def make_phase():
    """Factory for ProjectPhase inputs."""
    def _make(employees, start_date=MONDAY, duration_days=1, hours_per_day=8, phase_name="Productie shoot"):
        return ProjectPhase(
            phase_name=phase_name,
            employees=list(employees),
            start_date=start_date,
            duration_days=duration_days,
            hours_per_day=hours_per_day,
        )
    return _make


@pytest.fixture(scope="function")
def db_session():
    """Create a database session for testing.

    Uses an in-memory SQLite database that is created fresh for each test.
    """
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def block_repository(db_session: Session):
    return TimeBlockRepository(db_session)


@pytest.fixture
def leave_repository(db_session: Session):
    return LeaveRepository(db_session)


@pytest.fixture
def project_repository(db_session: Session):
    return ProjectRepository(db_session)


@pytest.fixture
def meeting_repository(db_session: Session):
    return MeetingRepository(db_session)


@pytest.fixture
def test_client(db_session: Session):
    """Create a FastAPI test client with overridden database dependency."""
    from ellenplanner.api.app import app, get_settings
    from ellenplanner.database.database import get_db

    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Don't close the session here, let the fixture handle it

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: SchedulerSettings()

    # Not used as a context manager: startup would initialise the on-disk database.
    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
