"""Collaborator contracts consumed by the scheduling engine.

The SQLAlchemy repositories in ellenplanner.database satisfy these; tests use
in-memory fakes. Writes raise on failure; the engine decides how to degrade.
"""

from datetime import date
from typing import List, Protocol

from ellenplanner.models.time_block import TimeBlock, TimeSlot
from ellenplanner.models.leave import LeaveRecord
from ellenplanner.models.project import Meeting, Phase, Project, ProjectPhase, ProjectRequest


class TaskStore(Protocol):
    def query(self, employee: str, week_start: date, day_index: int) -> List[TimeSlot]:
        ...

    def insert(self, block: TimeBlock) -> TimeBlock:
        ...


class LeaveDirectory(Protocol):
    def query(self, employee: str, day: date) -> List[LeaveRecord]:
        ...


class ProjectStore(Protocol):
    def insert_project(self, request: ProjectRequest) -> Project:
        ...

    def insert_phase(self, project_id: str, phase: ProjectPhase, order: int) -> Phase:
        ...


class MeetingStore(Protocol):
    def insert_meeting(self, meeting: Meeting) -> Meeting:
        ...
