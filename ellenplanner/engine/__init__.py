"""Scheduling engine for ellenplanner."""

from ellenplanner.engine.availability import (
    AvailabilityProber,
    StoreRead,
    StoreReadError,
    degrade_to_empty,
    strict_read,
)
from ellenplanner.engine.slot_finder import SlotFinder
from ellenplanner.engine.leave_checker import LeaveChecker
from ellenplanner.engine.disciplines import DISCIPLINE_RULES, DEFAULT_DISCIPLINE, derive_discipline
from ellenplanner.engine.fase_scheduler import FaseScheduler, PhaseContext, PhaseScheduleResult, CursorMove
from ellenplanner.engine.meeting_placer import MeetingPlacer
from ellenplanner.engine.automation import create_project_and_schedule

__all__ = [
    "AvailabilityProber",
    "StoreRead",
    "StoreReadError",
    "degrade_to_empty",
    "strict_read",
    "SlotFinder",
    "LeaveChecker",
    "DISCIPLINE_RULES",
    "DEFAULT_DISCIPLINE",
    "derive_discipline",
    "FaseScheduler",
    "PhaseContext",
    "PhaseScheduleResult",
    "CursorMove",
    "MeetingPlacer",
    "create_project_and_schedule",
]
