"""Data models for ellenplanner."""

from ellenplanner.models.time_block import TimeBlock, TimeSlot, DatedSlot, PlanStatus
from ellenplanner.models.leave import LeaveRecord, LeaveStatus, LeaveType
from ellenplanner.models.project import ProjectPhase, ProjectRequest, Project, Phase, MeetingRequest, Meeting
from ellenplanner.models.outcome import SchedulingOutcome
from ellenplanner.models.availability import DayAvailability, WeekSummary

__all__ = [
    "TimeBlock",
    "TimeSlot",
    "DatedSlot",
    "PlanStatus",
    "LeaveRecord",
    "LeaveStatus",
    "LeaveType",
    "ProjectPhase",
    "ProjectRequest",
    "Project",
    "Phase",
    "MeetingRequest",
    "Meeting",
    "SchedulingOutcome",
    "DayAvailability",
    "WeekSummary",
]
