"""Project, phase and meeting models for ellenplanner.

Request models are constructed by callers and consumed once by the scheduler;
record models are what the project/phase/meeting stores hand back.
"""

from datetime import date, datetime
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


class ProjectPhase(BaseModel):
    """A named stretch of work to be scheduled (fase)."""

    phase_name: str = Field(..., description="Phase name (also drives discipline inference)")
    employees: List[str] = Field(default_factory=list, description="Employees working on this phase")
    start_date: date = Field(..., description="First candidate day")
    duration_days: int = Field(..., ge=1, description="Number of working days to schedule")
    hours_per_day: int = Field(..., ge=1, description="Required hours per employee per day")


class ProjectRequest(BaseModel):
    """Input for creating a project and scheduling its phases."""

    client_id: str
    client_name: str
    project_name: str
    project_type: str = Field("algemeen", description="Project type label")
    deadline: Optional[date] = None
    phases: List[ProjectPhase] = Field(default_factory=list)


class Project(BaseModel):
    """Parent project record."""

    id: str
    client_id: str
    description: str
    project_type: str = "algemeen"
    project_number: str
    deadline: Optional[date] = None
    status: str = "concept"
    requested_on: date
    created_at: datetime


class Phase(BaseModel):
    """Persisted phase record belonging to a project."""

    id: str
    project_id: str
    phase_name: str
    employees: List[str] = Field(default_factory=list)
    duration_days: int
    start_date: date
    order: int = Field(..., ge=1, description="1-based position within the project")


class MeetingRequest(BaseModel):
    """Input for placing a meeting for a set of participants."""

    subject: str
    meeting_type: str = "meeting"
    meeting_date: date
    start_time: str = Field(..., description="Start time as HH:MM")
    end_time: str = Field(..., description="End time as HH:MM")
    location: Optional[str] = None
    employees: List[str] = Field(default_factory=list)
    client_name: Optional[str] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def _validate_hhmm(cls, v):
        parts = v.split(":")
        if len(parts) != 2 or not all(p.isdigit() for p in parts):
            raise ValueError("time must be formatted as HH:MM")
        if not 0 <= int(parts[0]) <= 23 or not 0 <= int(parts[1]) <= 59:
            raise ValueError("time out of range")
        return v


class Meeting(BaseModel):
    """Persisted meeting record."""

    id: str
    subject: str
    meeting_type: str
    meeting_date: date
    start_time: str
    end_time: str
    location: Optional[str] = None
    participants: List[str] = Field(default_factory=list)
    is_hard_lock: bool = True
    status: str = "concept"
