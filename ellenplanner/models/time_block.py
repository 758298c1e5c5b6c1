"""TimeBlock data model for ellenplanner."""

from datetime import date
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class PlanStatus(str, Enum):
    """Planning status of a block."""
    CONCEPT = "concept"  # Provisional scheduler output
    FIXED = "fixed"  # Committed (e.g. meetings)


class TimeSlot(BaseModel):
    """A start hour plus a duration on a single day."""

    start_hour: int = Field(..., ge=0, le=23, description="Start hour (24h clock)")
    duration_hours: int = Field(..., ge=1, description="Duration in whole hours")

    @property
    def end_hour(self) -> int:
        return self.start_hour + self.duration_hours

    def overlaps(self, start_hour: int, duration_hours: int) -> bool:
        """Half-open interval overlap: [a, b) and [c, d) overlap iff a < d and b > c."""
        return start_hour < self.end_hour and start_hour + duration_hours > self.start_hour


class DatedSlot(BaseModel):
    """A TimeSlot on a specific calendar date."""

    day: date
    slot: TimeSlot


class TimeBlock(BaseModel):
    """TimeBlock is the atomic scheduled unit: one employee, one day, one hour range."""

    id: str = Field(..., description="Unique block identifier")
    employee: str = Field(..., description="Employee identifier")
    week_start: date = Field(..., description="Monday of the block's week")
    day_of_week: int = Field(..., ge=0, le=4, description="Business day index (0=Monday ... 4=Friday)")
    start_hour: int = Field(..., ge=0, le=23, description="Start hour")
    duration_hours: int = Field(..., ge=1, description="Duration in hours")
    discipline: str = Field("Algemeen", description="Category/discipline label")
    status: PlanStatus = Field(PlanStatus.CONCEPT, description="Planning status")
    is_hard_lock: bool = Field(False, description="Only the creator may move or delete this block")
    created_by: Optional[str] = Field(None, description="Owning creator of the block")

    # Labels and linkage (optional)
    project_id: Optional[str] = None
    phase_id: Optional[str] = None
    client_name: Optional[str] = None
    project_number: Optional[str] = None
    phase_name: Optional[str] = None
    work_type: Optional[str] = None

    @field_validator("week_start")
    @classmethod
    def _validate_week_start(cls, v):
        if v.weekday() != 0:
            raise ValueError("week_start must be a Monday")
        return v

    @property
    def slot(self) -> TimeSlot:
        return TimeSlot(start_hour=self.start_hour, duration_hours=self.duration_hours)

    class Config:
        """Pydantic configuration."""
        use_enum_values = True
