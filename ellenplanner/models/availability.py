"""Availability view models for ellenplanner."""

from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field

from ellenplanner.models.time_block import TimeSlot


class DayAvailability(BaseModel):
    """Busy and free hours of one employee on one day."""

    employee: str
    day: date
    day_name: str = ""
    is_working_day: bool = True
    reason: Optional[str] = Field(None, description="Why this is not a working day (weekend, leave)")
    busy: List[TimeSlot] = Field(default_factory=list)
    free: List[TimeSlot] = Field(default_factory=list)
    free_hours: int = 0
    total_work_hours: int = 0


class WeekSummary(BaseModel):
    """Monday-Friday availability totals for one employee."""

    employee: str
    week_start: date
    days: List[DayAvailability] = Field(default_factory=list)
    total_work_hours: int = 0
    total_free_hours: int = 0
    occupancy_percentage: int = Field(0, ge=0, le=100)
