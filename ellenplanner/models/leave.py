"""Leave (verlof) data model for ellenplanner."""

from datetime import date
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class LeaveStatus(str, Enum):
    """Approval status of a leave request."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class LeaveType(str, Enum):
    """Kind of absence."""
    VACATION = "vacation"
    SICK = "sick"
    OTHER = "other"


class LeaveRecord(BaseModel):
    """An employee absence over an inclusive date range."""

    id: str = Field(..., description="Unique leave record identifier")
    employee: str = Field(..., description="Employee identifier")
    start_date: date = Field(..., description="First day of leave (inclusive)")
    end_date: date = Field(..., description="Last day of leave (inclusive)")
    status: LeaveStatus = Field(LeaveStatus.PENDING, description="Approval status")
    leave_type: LeaveType = Field(LeaveType.VACATION, description="Kind of absence")
    reason: Optional[str] = Field(None, description="Free-text reason")

    @field_validator("end_date")
    @classmethod
    def _validate_end_date(cls, v, info):
        start = info.data.get("start_date")
        if start is not None and v < start:
            raise ValueError("end_date must be >= start_date")
        return v

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    class Config:
        """Pydantic configuration."""
        use_enum_values = True
