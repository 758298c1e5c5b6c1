"""Scheduling outcome model for ellenplanner."""

from typing import List, Optional
from pydantic import BaseModel, Field


class SchedulingOutcome(BaseModel):
    """Aggregate result of a scheduling operation.

    Warnings are non-fatal (partial placement); errors are fatal and imply success=False.
    """

    success: bool
    blocks_placed: int = 0
    warnings: List[str] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)
    project_id: Optional[str] = None
    meeting_id: Optional[str] = None

    @classmethod
    def failure(cls, *errors: str) -> "SchedulingOutcome":
        return cls(success=False, errors=list(errors))
