"""Leave (verlof) lookups for the scheduler."""

import logging
from datetime import date

from ellenplanner.engine.stores import LeaveDirectory
from ellenplanner.models.leave import LeaveStatus

logger = logging.getLogger(__name__)


class LeaveChecker:
    """Answers whether an employee is on approved leave for a date."""

    def __init__(self, directory: LeaveDirectory):
        self.directory = directory

    def is_on_leave(self, employee: str, day: date) -> bool:
        """True iff an approved leave record for employee covers day.

        A directory read failure counts as "not on leave".
        """
        try:
            records = self.directory.query(employee, day)
        except Exception as e:
            logger.warning(
                f"Leave lookup failed for {employee} on {day.isoformat()}, assuming available: "
                f"{type(e).__name__}: {str(e)}"
            )
            return False
        return any(
            record.status == LeaveStatus.APPROVED and record.covers(day)
            for record in records
        )
