"""Availability probing for ellenplanner.

Reads an employee's committed blocks for a day from the Task Store and answers
slot/overlap questions against them.

Store reads return an explicit StoreRead. What a failed read means is decided by
a single policy function handed to the prober; the default, degrade_to_empty,
treats the employee as uncommitted for that day so placement can proceed.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional, Sequence, Tuple

from ellenplanner.config import SchedulerSettings
from ellenplanner.engine.calendar import business_index, date_for, day_name, is_weekend, week_start
from ellenplanner.engine.leave_checker import LeaveChecker
from ellenplanner.engine.stores import TaskStore
from ellenplanner.models.availability import DayAvailability, WeekSummary
from ellenplanner.models.constants import BUSINESS_DAYS_PER_WEEK
from ellenplanner.models.time_block import TimeSlot

logger = logging.getLogger(__name__)


class StoreReadError(Exception):
    """Raised by the strict read policy when the Task Store could not be read."""


@dataclass(frozen=True)
class StoreRead:
    """Outcome of one Task Store read."""

    ok: bool
    blocks: Tuple[TimeSlot, ...] = ()
    error: Optional[Exception] = None

    @classmethod
    def success(cls, blocks: Sequence[TimeSlot]) -> "StoreRead":
        return cls(ok=True, blocks=tuple(sorted(blocks, key=lambda b: b.start_hour)))

    @classmethod
    def failure(cls, error: Exception) -> "StoreRead":
        return cls(ok=False, error=error)


ReadFailurePolicy = Callable[[StoreRead, str], Tuple[TimeSlot, ...]]


def degrade_to_empty(read: StoreRead, context: str) -> Tuple[TimeSlot, ...]:
    """Default policy: a failed read means "no committed blocks"."""
    if read.ok:
        return read.blocks
    logger.warning(
        f"Task store read failed for {context}, treating day as free: "
        f"{type(read.error).__name__}: {str(read.error)}"
    )
    return ()


def strict_read(read: StoreRead, context: str) -> Tuple[TimeSlot, ...]:
    """Alternative policy: surface read failures to the caller."""
    if read.ok:
        return read.blocks
    raise StoreReadError(f"Task store read failed for {context}") from read.error


def _merge(slots: Sequence[Tuple[int, int]]) -> List[Tuple[int, int]]:
    merged: List[Tuple[int, int]] = []
    for start, end in sorted(slots):
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


class AvailabilityProber:
    """Committed-block lookups and overlap checks for one employee-day."""

    def __init__(
        self,
        task_store: TaskStore,
        on_read_failure: ReadFailurePolicy = degrade_to_empty,
        leave_checker: Optional[LeaveChecker] = None,
        settings: Optional[SchedulerSettings] = None,
    ):
        self.task_store = task_store
        self.on_read_failure = on_read_failure
        self.leave_checker = leave_checker
        self.settings = settings or SchedulerSettings()

    def read_committed_blocks(self, employee: str, day: date) -> StoreRead:
        """Query the Task Store for employee's blocks on day.

        Raises:
            ValueError: if day is a weekend day
        """
        ws = week_start(day)
        idx = business_index(day)
        try:
            slots = self.task_store.query(employee, ws, idx)
        except Exception as e:
            return StoreRead.failure(e)
        return StoreRead.success(slots)

    def committed_blocks(self, employee: str, day: date) -> List[TimeSlot]:
        """Blocks for employee on day sorted by start hour, after applying the read policy."""
        read = self.read_committed_blocks(employee, day)
        return list(self.on_read_failure(read, f"{employee} on {day.isoformat()}"))

    def is_slot_free(
        self,
        employee: str,
        day: date,
        start_hour: int,
        duration_hours: int,
        blocks: Optional[Sequence[TimeSlot]] = None,
    ) -> bool:
        """True iff nothing committed overlaps [start_hour, start_hour + duration_hours).

        Pass blocks to check against a snapshot instead of reading the store.
        """
        if blocks is None:
            blocks = self.committed_blocks(employee, day)
        return not any(block.overlaps(start_hour, duration_hours) for block in blocks)

    def day_availability(self, employee: str, day: date) -> DayAvailability:
        """Busy and free intervals within the work window."""
        if is_weekend(day):
            return DayAvailability(
                employee=employee,
                day=day,
                is_working_day=False,
                reason="Weekend",
            )

        name = day_name(business_index(day))
        if self.leave_checker is not None and self.leave_checker.is_on_leave(employee, day):
            return DayAvailability(
                employee=employee,
                day=day,
                day_name=name,
                is_working_day=False,
                reason="Leave",
            )

        open_hour = self.settings.workday_start_hour
        close_hour = self.settings.workday_end_hour
        busy = self.committed_blocks(employee, day)

        clipped = [
            (max(b.start_hour, open_hour), min(b.end_hour, close_hour))
            for b in busy
            if b.end_hour > open_hour and b.start_hour < close_hour
        ]
        free: List[TimeSlot] = []
        cursor = open_hour
        for start, end in _merge(clipped):
            if start > cursor:
                free.append(TimeSlot(start_hour=cursor, duration_hours=start - cursor))
            cursor = max(cursor, end)
        if cursor < close_hour:
            free.append(TimeSlot(start_hour=cursor, duration_hours=close_hour - cursor))

        return DayAvailability(
            employee=employee,
            day=day,
            day_name=name,
            busy=busy,
            free=free,
            free_hours=sum(s.duration_hours for s in free),
            total_work_hours=close_hour - open_hour,
        )

    def week_summary(self, employee: str, week_start_date: date) -> WeekSummary:
        """Monday-Friday availability for the week containing week_start_date."""
        monday = week_start(week_start_date)
        days = [
            self.day_availability(employee, date_for(monday, idx))
            for idx in range(BUSINESS_DAYS_PER_WEEK)
        ]
        total = sum(d.total_work_hours for d in days)
        free = sum(d.free_hours for d in days)
        occupancy = round((total - free) / total * 100) if total else 0
        return WeekSummary(
            employee=employee,
            week_start=monday,
            days=days,
            total_work_hours=total,
            total_free_hours=free,
            occupancy_percentage=occupancy,
        )
