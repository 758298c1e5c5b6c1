"""Slot finding: first free hour for one employee, for a group, and the next free day."""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence

from ellenplanner.config import SchedulerSettings
from ellenplanner.engine.availability import AvailabilityProber
from ellenplanner.engine.calendar import is_weekend
from ellenplanner.models.constants import NEXT_FREE_DAY_HORIZON
from ellenplanner.models.time_block import DatedSlot, TimeSlot

logger = logging.getLogger(__name__)


class SlotFinder:
    """Searches the fixed work window hour by hour."""

    def __init__(self, prober: AvailabilityProber, settings: Optional[SchedulerSettings] = None):
        self.prober = prober
        self.settings = settings or prober.settings

    def candidate_hours(self, duration_hours: int) -> range:
        """Start hours from the window open up to (close - duration), inclusive."""
        if duration_hours < 1:
            return range(0)
        return range(self.settings.workday_start_hour, self.settings.workday_end_hour - duration_hours + 1)

    def first_free_slot(self, employee: str, day: date, duration_hours: int) -> Optional[TimeSlot]:
        """Earliest hour on day where employee is free for duration_hours, or None."""
        hours = self.candidate_hours(duration_hours)
        if not hours:
            return None
        blocks = self.prober.committed_blocks(employee, day)
        for hour in hours:
            if self.prober.is_slot_free(employee, day, hour, duration_hours, blocks=blocks):
                return TimeSlot(start_hour=hour, duration_hours=duration_hours)
        return None

    def first_common_free_slot(
        self, employees: Sequence[str], day: date, duration_hours: int
    ) -> Optional[TimeSlot]:
        """Earliest hour on day where every employee is free for duration_hours, or None.

        Each employee's blocks are read once up front; per-hour checks against those
        snapshots fan out over a thread pool and are AND-ed.
        """
        hours = self.candidate_hours(duration_hours)
        if not employees or not hours:
            return None

        # Session-backed stores are not thread-safe: read on this thread.
        snapshots: Dict[str, List[TimeSlot]] = {
            employee: self.prober.committed_blocks(employee, day) for employee in employees
        }

        workers = max(1, min(self.settings.common_slot_workers, len(snapshots)))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            for hour in hours:
                checks = list(pool.map(
                    lambda employee, start=hour: self.prober.is_slot_free(
                        employee, day, start, duration_hours, blocks=snapshots[employee]
                    ),
                    snapshots,
                ))
                if all(checks):
                    return TimeSlot(start_hour=hour, duration_hours=duration_hours)
        return None

    def next_available_business_day(
        self,
        employee: str,
        start_date: date,
        duration_hours: int,
        max_days_to_search: int = NEXT_FREE_DAY_HORIZON,
    ) -> Optional[DatedSlot]:
        """First business day from start_date (inclusive) with a free slot.

        max_days_to_search counts calendar days examined, weekends included.
        """
        current = start_date
        for _ in range(max_days_to_search):
            if not is_weekend(current):
                slot = self.first_free_slot(employee, current, duration_hours)
                if slot is not None:
                    return DatedSlot(day=current, slot=slot)
            current = current + timedelta(days=1)
        logger.debug(
            f"No free {duration_hours}h slot for {employee} within {max_days_to_search} days "
            f"from {start_date.isoformat()}"
        )
        return None
