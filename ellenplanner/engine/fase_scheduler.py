"""Bulk placement of a project phase (fase) across working days.

The walk is sequential: days in order, employees in list order. A single date
cursor is threaded through each employee step. When an employee's day is full
and a later business day is used instead, the cursor moves to that day for every
employee processed after it; such moves are recorded as CursorMove entries.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence

from ellenplanner.config import SchedulerSettings
from ellenplanner.engine.calendar import add_days, business_index, skip_weekend, week_start
from ellenplanner.engine.disciplines import DISCIPLINE_RULES, DisciplineRule, derive_discipline
from ellenplanner.engine.leave_checker import LeaveChecker
from ellenplanner.engine.slot_finder import SlotFinder
from ellenplanner.engine.stores import TaskStore
from ellenplanner.models.project import ProjectPhase
from ellenplanner.models.time_block import PlanStatus, TimeBlock, TimeSlot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CursorMove:
    """The shared cursor jumped forward because employee's day was full."""

    employee: str
    from_date: date
    to_date: date


@dataclass(frozen=True)
class PhaseContext:
    """Labels stamped on every block placed for a phase."""

    project_id: Optional[str] = None
    phase_id: Optional[str] = None
    client_name: Optional[str] = None
    project_number: Optional[str] = None
    created_by: Optional[str] = None


class PhaseScheduleResult:
    """Result of scheduling one phase."""

    def __init__(self, expected_blocks: int = 0):
        self.placed_blocks: List[TimeBlock] = []
        self.warnings: List[str] = []
        self.cursor_moves: List[CursorMove] = []
        self.expected_blocks = expected_blocks

    @property
    def placed_count(self) -> int:
        return len(self.placed_blocks)

    @property
    def complete(self) -> bool:
        return self.placed_count >= self.expected_blocks


class FaseScheduler:
    """Places concept blocks for every employee on every working day of a phase."""

    def __init__(
        self,
        task_store: TaskStore,
        slot_finder: SlotFinder,
        leave_checker: LeaveChecker,
        settings: Optional[SchedulerSettings] = None,
        rules: Sequence[DisciplineRule] = DISCIPLINE_RULES,
    ):
        self.task_store = task_store
        self.slot_finder = slot_finder
        self.leave_checker = leave_checker
        self.settings = settings or slot_finder.settings
        self.rules = rules

    def schedule_phase(self, phase: ProjectPhase, context: Optional[PhaseContext] = None) -> PhaseScheduleResult:
        """Walk the phase's working days and place one block per employee per day.

        Weekends are skipped without consuming one of the phase's days.

        Args:
            phase: Phase name, employees, start date, number of days and hours per day
            context: Project linkage and creator stamped on every placed block

        Returns:
            PhaseScheduleResult with the placed blocks, warnings for employee-days
            that found no slot, and the recorded cursor moves
        """
        context = context or PhaseContext()
        result = PhaseScheduleResult(expected_blocks=len(phase.employees) * phase.duration_days)
        discipline = derive_discipline(phase.phase_name, self.rules)

        cursor = phase.start_date
        for _ in range(phase.duration_days):
            cursor = skip_weekend(cursor)
            for employee in phase.employees:
                cursor = self._place_employee_day(employee, cursor, phase, context, discipline, result)
            cursor = add_days(cursor, 1)

        logger.debug(
            f"Phase '{phase.phase_name}': placed {result.placed_count}/{result.expected_blocks} blocks"
        )
        return result

    def _place_employee_day(
        self,
        employee: str,
        cursor: date,
        phase: ProjectPhase,
        context: PhaseContext,
        discipline: str,
        result: PhaseScheduleResult,
    ) -> date:
        """Place one block for employee at or after cursor; return the cursor to continue with."""
        if self.leave_checker.is_on_leave(employee, cursor):
            logger.warning(f"{employee} is on leave on {cursor.isoformat()}, skipping")
            return cursor

        day = cursor
        slot = self.slot_finder.first_free_slot(employee, cursor, phase.hours_per_day)
        if slot is None:
            found = self.slot_finder.next_available_business_day(
                employee, cursor, phase.hours_per_day, self.settings.fallback_search_days
            )
            if found is None:
                message = (
                    f"No free {phase.hours_per_day}h slot for {employee} from {cursor.isoformat()} "
                    f"(phase '{phase.phase_name}')"
                )
                logger.warning(message)
                result.warnings.append(message)
                return cursor
            logger.info(f"Moved block for {employee} from {cursor.isoformat()} to {found.day.isoformat()}")
            result.cursor_moves.append(CursorMove(employee=employee, from_date=cursor, to_date=found.day))
            day, slot = found.day, found.slot

        block = self._build_block(employee, day, slot, phase, context, discipline)
        try:
            placed = self.task_store.insert(block)
        except Exception as e:
            logger.error(f"Failed to place block for {employee} on {day.isoformat()}: {type(e).__name__}: {str(e)}")
            return day
        result.placed_blocks.append(placed)
        return day

    @staticmethod
    def _build_block(
        employee: str,
        day: date,
        slot: TimeSlot,
        phase: ProjectPhase,
        context: PhaseContext,
        discipline: str,
    ) -> TimeBlock:
        return TimeBlock(
            id=str(uuid.uuid4()),
            employee=employee,
            week_start=week_start(day),
            day_of_week=business_index(day),
            start_hour=slot.start_hour,
            duration_hours=slot.duration_hours,
            discipline=discipline,
            status=PlanStatus.CONCEPT,
            is_hard_lock=False,
            created_by=context.created_by,
            project_id=context.project_id,
            phase_id=context.phase_id,
            client_name=context.client_name,
            project_number=context.project_number,
            phase_name=phase.phase_name,
            work_type=phase.phase_name,
        )
