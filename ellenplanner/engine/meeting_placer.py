"""Meeting placement: one fixed, hard-locked block per participant.

Meetings are placed at the requested hour without looking for a free slot;
organizers are expected to have cleared the time. Set check_conflicts to refuse
participants who already have something at that hour.
"""

import logging
import uuid
from typing import Optional

from ellenplanner.engine.availability import AvailabilityProber
from ellenplanner.engine.calendar import business_index, is_weekend, week_start
from ellenplanner.engine.stores import MeetingStore, TaskStore
from ellenplanner.models.constants import MEETING_DEFAULT_CLIENT, MEETING_DISCIPLINE, MEETING_PROJECT_NUMBER
from ellenplanner.models.outcome import SchedulingOutcome
from ellenplanner.models.project import Meeting, MeetingRequest
from ellenplanner.models.time_block import PlanStatus, TimeBlock

logger = logging.getLogger(__name__)


def parse_hour(hhmm: str) -> int:
    """Hour component of an HH:MM string (minutes are ignored)."""
    return int(hhmm.split(":")[0])


class MeetingPlacer:
    """Places meetings for all participants."""

    def __init__(
        self,
        task_store: TaskStore,
        meeting_store: MeetingStore,
        prober: Optional[AvailabilityProber] = None,
        check_conflicts: bool = False,
    ):
        if check_conflicts and prober is None:
            raise ValueError("check_conflicts requires an AvailabilityProber")
        self.task_store = task_store
        self.meeting_store = meeting_store
        self.prober = prober
        self.check_conflicts = check_conflicts

    def place(self, request: MeetingRequest, created_by: Optional[str] = None) -> SchedulingOutcome:
        """Store the meeting and block its hours for every participant.

        Blocks are placed verbatim at the requested hours, fixed and hard-locked.
        Existing blocks are only consulted when check_conflicts is set.

        Args:
            request: Meeting subject, date, HH:MM start/end and participants
            created_by: Identity recorded as creator of every meeting block

        Returns:
            SchedulingOutcome with the meeting id and the number of blocks placed;
            success is False for invalid input or any failed block insert
        """
        start_hour = parse_hour(request.start_time)
        duration = parse_hour(request.end_time) - start_hour
        if duration <= 0:
            return SchedulingOutcome.failure("Meeting must end at least one hour after it starts")
        if is_weekend(request.meeting_date):
            return SchedulingOutcome.failure("Meetings cannot be placed on a weekend")

        try:
            meeting = self.meeting_store.insert_meeting(Meeting(
                id=str(uuid.uuid4()),
                subject=request.subject,
                meeting_type=request.meeting_type,
                meeting_date=request.meeting_date,
                start_time=request.start_time,
                end_time=request.end_time,
                location=request.location,
                participants=list(request.employees),
                is_hard_lock=True,
                status="concept",
            ))
        except Exception as e:
            logger.error(f"Failed to create meeting '{request.subject}': {type(e).__name__}: {str(e)}")
            return SchedulingOutcome.failure(f"Could not create meeting: {str(e) or type(e).__name__}")

        ws = week_start(request.meeting_date)
        day_index = business_index(request.meeting_date)
        errors = []
        placed = 0
        for employee in request.employees:
            if self.check_conflicts and not self.prober.is_slot_free(
                employee, request.meeting_date, start_hour, duration
            ):
                errors.append(f"{employee} is not free at {request.start_time}")
                continue
            block = TimeBlock(
                id=str(uuid.uuid4()),
                employee=employee,
                week_start=ws,
                day_of_week=day_index,
                start_hour=start_hour,
                duration_hours=duration,
                discipline=MEETING_DISCIPLINE,
                status=PlanStatus.FIXED,
                is_hard_lock=True,
                created_by=created_by,
                client_name=request.client_name or MEETING_DEFAULT_CLIENT,
                project_number=MEETING_PROJECT_NUMBER,
                phase_name=request.meeting_type,
                work_type=MEETING_DISCIPLINE,
            )
            try:
                self.task_store.insert(block)
            except Exception as e:
                logger.error(f"Failed to block {employee} for meeting {meeting.id}: {type(e).__name__}: {str(e)}")
                errors.append(str(e) or type(e).__name__)
                continue
            placed += 1

        if errors:
            return SchedulingOutcome(
                success=False,
                meeting_id=meeting.id,
                blocks_placed=placed,
                errors=["Some participants could not be blocked: " + ", ".join(errors)],
            )
        return SchedulingOutcome(success=True, meeting_id=meeting.id, blocks_placed=placed)
