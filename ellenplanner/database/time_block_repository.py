"""Repository for TimeBlock database operations (the Task Store)."""

import logging
from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session

from ellenplanner.models.time_block import TimeBlock, TimeSlot
from ellenplanner.database.models import TimeBlockDB

logger = logging.getLogger(__name__)


class TimeBlockRepository:
    """Repository for TimeBlock database operations."""

    def __init__(self, db: Session):
        self.db = db

    def query(self, employee: str, week_start: date, day_index: int) -> List[TimeSlot]:
        """Committed (start_hour, duration_hours) pairs for one employee-day, by start hour.

        A failed read rolls the session back so later writes are not stuck in an
        aborted transaction.
        """
        try:
            rows = (
                self.db.query(TimeBlockDB.start_hour, TimeBlockDB.duration_hours)
                .filter(
                    TimeBlockDB.employee == employee,
                    TimeBlockDB.week_start == week_start,
                    TimeBlockDB.day_of_week == day_index,
                )
                .order_by(TimeBlockDB.start_hour)
                .all()
            )
        except Exception as e:
            self.db.rollback()
            logger.error(
                f"Failed to read blocks for {employee} ({week_start.isoformat()}, day {day_index}): "
                f"{type(e).__name__}: {str(e)}"
            )
            raise
        return [TimeSlot(start_hour=start, duration_hours=duration) for start, duration in rows]

    def insert(self, block: TimeBlock) -> TimeBlock:
        """Create a new time block."""
        try:
            block_db = TimeBlockDB.from_pydantic(block)
            self.db.add(block_db)
            self.db.commit()
            self.db.refresh(block_db)
            logger.debug(f"Created time block {block.id} for {block.employee}")
            return block_db.to_pydantic()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to create time block {block.id}: {type(e).__name__}: {str(e)}")
            raise

    def get(self, block_id: str) -> Optional[TimeBlock]:
        row = self.db.query(TimeBlockDB).filter(TimeBlockDB.id == block_id).first()
        return row.to_pydantic() if row else None

    def get_for_week(self, week_start: date, employee: Optional[str] = None) -> List[TimeBlock]:
        """All blocks in a week, optionally for one employee, ordered by day and hour."""
        q = self.db.query(TimeBlockDB).filter(TimeBlockDB.week_start == week_start)
        if employee is not None:
            q = q.filter(TimeBlockDB.employee == employee)
        rows = q.order_by(TimeBlockDB.employee, TimeBlockDB.day_of_week, TimeBlockDB.start_hour).all()
        return [row.to_pydantic() for row in rows]

    def get_for_project(self, project_id: str) -> List[TimeBlock]:
        rows = (
            self.db.query(TimeBlockDB)
            .filter(TimeBlockDB.project_id == project_id)
            .order_by(TimeBlockDB.week_start, TimeBlockDB.day_of_week, TimeBlockDB.start_hour)
            .all()
        )
        return [row.to_pydantic() for row in rows]
