"""Repository for LeaveRecord database operations (the Leave Directory)."""

import logging
from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session

from ellenplanner.models.leave import LeaveRecord, LeaveStatus
from ellenplanner.database.models import LeaveRecordDB

logger = logging.getLogger(__name__)


class LeaveRepository:
    """Repository for LeaveRecord database operations."""

    def __init__(self, db: Session):
        self.db = db

    def query(self, employee: str, day: date) -> List[LeaveRecord]:
        """Approved leave records for employee whose range contains day."""
        try:
            rows = (
                self.db.query(LeaveRecordDB)
                .filter(
                    LeaveRecordDB.employee == employee,
                    LeaveRecordDB.status == LeaveStatus.APPROVED.value,
                    LeaveRecordDB.start_date <= day,
                    LeaveRecordDB.end_date >= day,
                )
                .all()
            )
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to read leave for {employee} on {day.isoformat()}: {type(e).__name__}: {str(e)}")
            raise
        return [row.to_pydantic() for row in rows]

    def create(self, record: LeaveRecord) -> LeaveRecord:
        """Create a new leave record."""
        try:
            record_db = LeaveRecordDB.from_pydantic(record)
            self.db.add(record_db)
            self.db.commit()
            self.db.refresh(record_db)
            logger.debug(f"Created leave record {record.id} for {record.employee}")
            return record_db.to_pydantic()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to create leave record {record.id}: {type(e).__name__}: {str(e)}")
            raise

    def set_status(self, record_id: str, status: LeaveStatus) -> Optional[LeaveRecord]:
        """Approve or reject a leave record."""
        try:
            row = self.db.query(LeaveRecordDB).filter(LeaveRecordDB.id == record_id).first()
            if row is None:
                return None
            row.status = LeaveStatus(status).value
            self.db.commit()
            self.db.refresh(row)
            return row.to_pydantic()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to set status={status} for leave record {record_id}: {type(e).__name__}: {str(e)}")
            raise

    def get_for_employee(self, employee: str) -> List[LeaveRecord]:
        rows = (
            self.db.query(LeaveRecordDB)
            .filter(LeaveRecordDB.employee == employee)
            .order_by(LeaveRecordDB.start_date)
            .all()
        )
        return [row.to_pydantic() for row in rows]
