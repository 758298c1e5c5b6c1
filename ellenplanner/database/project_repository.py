"""Repository for project, phase and meeting records."""

import logging
import time
import uuid
from datetime import date, datetime
from typing import Optional
from sqlalchemy.orm import Session

from ellenplanner.models.project import Meeting, Phase, Project, ProjectPhase, ProjectRequest
from ellenplanner.database.models import MeetingDB, ProjectDB, ProjectPhaseDB

logger = logging.getLogger(__name__)


def generate_project_number() -> str:
    """Project number of the form P-123456 derived from the current time."""
    return f"P-{str(int(time.time() * 1000))[-6:]}"


class ProjectRepository:
    """Repository for Project and Phase records."""

    def __init__(self, db: Session):
        self.db = db

    def insert_project(self, request: ProjectRequest) -> Project:
        """Create the parent project record (status concept, requested today)."""
        try:
            project_db = ProjectDB(
                id=str(uuid.uuid4()),
                client_id=request.client_id,
                description=request.project_name,
                project_type=request.project_type or "algemeen",
                project_number=generate_project_number(),
                deadline=request.deadline,
                status="concept",
                requested_on=date.today(),
                created_at=datetime.utcnow(),
            )
            self.db.add(project_db)
            self.db.commit()
            self.db.refresh(project_db)
            logger.debug(f"Created project {project_db.project_number} ({project_db.id})")
            return project_db.to_pydantic()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to create project '{request.project_name}': {type(e).__name__}: {str(e)}")
            raise

    def insert_phase(self, project_id: str, phase: ProjectPhase, order: int) -> Phase:
        """Create a phase record belonging to project_id."""
        try:
            phase_db = ProjectPhaseDB(
                id=str(uuid.uuid4()),
                project_id=project_id,
                phase_name=phase.phase_name,
                employees=list(phase.employees),
                duration_days=phase.duration_days,
                start_date=phase.start_date,
                order=order,
            )
            self.db.add(phase_db)
            self.db.commit()
            self.db.refresh(phase_db)
            logger.debug(f"Created phase '{phase.phase_name}' for project {project_id}")
            return phase_db.to_pydantic()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to create phase '{phase.phase_name}': {type(e).__name__}: {str(e)}")
            raise

    def get_project(self, project_id: str) -> Optional[Project]:
        row = self.db.query(ProjectDB).filter(ProjectDB.id == project_id).first()
        return row.to_pydantic() if row else None


class MeetingRepository:
    """Repository for Meeting records."""

    def __init__(self, db: Session):
        self.db = db

    def insert_meeting(self, meeting: Meeting) -> Meeting:
        try:
            meeting_db = MeetingDB.from_pydantic(meeting)
            self.db.add(meeting_db)
            self.db.commit()
            self.db.refresh(meeting_db)
            logger.debug(f"Created meeting {meeting.id}")
            return meeting_db.to_pydantic()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to create meeting {meeting.id}: {type(e).__name__}: {str(e)}")
            raise

    def get(self, meeting_id: str) -> Optional[Meeting]:
        row = self.db.query(MeetingDB).filter(MeetingDB.id == meeting_id).first()
        return row.to_pydantic() if row else None
