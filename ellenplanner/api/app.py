"""FastAPI web application for ellenplanner."""

import logging
import uuid
from contextlib import asynccontextmanager
from datetime import date
from typing import List, Optional
from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from ellenplanner import __version__
from ellenplanner.config import SchedulerSettings, load_settings
from ellenplanner.database.database import get_db, init_db
from ellenplanner.database.leave_repository import LeaveRepository
from ellenplanner.database.project_repository import MeetingRepository, ProjectRepository
from ellenplanner.database.time_block_repository import TimeBlockRepository
from ellenplanner.engine.availability import AvailabilityProber
from ellenplanner.engine.automation import create_project_and_schedule
from ellenplanner.engine.calendar import is_weekend, week_start
from ellenplanner.engine.fase_scheduler import FaseScheduler
from ellenplanner.engine.leave_checker import LeaveChecker
from ellenplanner.engine.meeting_placer import MeetingPlacer
from ellenplanner.engine.slot_finder import SlotFinder
from ellenplanner.models.availability import DayAvailability, WeekSummary
from ellenplanner.models.leave import LeaveRecord, LeaveStatus, LeaveType
from ellenplanner.models.outcome import SchedulingOutcome
from ellenplanner.models.project import MeetingRequest, ProjectRequest
from ellenplanner.models.time_block import DatedSlot, TimeBlock, TimeSlot

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


# Initialize FastAPI app
app = FastAPI(
    title="ellenplanner API",
    description="Booking scheduler: free-slot search and bulk placement of project work",
    version=__version__,
    lifespan=lifespan,
)


def get_settings() -> SchedulerSettings:
    return load_settings()


class Scheduler:
    """Engine components wired to one database session."""

    def __init__(self, db: Session, settings: SchedulerSettings):
        self.settings = settings
        self.blocks = TimeBlockRepository(db)
        self.leave = LeaveRepository(db)
        self.projects = ProjectRepository(db)
        self.meetings = MeetingRepository(db)
        self.leave_checker = LeaveChecker(self.leave)
        self.prober = AvailabilityProber(self.blocks, leave_checker=self.leave_checker, settings=settings)
        self.slot_finder = SlotFinder(self.prober, settings)
        self.fase_scheduler = FaseScheduler(self.blocks, self.slot_finder, self.leave_checker, settings)
        self.meeting_placer = MeetingPlacer(
            self.blocks,
            self.meetings,
            prober=self.prober,
            check_conflicts=settings.meeting_conflict_check,
        )


def get_scheduler(
    db: Session = Depends(get_db),
    settings: SchedulerSettings = Depends(get_settings),
) -> Scheduler:
    return Scheduler(db, settings)


# Request/response models
class ScheduleProjectRequest(BaseModel):
    """Request for project creation and scheduling."""
    project: ProjectRequest
    created_by: str


class PlaceMeetingRequest(BaseModel):
    """Request for meeting placement."""
    meeting: MeetingRequest
    created_by: Optional[str] = None


class CommonSlotRequest(BaseModel):
    """Request for a common free slot."""
    employees: List[str] = Field(..., min_length=1)
    day: date
    duration_hours: int = Field(..., ge=1)


class SlotResponse(BaseModel):
    """Response for slot searches (slot is null when nothing fits)."""
    employee: Optional[str] = None
    day: date
    slot: Optional[TimeSlot] = None


class LeaveCreateRequest(BaseModel):
    """Request to register leave."""
    employee: str
    start_date: date
    end_date: date
    status: LeaveStatus = LeaveStatus.PENDING
    leave_type: LeaveType = LeaveType.VACATION
    reason: Optional[str] = None



class LeaveStatusRequest(BaseModel):
    """Request to approve or reject a leave record."""
    status: LeaveStatus


def _require_business_day(day: date) -> None:
    if is_weekend(day):
        raise HTTPException(status_code=400, detail=f"{day.isoformat()} is a weekend day")


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.post("/projects/schedule", response_model=SchedulingOutcome)
def schedule_project(body: ScheduleProjectRequest, scheduler: Scheduler = Depends(get_scheduler)):
    """Create a project and place blocks for all its phases."""
    try:
        return create_project_and_schedule(
            body.project,
            body.created_by,
            scheduler.projects,
            scheduler.fase_scheduler,
        )
    except Exception as e:
        logger.error(f"Project scheduling failed: {type(e).__name__}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to schedule project: {str(e)}")


@app.post("/meetings", response_model=SchedulingOutcome)
def place_meeting(body: PlaceMeetingRequest, scheduler: Scheduler = Depends(get_scheduler)):
    """Place a fixed, hard-locked meeting block for each participant."""
    try:
        return scheduler.meeting_placer.place(body.meeting, body.created_by)
    except Exception as e:
        logger.error(f"Meeting placement failed: {type(e).__name__}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to place meeting: {str(e)}")


@app.get("/employees/{employee}/free-slot", response_model=SlotResponse)
def free_slot(
    employee: str,
    day: date,
    duration_hours: int = Query(..., ge=1),
    scheduler: Scheduler = Depends(get_scheduler),
):
    """First free slot for one employee on one day."""
    _require_business_day(day)
    slot = scheduler.slot_finder.first_free_slot(employee, day, duration_hours)
    return SlotResponse(employee=employee, day=day, slot=slot)


@app.get("/employees/{employee}/next-free-day", response_model=Optional[DatedSlot])
def next_free_day(
    employee: str,
    start_date: date,
    duration_hours: int = Query(..., ge=1),
    max_days: Optional[int] = Query(None, ge=1),
    scheduler: Scheduler = Depends(get_scheduler),
):
    """Next business day with a free slot; null when the horizon is exhausted."""
    horizon = max_days or scheduler.settings.next_free_day_horizon
    return scheduler.slot_finder.next_available_business_day(employee, start_date, duration_hours, horizon)


@app.post("/slots/common", response_model=SlotResponse)
def common_slot(body: CommonSlotRequest, scheduler: Scheduler = Depends(get_scheduler)):
    """Earliest slot on a day where every listed employee is free."""
    _require_business_day(body.day)
    slot = scheduler.slot_finder.first_common_free_slot(body.employees, body.day, body.duration_hours)
    return SlotResponse(day=body.day, slot=slot)


@app.get("/employees/{employee}/availability", response_model=DayAvailability)
def day_availability(employee: str, day: date, scheduler: Scheduler = Depends(get_scheduler)):
    """Busy and free hours of an employee on a day."""
    return scheduler.prober.day_availability(employee, day)


@app.get("/employees/{employee}/week-summary", response_model=WeekSummary)
def week_summary(employee: str, week: date, scheduler: Scheduler = Depends(get_scheduler)):
    """Monday-Friday availability totals for the week containing `week`."""
    return scheduler.prober.week_summary(employee, week)


@app.post("/leave", response_model=LeaveRecord, status_code=201)
def create_leave(body: LeaveCreateRequest, scheduler: Scheduler = Depends(get_scheduler)):
    """Register a leave record."""
    if body.end_date < body.start_date:
        raise HTTPException(status_code=400, detail="end_date must be >= start_date")
    record = LeaveRecord(id=str(uuid.uuid4()), **body.model_dump())
    try:
        return scheduler.leave.create(record)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to create leave record: {str(e)}")


@app.patch("/leave/{record_id}", response_model=LeaveRecord)
def set_leave_status(record_id: str, body: LeaveStatusRequest, scheduler: Scheduler = Depends(get_scheduler)):
    """Approve or reject a leave record. Only approved leave blocks placement."""
    try:
        record = scheduler.leave.set_status(record_id, body.status)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to update leave record: {str(e)}")
    if record is None:
        raise HTTPException(status_code=404, detail=f"Leave record {record_id} not found")
    return record


@app.get("/employees/{employee}/leave", response_model=List[LeaveRecord])
def list_leave(employee: str, scheduler: Scheduler = Depends(get_scheduler)):
    """All leave records of an employee, any status, by start date."""
    return scheduler.leave.get_for_employee(employee)


@app.get("/blocks", response_model=List[TimeBlock])
def list_blocks(
    week: date,
    employee: Optional[str] = None,
    scheduler: Scheduler = Depends(get_scheduler),
):
    """Blocks in the week containing `week`, optionally for one employee."""
    return scheduler.blocks.get_for_week(week_start(week), employee)


@app.get("/blocks/{block_id}", response_model=TimeBlock)
def get_block(block_id: str, scheduler: Scheduler = Depends(get_scheduler)):
    """A single block by id."""
    block = scheduler.blocks.get(block_id)
    if block is None:
        raise HTTPException(status_code=404, detail=f"Block {block_id} not found")
    return block


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
