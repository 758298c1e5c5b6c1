"""Project creation plus scheduling of all its phases."""

import logging

from ellenplanner.engine.fase_scheduler import FaseScheduler, PhaseContext
from ellenplanner.engine.stores import ProjectStore
from ellenplanner.models.outcome import SchedulingOutcome
from ellenplanner.models.project import ProjectRequest

logger = logging.getLogger(__name__)


def create_project_and_schedule(
    request: ProjectRequest,
    created_by: str,
    project_store: ProjectStore,
    fase_scheduler: FaseScheduler,
) -> SchedulingOutcome:
    """Create the project record, then schedule each phase in order.

    Failing to create the project aborts with success=False. Anything after that is
    reported as a warning: a phase record that cannot be created skips that phase,
    and phases that could not be fully placed are listed. Placed blocks are never
    rolled back.

    Args:
        request: Project details and its phases
        created_by: Identity recorded as creator of every placed block
        project_store: Store for project and phase records
        fase_scheduler: Scheduler used for each phase

    Returns:
        SchedulingOutcome with the total number of blocks placed
    """
    try:
        project = project_store.insert_project(request)
    except Exception as e:
        logger.error(f"Failed to create project '{request.project_name}': {type(e).__name__}: {str(e)}")
        return SchedulingOutcome.failure(f"Could not create project: {str(e) or type(e).__name__}")

    warnings = []
    total_blocks = 0

    for order, phase in enumerate(request.phases, start=1):
        try:
            phase_record = project_store.insert_phase(project.id, phase, order)
        except Exception as e:
            logger.error(f"Failed to create phase '{phase.phase_name}': {type(e).__name__}: {str(e)}")
            warnings.append(f"Could not create phase \"{phase.phase_name}\"")
            continue

        context = PhaseContext(
            project_id=project.id,
            phase_id=phase_record.id,
            client_name=request.client_name,
            project_number=project.project_number,
            created_by=created_by,
        )
        result = fase_scheduler.schedule_phase(phase, context)
        total_blocks += result.placed_count

        if not result.complete:
            warnings.append(f"Not all blocks could be placed for phase \"{phase.phase_name}\"")
            warnings.extend(result.warnings)

    logger.info(f"Project {project.project_number}: {total_blocks} blocks placed, {len(warnings)} warnings")
    return SchedulingOutcome(
        success=True,
        project_id=project.id,
        blocks_placed=total_blocks,
        warnings=warnings,
    )
