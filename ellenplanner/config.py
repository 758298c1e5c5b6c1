"""Runtime configuration for ellenplanner.

Values come from the environment (optionally via a .env file) and fall back to
the defaults in ellenplanner.models.constants.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

from ellenplanner.models import constants

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    return os.getenv(name, str(default)).lower() == "true"


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


@dataclass(frozen=True)
class SchedulerSettings:
    """Knobs for the scheduling engine."""

    workday_start_hour: int = constants.WORKDAY_START_HOUR
    workday_end_hour: int = constants.WORKDAY_END_HOUR
    fallback_search_days: int = constants.FALLBACK_SEARCH_DAYS
    next_free_day_horizon: int = constants.NEXT_FREE_DAY_HORIZON
    # Meetings are placed verbatim unless this is switched on
    meeting_conflict_check: bool = False
    common_slot_workers: int = 4


def load_settings() -> SchedulerSettings:
    """Build settings from the current environment."""
    settings = SchedulerSettings(
        workday_start_hour=_env_int("WORKDAY_START_HOUR", constants.WORKDAY_START_HOUR),
        workday_end_hour=_env_int("WORKDAY_END_HOUR", constants.WORKDAY_END_HOUR),
        fallback_search_days=_env_int("FALLBACK_SEARCH_DAYS", constants.FALLBACK_SEARCH_DAYS),
        next_free_day_horizon=_env_int("NEXT_FREE_DAY_HORIZON", constants.NEXT_FREE_DAY_HORIZON),
        meeting_conflict_check=_env_bool("MEETING_CONFLICT_CHECK", False),
        common_slot_workers=_env_int("COMMON_SLOT_WORKERS", 4),
    )
    if settings.workday_end_hour <= settings.workday_start_hour:
        raise ValueError("WORKDAY_END_HOUR must be after WORKDAY_START_HOUR")
    return settings
