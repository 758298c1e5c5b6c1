"""Tests for meeting placement."""

import pytest

from ellenplanner.engine.meeting_placer import MeetingPlacer, parse_hour
from ellenplanner.models.project import MeetingRequest
from ellenplanner.models.time_block import PlanStatus
from conftest import MONDAY, SATURDAY


def _meeting(employees, meeting_date=MONDAY, start="10:00", end="12:00", **kwargs):
    return MeetingRequest(
        subject="Kick-off",
        meeting_type="intern",
        meeting_date=meeting_date,
        start_time=start,
        end_time=end,
        employees=employees,
        **kwargs,
    )


@pytest.fixture
def placer(task_store, meeting_store):
    return MeetingPlacer(task_store, meeting_store)


class TestMeetingPlacer:
    """Test MeetingPlacer.place()."""

    def test_places_fixed_locked_block_per_participant(self, placer, task_store, meeting_store):
        outcome = placer.place(_meeting(["anna", "ben"]), created_by="ellen")

        assert outcome.success is True
        assert outcome.blocks_placed == 2
        assert outcome.meeting_id == meeting_store.meetings[0].id
        for block in task_store.blocks:
            assert block.status == PlanStatus.FIXED
            assert block.is_hard_lock is True
            assert block.start_hour == 10
            assert block.duration_hours == 2
            assert block.discipline == "Meeting"
            assert block.project_number == "MEETING"
            assert block.client_name == "Intern"
            assert block.created_by == "ellen"

    def test_does_not_check_conflicts_by_default(self, placer, task_store):
        task_store.add("anna", MONDAY, 9, 9)

        outcome = placer.place(_meeting(["anna"]))

        assert outcome.success is True
        assert outcome.errors == []
        assert len(task_store.blocks_for("anna")) == 2

    def test_conflict_check_flag_refuses_busy_participants(self, task_store, meeting_store, prober):
        task_store.add("anna", MONDAY, 9, 9)
        placer = MeetingPlacer(task_store, meeting_store, prober=prober, check_conflicts=True)

        outcome = placer.place(_meeting(["anna", "ben"]))

        assert outcome.success is False
        assert outcome.blocks_placed == 1
        assert "anna" in outcome.errors[0]
        assert len(task_store.blocks_for("ben")) == 1
        assert len(task_store.blocks_for("anna")) == 1

    def test_conflict_check_requires_prober(self, task_store, meeting_store):
        with pytest.raises(ValueError):
            MeetingPlacer(task_store, meeting_store, check_conflicts=True)

    def test_client_name_is_used_when_given(self, placer, task_store):
        placer.place(_meeting(["anna"], client_name="Acme"))
        assert task_store.blocks[0].client_name == "Acme"

    def test_minutes_are_ignored(self, placer, task_store):
        placer.place(_meeting(["anna"], start="09:30", end="11:15"))
        assert (task_store.blocks[0].start_hour, task_store.blocks[0].duration_hours) == (9, 2)

    def test_non_positive_duration_is_rejected(self, placer, task_store, meeting_store):
        outcome = placer.place(_meeting(["anna"], start="11:00", end="11:30"))

        assert outcome.success is False
        assert task_store.blocks == []
        assert meeting_store.meetings == []

    def test_weekend_is_rejected(self, placer, task_store):
        outcome = placer.place(_meeting(["anna"], meeting_date=SATURDAY))

        assert outcome.success is False
        assert task_store.blocks == []

    def test_meeting_record_failure_places_nothing(self, placer, task_store, meeting_store):
        meeting_store.fail_inserts = True

        outcome = placer.place(_meeting(["anna"]))

        assert outcome.success is False
        assert task_store.blocks == []

    def test_block_failure_reports_error(self, placer, task_store):
        task_store.fail_inserts = True

        outcome = placer.place(_meeting(["anna", "ben"]))

        assert outcome.success is False
        assert outcome.blocks_placed == 0
        assert "insert rejected" in outcome.errors[0]


class TestParsing:
    """Test HH:MM handling."""

    def test_parse_hour(self):
        assert parse_hour("09:00") == 9
        assert parse_hour("17:45") == 17

    def test_malformed_time_is_rejected_by_model(self):
        with pytest.raises(ValueError):
            _meeting(["anna"], start="9am")
