"""Tests for core task model."""

from datetime import datetime

import pytest

from taskbot.core.tasks import (
    Deadline,
    Event,
    TaskKind,
    ToDo,
    format_task,
    task_from_record,
    to_record,
)


@pytest.fixture
def due():
    return datetime(2024, 12, 1, 18, 0)


class TestTask:
    def test_starts_not_done(self):
        assert ToDo("read book").is_done is False

    def test_mark_toggles(self):
        task = ToDo("read book")
        task.mark()
        assert task.is_done is True
        task.mark()
        assert task.is_done is False

    def test_status_icon(self):
        task = ToDo("read book")
        assert task.status_icon == " "
        task.mark()
        assert task.status_icon == "X"

    @pytest.mark.parametrize("description", ["", "   "])
    def test_empty_description_rejected(self, description, due):
        with pytest.raises(ValueError):
            ToDo(description)
        with pytest.raises(ValueError):
            Deadline(description, due)

    def test_kind_tags(self, due):
        assert ToDo("a").kind is TaskKind.TODO
        assert Deadline("a", due).kind is TaskKind.DEADLINE
        assert Event("a", due, due).kind is TaskKind.EVENT

    def test_variants_are_not_equal(self, due):
        assert ToDo("a") != Deadline("a", due)


class TestEventOverlap:
    def test_overlapping(self):
        a = Event("a", datetime(2024, 12, 1, 9), datetime(2024, 12, 1, 10))
        b = Event("b", datetime(2024, 12, 1, 9, 30), datetime(2024, 12, 1, 9, 45))
        assert a.overlaps(b) is True
        assert b.overlaps(a) is True

    def test_touching_endpoints_do_not_overlap(self):
        a = Event("a", datetime(2024, 12, 1, 9), datetime(2024, 12, 1, 10))
        b = Event("b", datetime(2024, 12, 1, 10), datetime(2024, 12, 1, 11))
        assert a.overlaps(b) is False
        assert b.overlaps(a) is False


class TestFormatTask:
    def test_todo(self):
        assert format_task(ToDo("read book")) == "[T][ ] read book"

    def test_done_deadline(self, due):
        task = Deadline("submit report", due, is_done=True)
        assert format_task(task) == "[D][X] submit report (by: Dec 01 2024 18:00)"

    def test_event(self):
        task = Event("meeting", datetime(2024, 12, 1, 9), datetime(2024, 12, 1, 10))
        assert format_task(task) == "[E][ ] meeting (from: Dec 01 2024 09:00 to: Dec 01 2024 10:00)"


class TestRecords:
    def test_deadline_record(self, due):
        record = to_record(Deadline("submit report", due))
        assert record == {
            "type": "deadline",
            "description": "submit report",
            "done": False,
            "by": "2024-12-01T18:00:00",
        }

    def test_round_trip_keeps_done_state(self):
        task = Event("meeting", datetime(2024, 12, 1, 9), datetime(2024, 12, 1, 10))
        task.mark()
        assert task_from_record(to_record(task)) == task

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            task_from_record({"type": "chore", "description": "x"})

    def test_missing_date(self):
        with pytest.raises(KeyError):
            task_from_record({"type": "deadline", "description": "x"})

    @pytest.mark.parametrize("done", ["false", "true", 0, 1, None])
    def test_done_must_be_boolean(self, done):
        with pytest.raises(TypeError):
            task_from_record({"type": "todo", "description": "x", "done": done})

    def test_done_defaults_to_false(self):
        assert task_from_record({"type": "todo", "description": "x"}) == ToDo("x")

    def test_not_a_mapping(self):
        with pytest.raises(TypeError):
            task_from_record(["todo", "x"])
