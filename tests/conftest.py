from datetime import datetime

import pytest

from taskbot.core.tasks import Deadline, Event, ToDo

from .fakes import InMemoryTaskStore


@pytest.fixture
def store():
    return InMemoryTaskStore()


@pytest.fixture
def seeded_store():
    return InMemoryTaskStore(
        [
            ToDo("read book"),
            Deadline("submit report", datetime(2024, 12, 1, 18, 0)),
            Event("meeting", datetime(2024, 12, 1, 9, 0), datetime(2024, 12, 1, 10, 0)),
        ]
    )
