import logging

import pytest

from event_hub import EventHub, LogSink
from event_hub.events import clear


@pytest.fixture(autouse=True)
def _reset_default_hub():
    """Reset the module-level hub between tests."""
    clear()
    yield
    clear()


@pytest.fixture
def hub():
    """Fresh hub with logging enabled on a dedicated logger."""
    return EventHub(sink=LogSink(logging.getLogger("event_hub.tests"), enabled=True))
