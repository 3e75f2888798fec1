"""Pytest fixtures for nanoemit tests."""

import pytest

from nanoemit import create_events


class CallRecorder:
    """Callable that records every call it receives into a shared log."""

    def __init__(self, name, log):
        self.name = name
        self.log = log

    def __call__(self, *args, **kwargs):
        self.log.append((self.name, args, kwargs))


@pytest.fixture
def events():
    """Create a default emitter."""
    return create_events()


@pytest.fixture
def isolated_events():
    """Create an emitter that isolates listener failures."""
    return create_events(isolate=True)


@pytest.fixture
def call_log():
    """Shared list that CallRecorder instances append to."""
    return []


@pytest.fixture
def make_recorder(call_log):
    """Factory for named recorders writing to the shared call log."""

    def _make(name):
        return CallRecorder(name, call_log)

    return _make
