"""Shared fixtures for acf-builder tests."""

import pytest

from acf_builder.config import reset_config
from acf_builder.host import set_default_host


@pytest.fixture(autouse=True)
def clean_state():
    """Reset global config and default host around every test."""
    reset_config()
    set_default_host(None)
    yield
    reset_config()
    set_default_host(None)


@pytest.fixture
def recording_host():
    """Host stand-in that remembers every record it receives."""

    class RecordingHost:
        def __init__(self):
            self.records: list[dict] = []

        def __call__(self, record: dict) -> None:
            self.records.append(record)

    return RecordingHost()
