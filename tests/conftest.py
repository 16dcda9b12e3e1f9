"""Shared fixtures for remote control tests."""
import logging
from logging.handlers import QueueHandler

import pytest

from remote_core import CeilingFan, GarageDoor, Light, Stereo


class ReportRecorder:
    """State callback that records every device report message in order."""

    def __init__(self):
        self.messages = []

    def __call__(self, report: dict):
        self.messages.append(report["message"])

    def watch(self, *devices):
        for device in devices:
            device.add_state_callback(self)
        return self

    def clear(self):
        self.messages.clear()


@pytest.fixture
def light():
    return Light("Living Room")


@pytest.fixture
def fan():
    return CeilingFan("Living Room")


@pytest.fixture
def stereo():
    return Stereo("Living Room")


@pytest.fixture
def garage_door():
    return GarageDoor("Garage")


@pytest.fixture
def reports(light, fan, stereo, garage_door):
    return ReportRecorder().watch(light, fan, stereo, garage_door)


@pytest.fixture
def restore_root_logger():
    """Drop the queue handler that setup_logging() installs on the root logger."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if isinstance(handler, QueueHandler):
            root.removeHandler(handler)
    root.setLevel(level)
