"""Pytest configuration and fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up uno loggers after each test so handlers do not leak between tests."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("uno")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


class RecordingSink:
    """Stand-in for an external test harness exposing ``ok(passed, message)``."""

    def __init__(self):
        self.calls: list[tuple[bool, str]] = []

    def ok(self, passed: bool, message: str) -> None:
        self.calls.append((passed, message))


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
