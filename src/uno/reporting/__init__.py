"""Reporters that receive check verdicts."""

from uno.reporting.base import AssertionSinkReporter, LoggingReporter, Reporter
from uno.reporting.junit import JUnitReporter

__all__ = ["AssertionSinkReporter", "JUnitReporter", "LoggingReporter", "Reporter"]
