"""Sinks that receive a verdict after every check."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from uno.evaluator import Verdict


class Reporter(ABC):
    @abstractmethod
    def report(self, verdict: Verdict) -> None:
        """Receive the verdict of a finished check."""
        ...


class LoggingReporter(Reporter):
    """Log passing checks at INFO and failing checks at ERROR."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger("uno.report")

    def report(self, verdict: Verdict) -> None:
        level = logging.INFO if verdict.passed else logging.ERROR
        self.logger.log(level, verdict.message)


class AssertionSinkReporter(Reporter):
    """Forward verdicts to any object with an ``ok(passed, message)`` method."""

    def __init__(self, sink: Any):
        if not callable(getattr(sink, "ok", None)):
            raise TypeError(
                f"{type(sink).__name__} has no callable ok(passed, message)"
            )
        self.sink = sink

    def report(self, verdict: Verdict) -> None:
        self.sink.ok(verdict.passed, verdict.message)
