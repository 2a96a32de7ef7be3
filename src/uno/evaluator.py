"""Run a callable against an expected result and report the verdict."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from uno.config import Settings
from uno.equality import is_same
from uno.errors import ArgumentError
from uno.formatting import format_arguments, format_template, function_name, to_string
from uno.reporting.base import Reporter
from uno.types import UNDEFINED, is_number


@dataclass(frozen=True)
class Outcome:
    """What a call produced: a returned value, or the exception it raised."""

    value: Any
    raised: bool = False


@dataclass
class Verdict:
    """Result of a single check.

    Attributes:
        name: The rendered display name of the check.
        passed: Whether the outcome matched the expected value.
        message: Human-readable report, one line on pass and a multi-line
            breakdown on failure.
        outcome: What the target returned or raised.
        expected: The value the outcome was compared against.
        mapping: The placeholder values used to render ``name``.
    """

    name: str
    passed: bool
    message: str
    outcome: Outcome
    expected: Any
    mapping: dict[str, str] = field(default_factory=dict)


def _is_unbound_method(target: Any, receiver: Any) -> bool:
    """True when *target* is the plain function a method of *receiver* wraps.

    Callables stored on the receiver itself, static methods and bound methods
    are called as they are, so *args* stays the positional argument list.
    """
    if not inspect.isfunction(target):
        return False
    attr = inspect.getattr_static(type(receiver), target.__name__, None)
    return attr is target


def invoke(target: Any, args: Sequence[Any], receiver: Any = None) -> Outcome:
    """Call *target* with *args*, binding class-level methods to *receiver*."""
    fn = target
    if receiver is not None and _is_unbound_method(target, receiver):
        fn = target.__get__(receiver, type(receiver))
    try:
        return Outcome(fn(*args))
    except Exception as exc:
        return Outcome(exc, raised=True)


def build_mapping(
    target: Any, args: Sequence[Any], outcome: Outcome, expected: Any
) -> dict[str, str]:
    arguments = format_arguments(args)
    result = to_string(outcome.value)
    method = function_name(target)
    mapping: dict[str, str] = {}
    for alias in ("input", "in", "args", "arguments"):
        mapping[alias] = arguments
    for alias in ("output", "out", "result"):
        mapping[alias] = result
    for alias in ("method", "fn", "f", "function"):
        mapping[alias] = method
    mapping["expected"] = to_string(expected)
    return mapping


def build_message(
    group: str, name: str, passed: bool, mapping: dict[str, str], raised: bool
) -> str:
    if passed:
        return f"{group} test passed: {name}"
    label = "   threw:\t" if raised else "returned:\t"
    return (
        f"{group} test failed: {name}"
        f"\n     input:\t{mapping['args']}"
        f"\n  {label}{mapping['result']}"
        f"\n  expected:\t{mapping['expected']}\n"
    )


def _parse_arguments(
    arguments: tuple[Any, ...],
) -> tuple[str | None, Any, Any, Any, Any, Any]:
    # Shapes: [name], [receiver], target, args, expected, [count]
    if not 3 <= len(arguments) <= 5:
        raise ArgumentError(
            f"expected 3 to 5 arguments, got {len(arguments)}"
        )

    i = 0
    name = None
    if isinstance(arguments[i], str):
        name = arguments[i]
        i += 1

    receiver = None
    if i < len(arguments) and not callable(arguments[i]):
        receiver = arguments[i]
        i += 1

    rest = arguments[i:]
    if len(rest) < 3:
        raise ArgumentError(
            "`target`, `args` and `expected` are required after the optional "
            "name and receiver"
        )
    target, args, expected = rest[:3]
    count = rest[3] if len(rest) > 3 else UNDEFINED
    return name, receiver, target, args, expected, count


def _validate(target: Any, args: Any, count: Any) -> None:
    if not callable(target):
        raise ArgumentError("`target` is missing or not callable")
    if not isinstance(args, (list, tuple)):
        raise ArgumentError("`args` is missing or not a list or tuple")
    if not (count is UNDEFINED or count is None or is_number(count)):
        raise ArgumentError("`count` should be a number or omitted")


class Uno:
    """An evaluator bound to a set of settings and reporters."""

    def __init__(
        self,
        settings: Settings | None = None,
        reporters: Iterable[Reporter] = (),
        logger: logging.Logger | None = None,
    ):
        self.settings = settings or Settings()
        self.reporters = list(reporters)
        self.logger = logger or logging.getLogger("uno")

    def set(self, **options: Any) -> Uno:
        self.settings = self.settings.merged(**options)
        return self

    def clear_all(self) -> Uno:
        self.settings = Settings()
        return self

    def __call__(self, *arguments: Any) -> bool:
        """Evaluate ``[name], [receiver], target, args, expected, [count]``."""
        name, receiver, target, args, expected, count = _parse_arguments(arguments)
        return self.check(
            target, args, expected, name=name, receiver=receiver, count=count
        ).passed

    def check(
        self,
        target: Any,
        args: Sequence[Any],
        expected: Any,
        *,
        name: str | None = None,
        receiver: Any = None,
        count: Any = UNDEFINED,
    ) -> Verdict:
        _validate(target, args, count)
        if count is not UNDEFINED and count is not None:
            self.logger.debug(f"Repeat count {count} accepted; checks run once")

        method = function_name(target)
        self.logger.debug(f"Invoking {method} with {len(args)} argument(s)")
        outcome = invoke(target, args, receiver)
        if outcome.raised:
            self.logger.debug(f"{method} raised {outcome.value!r}")

        passed = is_same(outcome.value, expected)
        mapping = build_mapping(target, args, outcome, expected)
        template = name if name is not None else self.settings.name
        rendered = format_template(template, mapping)
        message = build_message(
            self.settings.group, rendered, passed, mapping, outcome.raised
        )
        self.logger.debug(f"Check '{rendered}' passed={passed}")

        verdict = Verdict(
            name=rendered,
            passed=passed,
            message=message,
            outcome=outcome,
            expected=expected,
            mapping=mapping,
        )
        for reporter in self.reporters:
            reporter.report(verdict)
        return verdict


def evaluate(
    *arguments: Any,
    settings: Settings | None = None,
    reporters: Iterable[Reporter] = (),
    logger: logging.Logger | None = None,
) -> bool:
    """Check a call against an expected result and return whether it matched.

    Accepted shapes::

        evaluate(target, args, expected)
        evaluate(name, target, args, expected)
        evaluate(receiver, target, args, expected)
        evaluate(name, receiver, target, args, expected)

    each optionally followed by a numeric repeat ``count``. ``name`` is a
    template with placeholders such as ``{method}``, ``{args}``,
    ``{result}`` and ``{expected}``.

    Raises:
        ArgumentError: if the arguments do not match any accepted shape.
    """
    return Uno(settings=settings, reporters=reporters, logger=logger)(*arguments)
