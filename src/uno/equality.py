"""Deep structural equality for comparing check outcomes.

Unlike ``==``, :func:`is_same` treats NaN as equal to NaN at every nesting
level, compares datetimes by instant, compares compiled patterns by source and
flags, and walks containers and plain objects member by member.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, time
from typing import Any

from uno.types import UNDEFINED, is_array, is_date, is_nan, is_number, is_regexp


def coarse_kind(value: Any) -> str:
    """Return a primitive kind; values of different kinds are never equal."""
    if value is UNDEFINED:
        return "undefined"
    if is_number(value) or isinstance(value, bool):
        return "number"
    if isinstance(value, str):
        return "string"
    if callable(value):
        return "function"
    return "object"


def _is_falsy(value: Any) -> bool:
    if value is None or value is UNDEFINED or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    return is_number(value) and not is_nan(value) and value == 0


def _instant(value: Any) -> float:
    if hasattr(value, "timestamp"):
        return value.timestamp()
    return datetime.combine(value, time.min).timestamp()


def _members(value: Any) -> Mapping[Any, Any] | None:
    if isinstance(value, Mapping):
        return value
    if is_array(value):
        return dict(enumerate(value))
    if isinstance(value, BaseException):
        return {"type": type(value), "args": value.args, **vars(value)}
    if hasattr(value, "__dict__"):
        return vars(value)
    return None


def _length(value: Any) -> int | None:
    try:
        return len(value)
    except TypeError:
        return None


def _loosely_equal(a: Any, b: Any) -> bool:
    try:
        return bool(a == b)
    except (TypeError, ValueError, ArithmeticError):
        # Element-wise comparisons (numpy and friends) have no single truth value.
        return False


def is_same(a: Any, b: Any) -> bool:
    if a is b:
        return True
    kind = coarse_kind(a)
    if kind != coarse_kind(b):
        return False
    if _loosely_equal(a, b):
        return True
    if _is_falsy(a) != _is_falsy(b):
        return False

    custom = getattr(a, "is_equal", None)
    if callable(custom):
        return bool(custom(b))

    if is_date(a) and is_date(b):
        return _instant(a) == _instant(b)
    if is_nan(a) and is_nan(b):
        return True
    if is_regexp(a) and is_regexp(b):
        return a.pattern == b.pattern and a.flags == b.flags

    if kind != "object":
        return False

    len_a, len_b = _length(a), _length(b)
    if len_a and len_a != len_b:
        return False

    members_a, members_b = _members(a), _members(b)
    if members_a is None or members_b is None:
        return False
    if len(members_a) != len(members_b):
        return False
    for key, value in members_a.items():
        if key not in members_b or not is_same(value, members_b[key]):
            return False
    return True
