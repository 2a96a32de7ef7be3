"""Classification of arbitrary values into a small set of type tags."""

from __future__ import annotations

import math
import numbers
from collections.abc import Sequence
from enum import Enum
from typing import Any


class _Undefined:
    """Marker for a value that is absent, as opposed to ``None``."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


class TypeTag(str, Enum):
    NULL = "null"
    UNDEFINED = "undefined"
    INFINITY = "infinity"
    NAN = "nan"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    FUNCTION = "function"
    ARRAY = "array"
    REGEXP = "regexp"
    DATE = "date"
    OBJECT = "object"


def is_number(value: Any) -> bool:
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def is_nan(value: Any) -> bool:
    if not is_number(value):
        return False
    try:
        return value != value
    except ArithmeticError:
        # Signaling NaNs (Decimal("sNaN")) refuse to be compared at all.
        return True


def is_infinity(value: Any) -> bool:
    return (
        is_number(value)
        and not is_nan(value)
        and (value == math.inf or value == -math.inf)
    )


def is_regexp(value: Any) -> bool:
    return all(hasattr(value, attr) for attr in ("pattern", "search", "flags"))


def is_date(value: Any) -> bool:
    return hasattr(value, "isoformat") and hasattr(value, "timetuple")


def is_array(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str)


def classify(value: Any) -> TypeTag:
    """Return the single :class:`TypeTag` that describes *value*.

    The checks run in a fixed order and the first match wins: NaN and
    infinity are numbers too, so they have to be tested before ``number``,
    and classes are callable, so ``function`` comes before the container
    checks.
    """
    if value is None:
        return TypeTag.NULL
    if value is UNDEFINED:
        return TypeTag.UNDEFINED
    if is_infinity(value):
        return TypeTag.INFINITY
    if is_nan(value):
        return TypeTag.NAN
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if is_number(value):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if callable(value):
        return TypeTag.FUNCTION
    if is_array(value):
        return TypeTag.ARRAY
    if is_regexp(value):
        return TypeTag.REGEXP
    if is_date(value):
        return TypeTag.DATE
    return TypeTag.OBJECT
