"""Rendering values as display text and filling name templates."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

from uno.types import TypeTag, classify

_LITERALS = {
    TypeTag.NULL: "null",
    TypeTag.UNDEFINED: "undefined",
    TypeTag.NAN: "NaN",
    TypeTag.INFINITY: "infinity",
}


def function_name(fn: Any) -> str:
    """Return the declared name of *fn*, or ``"function"`` when it has none."""
    name = getattr(fn, "__name__", None)
    if isinstance(name, str) and name.isidentifier():
        return name
    return "function"


def _to_json(value: Any) -> str | None:
    try:
        return json.dumps(value, separators=(",", ":"))
    except (TypeError, ValueError):
        return None


def to_string(value: Any) -> str:
    """Convert any value to display text.

    Containers are written as compact JSON when they can be encoded; otherwise
    each element is rendered recursively.
    """
    tag = classify(value)
    if tag in _LITERALS:
        return _LITERALS[tag]
    if tag is TypeTag.STRING:
        return value
    if tag is TypeTag.FUNCTION:
        return function_name(value)
    if tag in (TypeTag.BOOLEAN, TypeTag.NUMBER, TypeTag.REGEXP, TypeTag.DATE):
        return str(value)

    encoded = _to_json(value)
    if encoded is not None:
        return encoded
    if tag is TypeTag.ARRAY:
        return "[" + ",".join(to_string(item) for item in value) + "]"
    if isinstance(value, Mapping):
        items = (f"{to_string(k)}: {to_string(v)}" for k, v in value.items())
        return "{" + ", ".join(items) + "}"
    return repr(value)


def format_arguments(args: Iterable[Any]) -> str:
    """Render an argument list the way it reads at a call site: ``1, 2``."""
    return ", ".join(to_string(arg) for arg in args)


def format_template(template: Any, mapping: Any) -> Any:
    """Replace ``{key}`` placeholders in *template* with values from *mapping*.

    Keys are applied one after another in mapping order, so a value inserted
    for an early key can itself be replaced by a later key. A key that already
    carries a brace at either end is used as the placeholder verbatim.

    Example::

        >>> format_template("Hi {name}, see you at {time}{ampm}!",
        ...                 {"name": "Jeremy", "time": 6, "ampm": "pm"})
        'Hi Jeremy, see you at 6pm!'
    """
    if not isinstance(template, str) or not isinstance(mapping, Mapping):
        return template

    for key, value in mapping.items():
        text = to_string(value)
        placeholder = str(key)
        if not placeholder.startswith("{") and not placeholder.endswith("}"):
            placeholder = "{" + placeholder + "}"
        template = template.replace(placeholder, text)
    return template
