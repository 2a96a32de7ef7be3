"""Tests for value rendering and template substitution."""

import json
import math
import re
from datetime import datetime
from decimal import Decimal

import pytest

from uno.equality import is_same
from uno.formatting import format_arguments, format_template, function_name, to_string
from uno.types import UNDEFINED


# --- to_string ---


@pytest.mark.parametrize(
    "value, text",
    [
        (None, "null"),
        (UNDEFINED, "undefined"),
        (float("nan"), "NaN"),
        (math.inf, "infinity"),
        (-math.inf, "infinity"),
        (True, "True"),
        (0, "0"),
        (1.5, "1.5"),
        (Decimal("2.50"), "2.50"),
        ("plain text", "plain text"),
        ("", ""),
        ([1, 2, 3], "[1,2,3]"),
        ((1, "a"), '[1,"a"]'),
        ({"a": 1, "b": [True, None]}, '{"a":1,"b":[true,null]}'),
        (len, "len"),
    ],
)
def test_to_string(value, text):
    assert to_string(value) == text


def test_pattern_and_date_use_their_own_text():
    pattern = re.compile("a+", re.IGNORECASE)
    moment = datetime(2012, 10, 31, 9, 30)
    assert to_string(pattern) == str(pattern)
    assert to_string(moment) == "2012-10-31 09:30:00"


def test_unencodable_array_is_rendered_item_by_item():
    assert to_string([1, datetime(2012, 10, 31)]) == "[1,2012-10-31 00:00:00]"
    assert to_string(range(3)) == "[0,1,2]"


def test_unencodable_mapping_is_rendered_item_by_item():
    assert to_string({"when": datetime(2012, 10, 31)}) == "{when: 2012-10-31 00:00:00}"


def test_other_objects_use_repr():
    err = ValueError("bad")
    assert to_string(err) == "ValueError('bad')"


@pytest.mark.parametrize(
    "value",
    [
        {"a": 1, "b": [1, 2, {"c": "d"}]},
        [1, "two", 3.5, None, False],
        {"nested": {"deeper": {"list": []}}},
    ],
)
def test_json_safe_values_survive_decoding(value):
    assert is_same(json.loads(to_string(value)), value)


# --- format_arguments ---


def test_format_arguments_reads_like_a_call_site():
    assert format_arguments([1, 2]) == "1, 2"
    assert format_arguments([1.5]) == "1.5"
    assert format_arguments([]) == ""
    assert format_arguments(["a", [1, 2], None]) == "a, [1,2], null"


# --- function_name ---


def test_function_name():
    def sum_two(a, b):
        return a + b

    assert function_name(sum_two) == "sum_two"
    assert function_name(round) == "round"
    assert function_name(lambda x: x) == "function"


def test_function_name_without_name_attribute():
    class Callable:
        def __call__(self):
            return 1

    assert function_name(Callable()) == "function"


# --- format_template ---


def test_format_template_basic():
    assert format_template("{a}-{b}", {"a": "x", "b": "y"}) == "x-y"


def test_format_template_formats_values():
    template = "Hi {name}, see you at {time}{ampm}!"
    mapping = {"name": "Jeremy", "time": 6, "ampm": "pm"}
    assert format_template(template, mapping) == "Hi Jeremy, see you at 6pm!"


def test_format_template_replaces_every_occurrence():
    assert format_template("{a}{a}{a}", {"a": 1}) == "111"


def test_format_template_passthrough():
    assert format_template(42, {"a": 1}) == 42
    assert format_template(None, {"a": 1}) is None
    assert format_template("{a}", None) == "{a}"
    assert format_template("{a}", ["a"]) == "{a}"


def test_format_template_keeps_unknown_placeholders():
    assert format_template("{a} {missing}", {"a": "x"}) == "x {missing}"


def test_format_template_accepts_braced_keys():
    assert format_template("{a} {a", {"{a": "y"}) == "y} y"
    assert format_template("{a} x", {"{a}": "y"}) == "y x"


def test_format_template_substitutes_sequentially():
    # A value inserted for an earlier key is visible to later keys.
    assert format_template("{a}", {"a": "{b}", "b": "z"}) == "z"
    assert format_template("{a}", {"b": "z", "a": "{b}"}) == "{b}"


def test_signaling_nan_renders_as_nan():
    assert to_string(Decimal("sNaN")) == "NaN"
