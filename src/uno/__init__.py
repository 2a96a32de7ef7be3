"""uno: check a call against an expected result and report the verdict."""

from uno.config import Settings, load_settings
from uno.equality import is_same
from uno.errors import ArgumentError
from uno.evaluator import Outcome, Uno, Verdict, evaluate, invoke
from uno.formatting import format_arguments, format_template, function_name, to_string
from uno.types import UNDEFINED, TypeTag, classify

__version__ = "0.0.2"
VERSION = __version__

__all__ = [
    "ArgumentError",
    "Outcome",
    "Settings",
    "TypeTag",
    "UNDEFINED",
    "Uno",
    "VERSION",
    "Verdict",
    "classify",
    "evaluate",
    "format_arguments",
    "format_template",
    "function_name",
    "invoke",
    "is_same",
    "load_settings",
    "to_string",
]
