"""Exceptions raised for invalid calls into the evaluator."""


class ArgumentError(ValueError):
    """Raised when an evaluation is called with an invalid argument shape.

    This is a programming error in the calling code, distinct from a check
    that simply fails.
    """
