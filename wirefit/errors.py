"""Exceptions raised by the wire-fitting core.

Both subclass a builtin so callers that only care about the broad category
(``ValueError`` for bad input, ``RuntimeError`` for bad call order) can
catch them without importing this module.
"""


class InvalidArgumentError(ValueError):
    """An argument is outside the domain an operation is defined on.

    Raised for empty wire sets, non-positive exploration constants,
    vectors of the wrong length, and wires that are not part of the
    control wire set they are differentiated against.
    """


class InvalidSequenceError(RuntimeError):
    """An operation was called out of order.

    Raised when reinforcement is applied without an action having been
    chosen since construction, ``reset()``, or the previous reinforcement.
    """
