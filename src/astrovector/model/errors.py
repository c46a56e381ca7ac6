"""Exceptions raised by the representation layer."""
from __future__ import annotations


class RepresentationError(Exception):
    """Base class for all astrovector errors."""


class TypeConstraintViolation(RepresentationError, TypeError):
    """
    An operand or requested return type is not a representation.

    Raised before any numeric work is done. There is no recovery path: the
    caller has to pass a proper representation instance or class.
    """

    def __init__(self, role: str, offender: object) -> None:
        self.role = role
        self.offender = offender
        if isinstance(offender, type):
            name = offender.__qualname__
        else:
            name = type(offender).__qualname__
        super().__init__(f"{role} is expected to be a representation, got {name}")


class DimensionMismatchError(RepresentationError, ValueError):
    """A coordinate tuple does not have the number of components required."""

    def __init__(self, expected: int, actual: int, what: str = "point") -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what} expects {expected} components, got {actual}")
