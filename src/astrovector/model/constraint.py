"""
Representation capability checks.

A type is a representation when it exposes ``point()`` and ``to_cartesian()``
on its instances, the ``from_cartesian`` and ``from_point`` constructors, and
an integer ``DIMENSION``. An instance must also hold its coordinates in a
`PointStore` of ``DIMENSION`` components. Inheriting from
`BaseRepresentation` is not required.
"""
from __future__ import annotations

import logging
from typing import Any

from astrovector.model.errors import TypeConstraintViolation
from astrovector.model.point_store import PointStore

logger = logging.getLogger(__name__)

ARGUMENT = "argument"
RETURN_TYPE = "return type"

_INSTANCE_METHODS = ("point", "to_cartesian")
_CONSTRUCTORS = ("from_cartesian", "from_point")


def is_representation_type(cls: Any) -> bool:
    if not isinstance(cls, type):
        return False
    dimension = getattr(cls, "DIMENSION", None)
    if isinstance(dimension, bool) or not isinstance(dimension, int) or dimension < 1:
        return False
    if getattr(cls, "KIND", None) is None:
        return False
    return all(callable(getattr(cls, name, None)) for name in _INSTANCE_METHODS + _CONSTRUCTORS)


def is_representation(obj: Any) -> bool:
    """Instance check: the class qualifies and `point()` is a PointStore of DIMENSION components."""
    if isinstance(obj, type) or not is_representation_type(type(obj)):
        return False
    point = obj.point()
    return isinstance(point, PointStore) and len(point) == type(obj).DIMENSION


def require_representation(obj: Any, role: str = ARGUMENT) -> None:
    """
    Reject `obj` unless it is a representation instance.

    Raises:
        TypeConstraintViolation: If the capability check fails.
    """
    if not is_representation(obj):
        logger.debug(f"Rejected {role}: {type(obj).__qualname__} is not a representation.")
        raise TypeConstraintViolation(role, obj)


def require_representation_type(cls: Any, role: str = RETURN_TYPE) -> None:
    """
    Reject `cls` unless it is a representation class.

    Raises:
        TypeConstraintViolation: If the capability check fails.
    """
    if not is_representation_type(cls):
        name = cls.__qualname__ if isinstance(cls, type) else type(cls).__qualname__
        logger.debug(f"Rejected {role}: {name} is not a representation type.")
        raise TypeConstraintViolation(role, cls)
