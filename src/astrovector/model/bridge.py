"""
Cartesian Bridge
================
Normalizes any representation to the canonical 3-D cartesian form.

The forward transforms live on the concrete representation classes; this
module only dispatches to them. The reverse direction is each class's own
``from_cartesian`` constructor.

A registry maps every `CoordinateKind` to the class that owns it, so a bare
tagged `PointStore` can be normalized without the instance that produced it.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

import numpy as np

from astrovector.config import CARTESIAN_DIMENSION, FLOAT_DTYPE
from astrovector.model.errors import DimensionMismatchError
from astrovector.model.point_store import CoordinateKind, PointStore

if TYPE_CHECKING:
    import numpy.typing as npt
    from astrovector.model.representation import BaseRepresentation

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=type)

_KIND_REGISTRY: dict[CoordinateKind, type] = {}


def register_kind(cls: R) -> R:
    """Class decorator registering a representation class by its KIND."""
    kind = getattr(cls, "KIND", None)
    if kind is None:
        raise ValueError(f"{cls.__name__} must define KIND")
    kind = CoordinateKind(kind)

    owner = _KIND_REGISTRY.get(kind)
    if owner is not None and owner is not cls:
        raise ValueError(f"Coordinate kind '{kind}' is already owned by {owner.__name__}")
    _KIND_REGISTRY[kind] = cls
    logger.debug(f"Registered {cls.__name__} for coordinate kind '{kind}'.")
    return cls


def representation_for(kind: CoordinateKind | str) -> type:
    """
    Class owning `kind`.

    Raises:
        KeyError: If `kind` is not a coordinate kind or has no registered owner.
    """
    try:
        kind = CoordinateKind(kind)
    except ValueError:
        raise KeyError(f"Unknown coordinate kind '{kind}'") from None
    cls = _KIND_REGISTRY.get(kind)
    if cls is None:
        raise KeyError(f"No representation registered for coordinate kind '{kind}'")
    return cls


def registered_kinds() -> list[CoordinateKind]:
    return list(_KIND_REGISTRY.keys())


def as_cartesian_array(xyz: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """
    Coerce a cartesian tuple to a float64 array of shape (3,).

    Raises:
        DimensionMismatchError: If `xyz` does not hold exactly 3 components.
    """
    arr = np.asarray(xyz, dtype=FLOAT_DTYPE)
    if arr.shape != (CARTESIAN_DIMENSION,):
        raise DimensionMismatchError(CARTESIAN_DIMENSION, arr.size, what="cartesian tuple")
    return arr


def to_cartesian(rep: BaseRepresentation) -> npt.NDArray[np.float64]:
    """
    Apply the representation's forward transform.

    Args:
        rep: Any representation instance.

    Returns:
        Array [x, y, z].
    """
    return as_cartesian_array(rep.to_cartesian())


def point_to_cartesian(store: PointStore) -> npt.NDArray[np.float64]:
    """
    Normalize a tagged point using the class registered for its kind.

    Raises:
        KeyError: If no representation owns `store.kind`.
    """
    cls = representation_for(store.kind)
    return to_cartesian(cls.from_point(store))
