"""
Vector Algebra
==============
Coordinate-system agnostic vector operations.

Two layers live here:

1. Cartesian kernels (``cartesian_*``) operating on arrays of shape (..., 3).
   They broadcast, so whole batches of vectors can be processed at once.
2. Checked operations (``cross``, ``dot``, ...) taking representations. Each
   validates every representation-typed operand and return type first, then
   normalizes the operands through the cartesian bridge, runs the kernel and
   builds the requested return type with its ``from_cartesian`` constructor.

Zero-length vectors are not guarded: ``unit_vector`` of a zero vector yields
NaN components (numpy emits a RuntimeWarning). Check ``magnitude() > 0``
first.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import numpy as np

from astrovector import config
from astrovector.model.bridge import to_cartesian
from astrovector.model.constraint import (
    ARGUMENT,
    RETURN_TYPE,
    require_representation,
    require_representation_type,
)

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


# ==========================================
# CARTESIAN KERNELS
# ==========================================

def cartesian_dot(a: npt.ArrayLike, b: npt.ArrayLike) -> npt.NDArray[np.float64]:
    return np.sum(np.multiply(a, b), axis=-1)


def cartesian_cross(a: npt.ArrayLike, b: npt.ArrayLike) -> npt.NDArray[np.float64]:
    return np.cross(a, b)


def cartesian_norm(a: npt.ArrayLike) -> npt.NDArray[np.float64]:
    return np.linalg.norm(a, axis=-1)


def cartesian_unit(a: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Divide each vector by its own Euclidean norm."""
    arr = np.asarray(a, dtype=config.FLOAT_DTYPE)
    return arr / np.expand_dims(cartesian_norm(arr), axis=-1)


def cartesian_sum(a: npt.ArrayLike, b: npt.ArrayLike) -> npt.NDArray[np.float64]:
    return np.add(a, b)


def cartesian_mean(a: npt.ArrayLike, b: npt.ArrayLike) -> npt.NDArray[np.float64]:
    return np.add(a, b) / 2.0


# ==========================================
# CHECKED OPERATIONS
# ==========================================

def _resolve_return_type(rep: Any, return_type: Optional[type]) -> type:
    if return_type is None:
        return type(rep)
    require_representation_type(return_type, RETURN_TYPE)
    return return_type


def cross(a: Any, b: Any, return_type: Optional[type] = None) -> Any:
    """
    Cross product of two vectors.

    Args:
        a: Left operand.
        b: Right operand.
        return_type: Representation class of the result. Defaults to the type of `a`.

    Returns:
        `a x b` as an instance of `return_type`.

    Raises:
        TypeConstraintViolation: If an operand or `return_type` is not a representation.
    """
    require_representation(a, ARGUMENT)
    require_representation(b, ARGUMENT)
    return_type = _resolve_return_type(a, return_type)

    xyz = cartesian_cross(to_cartesian(a), to_cartesian(b))
    return return_type.from_cartesian(xyz)


def dot(a: Any, b: Any) -> float:
    """
    Dot product of two vectors.

    Raises:
        TypeConstraintViolation: If an operand is not a representation.
    """
    require_representation(a, ARGUMENT)
    require_representation(b, ARGUMENT)

    return float(cartesian_dot(to_cartesian(a), to_cartesian(b)))


def magnitude(a: Any) -> float:
    """
    Euclidean norm of the vector.

    The norm is taken over the cartesian form; raw components of angular
    systems cannot be summed in quadrature.
    """
    require_representation(a, ARGUMENT)

    return float(cartesian_norm(to_cartesian(a)))


def unit_vector(a: Any, return_type: Optional[type] = None) -> Any:
    """
    Unit vector pointing along `a`.

    The caller must ensure ``magnitude(a) > 0``; a zero vector gives NaN
    components.

    Args:
        a: The vector to normalize.
        return_type: Representation class of the result. Defaults to the type of `a`.

    Returns:
        The normalized vector as an instance of `return_type`.
    """
    require_representation(a, ARGUMENT)
    return_type = _resolve_return_type(a, return_type)

    xyz = to_cartesian(a)
    mag = cartesian_norm(xyz)
    if mag == 0.0:
        logger.debug(f"unit_vector of zero-length {type(a).__name__}; result is undefined.")
    return return_type.from_cartesian(xyz / mag)


def to_representation(a: Any, return_type: Optional[type] = None) -> Any:
    """
    Convert `a` into another representation.

    The stored point is handed to ``return_type.from_point`` directly; a
    conversion to the same coordinate kind reuses the stored tuple unchanged.
    """
    require_representation(a, ARGUMENT)
    return_type = _resolve_return_type(a, return_type)

    return return_type.from_point(a.point())


def vector_sum(a: Any, b: Any, return_type: Optional[type] = None) -> Any:
    """
    Component-wise sum of two vectors in cartesian space.

    Raises:
        TypeConstraintViolation: If an operand or `return_type` is not a representation.
    """
    require_representation(a, ARGUMENT)
    require_representation(b, ARGUMENT)
    return_type = _resolve_return_type(a, return_type)

    return return_type.from_cartesian(cartesian_sum(to_cartesian(a), to_cartesian(b)))


def mean(a: Any, b: Any, return_type: Optional[type] = None) -> Any:
    """
    Midpoint of two vectors in cartesian space.

    Raises:
        TypeConstraintViolation: If an operand or `return_type` is not a representation.
    """
    require_representation(a, ARGUMENT)
    require_representation(b, ARGUMENT)
    return_type = _resolve_return_type(a, return_type)

    return return_type.from_cartesian(cartesian_mean(to_cartesian(a), to_cartesian(b)))


def is_close(a: Any, b: Any, atol: Optional[float] = None) -> bool:
    """
    Whether two vectors coincide in cartesian space.

    Args:
        a: First vector.
        b: Second vector.
        atol: Absolute tolerance per component. Defaults to `config.DEFAULT_ATOL`.
    """
    require_representation(a, ARGUMENT)
    require_representation(b, ARGUMENT)
    if atol is None:
        atol = config.DEFAULT_ATOL

    return bool(np.allclose(to_cartesian(a), to_cartesian(b), rtol=0.0, atol=atol))
