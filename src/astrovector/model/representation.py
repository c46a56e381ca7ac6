"""
Abstract base for coordinate representations.

Concrete representations only supply the coordinate-system specific part:
the forward transform to cartesian and its inverse. Everything else, vector
algebra included, is provided here.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, ClassVar, Optional, TypeVar

import numpy as np

from astrovector.model import algebra
from astrovector.model.bridge import as_cartesian_array, point_to_cartesian
from astrovector.model.point_store import CoordinateKind, PointStore

if TYPE_CHECKING:
    import numpy.typing as npt

R = TypeVar("R", bound="BaseRepresentation")


class BaseRepresentation(ABC):
    """
    Abstract base class for representations of a point or vector.

    Instances are immutable: every operation returns a new instance.
    Subclasses set `DIMENSION` and `KIND` and implement the two static
    transforms `coords_to_cartesian` and `cartesian_to_coords`.
    """
    DIMENSION: ClassVar[int] = 3
    KIND: ClassVar[CoordinateKind]

    __slots__ = ("_point",)

    def __init__(self, *coords: Any) -> None:
        """
        Initialize the representation from coordinates in its own system.

        Accepts either the components as separate arguments or a single
        sequence of them.

        Raises:
            DimensionMismatchError: If the number of components is not `DIMENSION`.
        """
        if len(coords) == 1 and isinstance(coords[0], Iterable):
            coords = coords[0]
            if isinstance(coords, PointStore) and coords.kind != self.KIND:
                raise ValueError(
                    f"{self.__class__.__name__} holds '{self.KIND}' coordinates, got a "
                    f"'{coords.kind}' point; use {self.__class__.__name__}.from_point()"
                )
        self._point = PointStore(coords, self.KIND, self.DIMENSION)

    def __repr__(self) -> str:
        """String representation of the vector."""
        return f"{self.__class__.__name__}{self._point.values}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseRepresentation):
            return NotImplemented
        return type(self) is type(other) and self._point == other._point

    def __hash__(self) -> int:
        return hash((type(self), self._point))

    # ------------------------------------------------------------------
    # Conversion contract
    # ------------------------------------------------------------------
    @staticmethod
    @abstractmethod
    def coords_to_cartesian(coords: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        """Transform own coordinates to [x, y, z]."""
        pass

    @staticmethod
    @abstractmethod
    def cartesian_to_coords(xyz: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        """Transform [x, y, z] to own coordinates."""
        pass

    @classmethod
    def from_cartesian(cls: type[R], xyz: npt.ArrayLike) -> R:
        """
        Build an instance from a cartesian 3-tuple.

        Raises:
            DimensionMismatchError: If `xyz` does not hold 3 components.
        """
        return cls(cls.cartesian_to_coords(as_cartesian_array(xyz)))

    @classmethod
    def from_point(cls: type[R], point: PointStore) -> R:
        """
        Build an instance from a tagged point of any registered kind.

        A point already in this class's coordinate system is reused as is;
        any other kind is normalized to cartesian first.
        """
        if not isinstance(point, PointStore):
            raise TypeError(f"Expected a PointStore, got {type(point).__qualname__}")
        if point.kind == cls.KIND:
            return cls(point.values)
        return cls.from_cartesian(point_to_cartesian(point))

    def point(self) -> PointStore:
        """The stored coordinates, tagged with their coordinate kind."""
        return self._point

    def to_cartesian(self) -> npt.NDArray[np.float64]:
        return np.asarray(self.coords_to_cartesian(self._point.to_array()), dtype=np.float64)

    # ------------------------------------------------------------------
    # Vector algebra
    # ------------------------------------------------------------------
    def cross(self, other: Any, return_type: Optional[type] = None) -> Any:
        """Cross product with `other`, returned as `return_type` (default: own type)."""
        return algebra.cross(self, other, return_type)

    def dot(self, other: Any) -> float:
        """Dot product with `other`."""
        return algebra.dot(self, other)

    def unit_vector(self, return_type: Optional[type] = None) -> Any:
        """Unit vector along self. Undefined (NaN) for a zero-length vector."""
        return algebra.unit_vector(self, return_type)

    def to_representation(self, return_type: Optional[type] = None) -> Any:
        """Convert to `return_type` from the stored point."""
        return algebra.to_representation(self, return_type)

    def sum(self, other: Any, return_type: Optional[type] = None) -> Any:
        """Sum with `other`, returned as `return_type` (default: own type)."""
        return algebra.vector_sum(self, other, return_type)

    def mean(self, other: Any, return_type: Optional[type] = None) -> Any:
        """Midpoint with `other`, returned as `return_type` (default: own type)."""
        return algebra.mean(self, other, return_type)

    def magnitude(self) -> float:
        """Euclidean norm of the cartesian form."""
        return algebra.magnitude(self)

    def is_close(self, other: Any, atol: Optional[float] = None) -> bool:
        """Whether `other` coincides with self in cartesian space within `atol`."""
        return algebra.is_close(self, other, atol)
