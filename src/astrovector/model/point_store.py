"""
Point Storage
=============
Fixed-dimension coordinate tuples tagged with the coordinate system they are
expressed in.

Classes:
    CoordinateKind: Tag identifying a coordinate system.
    PointStore: Immutable, tagged N-tuple of floats.
"""
from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Iterable, Iterator, Optional, overload

import numpy as np

from astrovector.config import FLOAT_DTYPE
from astrovector.model.errors import DimensionMismatchError

if TYPE_CHECKING:
    import numpy.typing as npt


class CoordinateKind(StrEnum):
    """Coordinate systems a stored point can be expressed in."""
    CARTESIAN = "cartesian"
    SPHERICAL = "spherical"
    SPHERICAL_EQUATORIAL = "spherical equatorial"
    CYLINDRICAL = "cylindrical"


class PointStore:
    """
    An immutable tuple of floats tagged with its coordinate system.

    The components are kept in a read-only float64 array. `values` exposes
    them as a plain tuple, `to_array()` as a writable copy.
    """
    __slots__ = ("_coords", "_kind")

    def __init__(
        self,
        values: Iterable[float] | npt.ArrayLike,
        kind: CoordinateKind | str,
        dimension: Optional[int] = None,
    ) -> None:
        """
        Initialize the point.

        Args:
            values: The coordinates, one per dimension.
            kind: Coordinate system of `values`.
            dimension: Required number of components, if any.

        Raises:
            DimensionMismatchError: If `dimension` is given and does not match.
            TypeError: If `values` is not a flat sequence of real numbers.
            ValueError: If `kind` is not a known coordinate system.
        """
        if isinstance(values, (str, bytes)):
            raise TypeError(f"Coordinates must be real numbers, got {values!r}")
        try:
            raw = np.asarray(list(values))
        except (TypeError, ValueError) as exc:
            raise TypeError(f"Coordinates must be real numbers, got {values!r}") from exc
        if raw.dtype.kind not in "biuf":
            raise TypeError(f"Coordinates must be real numbers, got {values!r}")
        coords = raw.astype(FLOAT_DTYPE)

        if coords.ndim != 1:
            raise TypeError(f"Coordinates must be a flat sequence, got shape {coords.shape}")
        if coords.size == 0:
            raise DimensionMismatchError(dimension or 1, 0)
        if dimension is not None and coords.size != dimension:
            raise DimensionMismatchError(dimension, coords.size)

        coords.flags.writeable = False
        self._coords: npt.NDArray[np.float64] = coords
        self._kind = CoordinateKind(kind)

    def __repr__(self) -> str:
        """String representation of the point."""
        return f"{self.__class__.__name__}({self.values}, kind='{self._kind}')"

    @property
    def kind(self) -> CoordinateKind:
        """Coordinate system the components are expressed in."""
        return self._kind

    @property
    def dimension(self) -> int:
        """Number of components."""
        return self._coords.size

    @property
    def values(self) -> tuple[float, ...]:
        return tuple(float(c) for c in self._coords)

    def to_array(self) -> npt.NDArray[np.float64]:
        return self._coords.copy()

    def __len__(self) -> int:
        return self._coords.size

    @overload
    def __getitem__(self, index: int) -> float: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[float, ...]: ...

    def __getitem__(self, index: int | slice) -> float | tuple[float, ...]:
        if isinstance(index, slice):
            return self.values[index]
        return float(self._coords[index])

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointStore):
            return NotImplemented
        return self._kind == other._kind and np.array_equal(self._coords, other._coords)

    def __hash__(self) -> int:
        return hash((self._kind, self.values))
