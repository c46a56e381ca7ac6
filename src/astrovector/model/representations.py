"""
Concrete coordinate representations.

All angles are in radians and are neither wrapped nor validated; distances
are unitless. Conversions at singular points (zero radius, the poles) are
whatever the trigonometry gives.

Classes:
    CartesianRepresentation: (x, y, z)
    SphericalRepresentation: (r, theta, phi), theta measured from +z
    SphericalEquatorialRepresentation: (lon, lat, distance), lat from the equator
    CylindricalRepresentation: (rho, phi, z)
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from astrovector.model.bridge import register_kind
from astrovector.model.point_store import CoordinateKind
from astrovector.model.representation import BaseRepresentation

if TYPE_CHECKING:
    import numpy.typing as npt


@register_kind
class CartesianRepresentation(BaseRepresentation):
    """
    A vector in 3D cartesian coordinates.
    """
    DIMENSION = 3
    KIND = CoordinateKind.CARTESIAN

    __slots__ = ()

    @property
    def x(self) -> float:
        return self._point[0]

    @property
    def y(self) -> float:
        return self._point[1]

    @property
    def z(self) -> float:
        return self._point[2]

    @staticmethod
    def coords_to_cartesian(coords: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        return coords

    @staticmethod
    def cartesian_to_coords(xyz: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        return xyz


@register_kind
class SphericalRepresentation(BaseRepresentation):
    """
    A vector in spherical coordinates (physics convention).

    r is the radial distance, theta the polar angle from the +z axis and
    phi the azimuth in the xy-plane measured from +x.
    """
    DIMENSION = 3
    KIND = CoordinateKind.SPHERICAL

    __slots__ = ()

    @property
    def r(self) -> float:
        """Radial distance."""
        return self._point[0]

    @property
    def theta(self) -> float:
        """Polar angle in radians."""
        return self._point[1]

    @property
    def phi(self) -> float:
        """Azimuth in radians."""
        return self._point[2]

    @staticmethod
    def coords_to_cartesian(coords: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        r, theta, phi = coords
        return np.array([
            r * np.sin(theta) * np.cos(phi),
            r * np.sin(theta) * np.sin(phi),
            r * np.cos(theta),
        ])

    @staticmethod
    def cartesian_to_coords(xyz: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        x, y, z = xyz
        rho = np.hypot(x, y)
        return np.array([np.hypot(rho, z), np.arctan2(rho, z), np.arctan2(y, x)])


@register_kind
class SphericalEquatorialRepresentation(BaseRepresentation):
    """
    A vector in spherical equatorial coordinates (astronomical convention).

    lon is measured in the xy-plane from +x, lat from the equator towards +z.
    """
    DIMENSION = 3
    KIND = CoordinateKind.SPHERICAL_EQUATORIAL

    __slots__ = ()

    @property
    def lon(self) -> float:
        return self._point[0]

    @property
    def lat(self) -> float:
        return self._point[1]

    @property
    def distance(self) -> float:
        return self._point[2]

    @staticmethod
    def coords_to_cartesian(coords: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        lon, lat, distance = coords
        return np.array([
            distance * np.cos(lat) * np.cos(lon),
            distance * np.cos(lat) * np.sin(lon),
            distance * np.sin(lat),
        ])

    @staticmethod
    def cartesian_to_coords(xyz: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        x, y, z = xyz
        rho = np.hypot(x, y)
        return np.array([np.arctan2(y, x), np.arctan2(z, rho), np.hypot(rho, z)])


@register_kind
class CylindricalRepresentation(BaseRepresentation):
    """
    A vector in cylindrical coordinates: radial distance from the z axis,
    azimuth from +x, and height.
    """
    DIMENSION = 3
    KIND = CoordinateKind.CYLINDRICAL

    __slots__ = ()

    @property
    def rho(self) -> float:
        return self._point[0]

    @property
    def phi(self) -> float:
        return self._point[1]

    @property
    def z(self) -> float:
        return self._point[2]

    @staticmethod
    def coords_to_cartesian(coords: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        rho, phi, z = coords
        return np.array([rho * np.cos(phi), rho * np.sin(phi), z])

    @staticmethod
    def cartesian_to_coords(xyz: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        x, y, z = xyz
        return np.array([np.hypot(x, y), np.arctan2(y, x), z])
