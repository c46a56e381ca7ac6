"""
Tests for the concrete representations and the coordinate kind registry.
"""

import math

import numpy as np
import pytest

from astrovector import (
    BaseRepresentation,
    CartesianRepresentation,
    CoordinateKind,
    CylindricalRepresentation,
    DimensionMismatchError,
    PointStore,
    SphericalEquatorialRepresentation,
    SphericalRepresentation,
    is_representation,
    is_representation_type,
    register_kind,
    registered_kinds,
    representation_for,
)

ATOL = 1e-12


# =============================================================================
# Forward Transforms
# =============================================================================

class TestToCartesian:
    """Known points in each coordinate system."""

    def test_cartesian_identity(self):
        np.testing.assert_array_equal(CartesianRepresentation(1.0, -2.0, 3.0).to_cartesian(), [1.0, -2.0, 3.0])

    @pytest.mark.parametrize("coords,expected", [
        ((2.0, math.pi / 2, 0.0), (2.0, 0.0, 0.0)),
        ((2.0, math.pi / 2, math.pi / 2), (0.0, 2.0, 0.0)),
        ((3.0, 0.0, 1.234), (0.0, 0.0, 3.0)),
        ((1.0, math.pi, 0.0), (0.0, 0.0, -1.0)),
    ])
    def test_spherical(self, coords, expected):
        np.testing.assert_allclose(SphericalRepresentation(*coords).to_cartesian(), expected, atol=ATOL)

    @pytest.mark.parametrize("coords,expected", [
        ((0.0, 0.0, 2.0), (2.0, 0.0, 0.0)),
        ((math.pi / 2, 0.0, 1.0), (0.0, 1.0, 0.0)),
        ((0.5, math.pi / 2, 1.0), (0.0, 0.0, 1.0)),
        ((0.0, -math.pi / 2, 4.0), (0.0, 0.0, -4.0)),
    ])
    def test_spherical_equatorial(self, coords, expected):
        np.testing.assert_allclose(SphericalEquatorialRepresentation(*coords).to_cartesian(), expected, atol=ATOL)

    @pytest.mark.parametrize("coords,expected", [
        ((1.0, 0.0, 5.0), (1.0, 0.0, 5.0)),
        ((1.0, math.pi / 2, 5.0), (0.0, 1.0, 5.0)),
        ((2.0, math.pi, -1.0), (-2.0, 0.0, -1.0)),
    ])
    def test_cylindrical(self, coords, expected):
        np.testing.assert_allclose(CylindricalRepresentation(*coords).to_cartesian(), expected, atol=ATOL)


# =============================================================================
# Inverse Transforms
# =============================================================================

class TestFromCartesian:

    def test_spherical_on_axis(self):
        s = SphericalRepresentation.from_cartesian((0.0, 0.0, 3.0))
        assert s.r == pytest.approx(3.0)
        assert s.theta == pytest.approx(0.0)
        assert s.phi == pytest.approx(0.0)

    def test_spherical_in_plane(self):
        s = SphericalRepresentation.from_cartesian((0.0, 2.0, 0.0))
        assert s.r == pytest.approx(2.0)
        assert s.theta == pytest.approx(math.pi / 2)
        assert s.phi == pytest.approx(math.pi / 2)

    def test_equatorial(self):
        e = SphericalEquatorialRepresentation.from_cartesian((1.0, 1.0, math.sqrt(2.0)))
        assert e.lon == pytest.approx(math.pi / 4)
        assert e.lat == pytest.approx(math.pi / 4)
        assert e.distance == pytest.approx(2.0)

    def test_cylindrical(self):
        c = CylindricalRepresentation.from_cartesian((-1.0, 0.0, 7.0))
        assert c.rho == pytest.approx(1.0)
        assert c.phi == pytest.approx(math.pi)
        assert c.z == pytest.approx(7.0)

    def test_zero_vector(self):
        """The origin converts without raising."""
        s = SphericalRepresentation.from_cartesian((0.0, 0.0, 0.0))
        assert s.r == 0.0

    @pytest.mark.parametrize("cls", [
        CartesianRepresentation,
        SphericalRepresentation,
        SphericalEquatorialRepresentation,
        CylindricalRepresentation,
    ])
    def test_round_trip(self, cls):
        xyz = (0.3, -1.7, 2.2)
        np.testing.assert_allclose(cls.from_cartesian(xyz).to_cartesian(), xyz, atol=ATOL)

    @pytest.mark.parametrize("xyz", [(1.0, 2.0), (1.0, 2.0, 3.0, 4.0)])
    def test_wrong_arity(self, xyz):
        with pytest.raises(DimensionMismatchError):
            CartesianRepresentation.from_cartesian(xyz)


# =============================================================================
# Construction & Value Semantics
# =============================================================================

class TestValueSemantics:

    def test_sequence_or_arguments(self):
        assert CartesianRepresentation(1.0, 2.0, 3.0) == CartesianRepresentation((1.0, 2.0, 3.0))
        assert CartesianRepresentation(np.array([1.0, 2.0, 3.0])) == CartesianRepresentation(1, 2, 3)

    def test_wrong_arity(self):
        with pytest.raises(DimensionMismatchError):
            SphericalRepresentation(1.0, 2.0)

    def test_string_rejected(self):
        with pytest.raises(TypeError):
            CartesianRepresentation("123")

    def test_point_is_tagged(self):
        point = CylindricalRepresentation(1.0, 0.5, 2.0).point()
        assert isinstance(point, PointStore)
        assert point.kind is CoordinateKind.CYLINDRICAL
        assert point.values == (1.0, 0.5, 2.0)

    def test_same_numbers_different_type(self):
        assert CartesianRepresentation(1.0, 0.0, 0.0) != CylindricalRepresentation(1.0, 0.0, 0.0)

    def test_hashable(self):
        vectors = {CartesianRepresentation(1, 2, 3), CartesianRepresentation(1.0, 2.0, 3.0)}
        assert len(vectors) == 1

    def test_immutable(self):
        v = CartesianRepresentation(1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            v.x = 5.0
        with pytest.raises(AttributeError):
            v.label = "sun"

    def test_repr(self):
        assert repr(CartesianRepresentation(1, 2, 3)) == "CartesianRepresentation(1.0, 2.0, 3.0)"

    def test_foreign_point_in_constructor(self):
        """A point of another kind must go through from_point."""
        point = CartesianRepresentation(1.0, 0.0, 0.0).point()
        with pytest.raises(ValueError):
            SphericalRepresentation(point)

    def test_from_point_same_kind(self):
        point = SphericalRepresentation(1.0, 0.5, 0.25).point()
        assert SphericalRepresentation.from_point(point).point() == point

    def test_from_point_other_kind(self):
        point = PointStore((0.0, 0.0, 2.0), CoordinateKind.CARTESIAN)
        s = SphericalRepresentation.from_point(point)
        assert s.r == pytest.approx(2.0)
        assert s.theta == pytest.approx(0.0)

    def test_from_point_rejects_tuple(self):
        with pytest.raises(TypeError):
            SphericalRepresentation.from_point((1.0, 0.0, 0.0))

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            BaseRepresentation(1.0, 2.0, 3.0)


# =============================================================================
# Capability Checks
# =============================================================================

class TestCapability:

    @pytest.mark.parametrize("cls", [
        CartesianRepresentation,
        SphericalRepresentation,
        SphericalEquatorialRepresentation,
        CylindricalRepresentation,
    ])
    def test_concrete_types(self, cls):
        assert is_representation_type(cls)
        assert not is_representation(cls)

    def test_instances(self):
        assert is_representation(CartesianRepresentation(0.0, 0.0, 1.0))
        assert not is_representation_type(CartesianRepresentation(0.0, 0.0, 1.0))

    def test_abstract_base_has_no_kind(self):
        assert not is_representation_type(BaseRepresentation)

    @pytest.mark.parametrize("obj", [tuple, list, float, PointStore, np.ndarray])
    def test_non_representation_types(self, obj):
        assert not is_representation_type(obj)

    def test_bool_dimension_rejected(self):
        class Odd(CartesianRepresentation):
            __slots__ = ()
            DIMENSION = True

        assert not is_representation_type(Odd)


# =============================================================================
# Registry
# =============================================================================

class TestRegistry:

    @pytest.mark.parametrize("kind,cls", [
        (CoordinateKind.CARTESIAN, CartesianRepresentation),
        (CoordinateKind.SPHERICAL, SphericalRepresentation),
        (CoordinateKind.SPHERICAL_EQUATORIAL, SphericalEquatorialRepresentation),
        (CoordinateKind.CYLINDRICAL, CylindricalRepresentation),
    ])
    def test_lookup(self, kind, cls):
        assert representation_for(kind) is cls
        assert representation_for(str(kind)) is cls

    def test_reregistering_owner_is_allowed(self):
        assert register_kind(CartesianRepresentation) is CartesianRepresentation

    def test_second_owner_rejected(self):
        class OtherCartesian(CartesianRepresentation):
            __slots__ = ()

        with pytest.raises(ValueError):
            register_kind(OtherCartesian)

    def test_kind_required(self):
        class NoKind:
            pass

        with pytest.raises(ValueError):
            register_kind(NoKind)

    def test_unknown_kind(self):
        with pytest.raises(KeyError):
            representation_for("toroidal")

    def test_every_kind_registered(self):
        assert set(registered_kinds()) == set(CoordinateKind)
