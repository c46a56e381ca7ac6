"""Coordinate-system agnostic vector algebra for astronomical representations."""
from astrovector.model.algebra import (
    cross,
    dot,
    is_close,
    magnitude,
    mean,
    to_representation,
    unit_vector,
    vector_sum,
)
from astrovector.model.bridge import register_kind, registered_kinds, representation_for, to_cartesian
from astrovector.model.constraint import is_representation, is_representation_type
from astrovector.model.errors import (
    DimensionMismatchError,
    RepresentationError,
    TypeConstraintViolation,
)
from astrovector.model.point_store import CoordinateKind, PointStore
from astrovector.model.representation import BaseRepresentation
from astrovector.model.representations import (
    CartesianRepresentation,
    CylindricalRepresentation,
    SphericalEquatorialRepresentation,
    SphericalRepresentation,
)

__version__ = "0.1.0"

__all__ = [
    "BaseRepresentation",
    "CartesianRepresentation",
    "CoordinateKind",
    "CylindricalRepresentation",
    "DimensionMismatchError",
    "PointStore",
    "RepresentationError",
    "SphericalEquatorialRepresentation",
    "SphericalRepresentation",
    "TypeConstraintViolation",
    "cross",
    "dot",
    "is_close",
    "is_representation",
    "is_representation_type",
    "magnitude",
    "mean",
    "register_kind",
    "registered_kinds",
    "representation_for",
    "to_cartesian",
    "to_representation",
    "unit_vector",
    "vector_sum",
]
