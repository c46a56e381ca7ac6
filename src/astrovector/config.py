"""
Configuration & Numeric Constants
=================================
This module serves as the central registry for global numeric constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (the cartesian dimension, float
   precision, comparison tolerances) from being scattered throughout the code.
2. Deployment: It lets the comparison tolerance be tuned through the
   environment without touching the code.

Exports:
    CARTESIAN_DIMENSION (int): Dimension of the canonical cartesian form.
    FLOAT_DTYPE (type): dtype used for every stored coordinate.
    DEFAULT_ATOL (float): Absolute tolerance used by ``is_close``.
"""
import logging
import os

import numpy as np

logger = logging.getLogger(__name__)

ATOL_ENV_VAR: str = "ASTROVECTOR_ATOL"
FALLBACK_ATOL: float = 1e-9


def get_env_tolerance(name: str = ATOL_ENV_VAR, default: float = FALLBACK_ATOL) -> float:
    """
    Read a non-negative float tolerance from the environment.

    Args:
        name: Name of the environment variable.
        default: Value returned when the variable is unset or invalid.

    Returns:
        The parsed tolerance, or `default`.
    """
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default

    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not a number, using {default}.")
        return default

    if not value >= 0.0:
        logger.warning(f"Ignoring {name}={raw!r}: tolerance must be non-negative, using {default}.")
        return default
    return value


# Global Constants
CARTESIAN_DIMENSION: int = 3
FLOAT_DTYPE = np.float64
DEFAULT_ATOL: float = get_env_tolerance()
