"""
Input sanitizers for room dimensions and wall coefficient sets

Both helpers build new containers and never modify the caller's input.
"""

import logging
import math
import numbers
from typing import Mapping, Optional

import numpy as np

from ..data.materials import DEFAULT_LIBRARY, MaterialLibrary
from ..models.room import (
    WallType, DimensionAxis, CoefficientSet, RoomDimensions
)
from .acoustic_constants import AcousticsConfig, DEFAULT_CONFIG
from .result_types import InvalidCoefficientError, InvalidDimensionError

logger = logging.getLogger(__name__)


def validate_length(name: str, value) -> float:
    """Return value as a float, rejecting negative, non-finite and non-numeric input"""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidDimensionError(name, value, "not a number")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidDimensionError(name, value, "not finite")
    if value < 0:
        raise InvalidDimensionError(name, value, "negative")
    return value


def sanitize_dimensions(dimensions: Optional[Mapping] = None) -> RoomDimensions:
    """
    Fill missing room dimensions with 0

    Args:
        dimensions: Mapping of DimensionAxis (or 'width'/'height'/'depth') to meters

    Returns:
        dict: DimensionAxis -> float for all three axes

    Raises:
        InvalidDimensionError: a supplied value is negative, NaN, infinite or not numeric
    """
    sanitized = {axis: 0.0 for axis in DimensionAxis}
    if not dimensions:
        return sanitized

    for key, value in dimensions.items():
        axis = DimensionAxis.coerce(key)
        if axis is None:
            logger.debug("Ignoring unknown dimension key %r", key)
            continue
        sanitized[axis] = validate_length(axis.value, value)
    return sanitized


def check_library_bands(library: MaterialLibrary, config: AcousticsConfig) -> None:
    """Raise ValueError when the library and configuration disagree on the band count"""
    if library.num_bands != config.num_reverb_bands:
        raise ValueError(
            f"Material library has {library.num_bands} bands, "
            f"configuration expects {config.num_reverb_bands}"
        )


def default_coefficients_for(wall: WallType, library: MaterialLibrary,
                             config: AcousticsConfig) -> np.ndarray:
    """Absorption vector of the configured default material for a wall"""
    material = config.default_materials[wall]
    vector = library.lookup(material)
    if vector is None:
        raise ValueError(f"Default material '{material}' for wall '{wall.value}' is not in the library")
    return np.array(vector, dtype=np.float64)


def sanitize_coefficients(coefficients: Optional[Mapping] = None,
                          library: Optional[MaterialLibrary] = None,
                          config: Optional[AcousticsConfig] = None) -> CoefficientSet:
    """
    Fill walls missing from a coefficient set with their default-material vectors

    Present walls are copied as float arrays. No diagnostics are emitted, and
    applying this twice gives the same result as applying it once.

    Raises:
        InvalidCoefficientError: a supplied vector does not have one value per band,
            or holds negative or non-finite values
        ValueError: the library band count differs from the configuration
    """
    library = library or DEFAULT_LIBRARY
    config = config or DEFAULT_CONFIG
    check_library_bands(library, config)

    supplied = {}
    for key, values in (coefficients or {}).items():
        wall = WallType.coerce(key)
        if wall is None:
            logger.debug("Ignoring unknown wall key %r in coefficient set", key)
            continue
        supplied[wall] = values

    sanitized = {}
    for wall in WallType:
        if wall not in supplied:
            sanitized[wall] = default_coefficients_for(wall, library, config)
            continue
        try:
            vector = np.array(supplied[wall], dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidCoefficientError(wall.value, f"not numeric ({e})") from e
        if vector.shape != (config.num_reverb_bands,):
            raise InvalidCoefficientError(
                wall.value,
                f"expected {config.num_reverb_bands} bands, got shape {vector.shape}"
            )
        if not np.all(np.isfinite(vector)):
            raise InvalidCoefficientError(wall.value, "contains non-finite values")
        if np.any(vector < 0):
            raise InvalidCoefficientError(wall.value, "contains negative values")
        sanitized[wall] = vector
    return sanitized
