"""
Reflection Coefficient Calculator - Single-value early-reflection coefficients per wall
"""

import math
from typing import Mapping, Optional

from ..data.materials import DEFAULT_LIBRARY, MaterialLibrary
from ..models.room import WallType, ReflectionCoefficientSet
from .acoustic_constants import AcousticsConfig, DEFAULT_CONFIG
from .sanitizers import check_library_bands, sanitize_coefficients


class ReflectionCoefficientCalculator:
    """Reduces each wall's absorption spectrum to one reflection amplitude"""

    def __init__(self, config: Optional[AcousticsConfig] = None,
                 library: Optional[MaterialLibrary] = None):
        self.config = config or DEFAULT_CONFIG
        self.library = library
        check_library_bands(library or DEFAULT_LIBRARY, self.config)

    def average_absorption(self, vector) -> float:
        """Mean absorption over the configured reflection averaging window"""
        window = vector[self.config.reflection_band_slice]
        return float(sum(window)) / self.config.reflections_num_averaging_bands

    @staticmethod
    def absorption_to_reflection(absorption: float) -> float:
        """
        Convert energy absorption to amplitude reflectance

        r = sqrt(1 - a), clamped so that a >= 1 gives 0.
        """
        return math.sqrt(max(0.0, 1.0 - absorption))

    def compute(self, coefficients: Optional[Mapping] = None) -> ReflectionCoefficientSet:
        """
        Compute the reflection coefficient of every wall

        Args:
            coefficients: Per-wall absorption vectors; missing walls use defaults

        Returns:
            dict: WallType -> reflection coefficient in [0, 1]
        """
        coefficients = sanitize_coefficients(coefficients, library=self.library, config=self.config)
        return {
            wall: self.absorption_to_reflection(self.average_absorption(coefficients[wall]))
            for wall in WallType
        }


def compute_reflection_coefficients(coefficients: Optional[Mapping] = None,
                                    config: Optional[AcousticsConfig] = None,
                                    library: Optional[MaterialLibrary] = None) -> ReflectionCoefficientSet:
    """Compute per-wall reflection coefficients with a one-off calculator"""
    return ReflectionCoefficientCalculator(config=config, library=library).compute(coefficients)
