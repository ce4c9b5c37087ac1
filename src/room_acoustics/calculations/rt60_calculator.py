"""
RT60 Calculator - Reverberation time estimation using Sabine and Eyring formulas
"""

import logging
import math
from typing import Dict, Mapping, Optional

import numpy as np

from ..data.materials import DEFAULT_LIBRARY, MaterialLibrary
from ..models.room import WallType, DimensionAxis, RT60Profile
from .acoustic_constants import (
    AcousticsConfig, DEFAULT_CONFIG, TWENTY_FOUR_LOG10, SABINE_MAX_MEAN_ABSORPTION
)
from .result_types import InvalidDimensionError
from .sanitizers import check_library_bands, sanitize_coefficients, sanitize_dimensions

logger = logging.getLogger(__name__)


class RT60Calculator:
    """Calculator for per-band reverberation time (RT60) of a rectangular room"""

    def __init__(self, config: Optional[AcousticsConfig] = None,
                 library: Optional[MaterialLibrary] = None):
        self.config = config or DEFAULT_CONFIG
        self.library = library
        check_library_bands(library or DEFAULT_LIBRARY, self.config)

    def acoustic_constant(self, speed_of_sound: float) -> float:
        """k = 24 ln(10) / c, in seconds per meter"""
        return TWENTY_FOUR_LOG10 / speed_of_sound

    @staticmethod
    def calculate_room_areas(dimensions: Mapping[DimensionAxis, float]) -> Dict[str, float]:
        """
        Calculate the areas of the three pairs of opposing walls

        Returns:
            dict: 'left_right', 'floor_ceiling', 'front_back' (one wall of
            each pair) and 'total' (all six walls), in square meters
        """
        width = dimensions[DimensionAxis.WIDTH]
        height = dimensions[DimensionAxis.HEIGHT]
        depth = dimensions[DimensionAxis.DEPTH]

        left_right = width * height
        floor_ceiling = width * depth
        front_back = depth * height
        return {
            'left_right': left_right,
            'floor_ceiling': floor_ceiling,
            'front_back': front_back,
            'total': 2 * (left_right + floor_ceiling + front_back)
        }

    def calculate_rt60_sabine(self, volume: float, absorption_area: float,
                              air_absorption: float, speed_of_sound: Optional[float] = None) -> float:
        """
        Calculate RT60 using Sabine formula

        RT60 = k * V / (A + 4 * m * V)
        where V = volume (m^3), A = absorption area (m^2 sabins),
        m = air absorption (1/m)
        """
        k = self.acoustic_constant(speed_of_sound or self.config.speed_of_sound)
        return k * volume / (absorption_area + 4 * air_absorption * volume)

    def calculate_rt60_eyring(self, volume: float, total_area: float, mean_absorption: float,
                              air_absorption: float, speed_of_sound: Optional[float] = None) -> float:
        """
        Calculate RT60 using Eyring formula (more accurate for high absorption)

        RT60 = k * V / (-S * ln(1 - a) + 4 * m * V)
        where S = total surface area (m^2) and a = mean absorption coefficient
        """
        if mean_absorption >= 1.0:
            # -ln(0) is infinite, so all sound energy is gone at the first reflection
            return 0.0
        k = self.acoustic_constant(speed_of_sound or self.config.speed_of_sound)
        return k * volume / (-total_area * math.log(1 - mean_absorption) + 4 * air_absorption * volume)

    def calculate_rt60(self, dimensions: Optional[Mapping] = None,
                       coefficients: Optional[Mapping] = None,
                       speed_of_sound: Optional[float] = None) -> RT60Profile:
        """
        Calculate RT60 across all reverb bands

        Args:
            dimensions: Room width/height/depth in meters; missing axes are 0
            coefficients: Per-wall absorption vectors; missing walls use defaults
            speed_of_sound: Speed of sound in m/s, defaults to the configured value

        Returns:
            numpy.ndarray: RT60 in seconds per band, all zero for an empty room

        Raises:
            InvalidDimensionError: negative or non-finite dimension or speed of sound
        """
        dimensions = sanitize_dimensions(dimensions)
        coefficients = sanitize_coefficients(coefficients, library=self.library, config=self.config)
        if speed_of_sound is None:
            speed_of_sound = self.config.speed_of_sound
        speed_of_sound = _validate_speed_of_sound(speed_of_sound)

        num_bands = self.config.num_reverb_bands
        rt60 = np.zeros(num_bands, dtype=np.float64)

        volume = (dimensions[DimensionAxis.WIDTH] * dimensions[DimensionAxis.HEIGHT]
                  * dimensions[DimensionAxis.DEPTH])
        if volume < self.config.min_volume:
            logger.debug("Room volume %.6g m^3 below %.6g m^3, no reverberation modeled",
                         volume, self.config.min_volume)
            return rt60

        areas = self.calculate_room_areas(dimensions)
        total_area = areas['total']

        for i in range(num_bands):
            # Effective absorptive area
            absorption_area = (
                (coefficients[WallType.LEFT][i] + coefficients[WallType.RIGHT][i]) * areas['left_right']
                + (coefficients[WallType.FLOOR][i] + coefficients[WallType.CEILING][i]) * areas['floor_ceiling']
                + (coefficients[WallType.FRONT][i] + coefficients[WallType.BACK][i]) * areas['front_back']
            )
            mean_absorption = absorption_area / total_area
            air_absorption = self.config.air_absorption_coefficients[i]

            if mean_absorption <= SABINE_MAX_MEAN_ABSORPTION:
                rt60[i] = self.calculate_rt60_sabine(volume, absorption_area, air_absorption, speed_of_sound)
            else:
                logger.debug("Band %d mean absorption %.3f, using Eyring equation", i, mean_absorption)
                rt60[i] = self.calculate_rt60_eyring(
                    volume, total_area, mean_absorption, air_absorption, speed_of_sound
                )

        return rt60

    def format_rt60_report(self, rt60: RT60Profile) -> str:
        """Format an RT60 profile as a readable report"""
        labels = self.config.get_frequency_labels(as_strings=True)
        mean_rt60 = float(np.mean(rt60)) if len(rt60) else 0.0

        report = "RT60 Calculation Report\n"
        report += "=" * 30 + "\n\n"
        report += f"{'Band':>10}  {'RT60 (s)':>9}\n"
        report += "-" * 21 + "\n"
        for label, seconds in zip(labels, rt60):
            report += f"{label:>10}  {float(seconds):>9.3f}\n"
        report += "-" * 21 + "\n"
        report += f"{'Mean':>10}  {mean_rt60:>9.3f}\n"
        return report


def _validate_speed_of_sound(speed_of_sound) -> float:
    try:
        value = float(speed_of_sound)
    except (TypeError, ValueError):
        raise InvalidDimensionError('speed_of_sound', speed_of_sound, "not a number")
    if not math.isfinite(value) or value <= 0:
        raise InvalidDimensionError('speed_of_sound', speed_of_sound, "must be positive and finite")
    return value


# Convenience functions for common calculations
def compute_rt60(dimensions: Optional[Mapping] = None,
                 coefficients: Optional[Mapping] = None,
                 speed_of_sound: Optional[float] = None,
                 config: Optional[AcousticsConfig] = None,
                 library: Optional[MaterialLibrary] = None) -> RT60Profile:
    """Compute the RT60 profile of a room with a one-off calculator"""
    return RT60Calculator(config=config, library=library).calculate_rt60(
        dimensions, coefficients, speed_of_sound
    )


def format_rt60_report(rt60: RT60Profile, config: Optional[AcousticsConfig] = None) -> str:
    """Format an RT60 profile as a readable report"""
    return RT60Calculator(config=config).format_rt60_report(rt60)
