"""
Room Acoustics Constants - Centralized configuration for reflection and reverberation models
Replaces hardcoded values throughout the room acoustics calculation system
"""

import math
from dataclasses import dataclass, field, replace as dataclass_replace
from types import MappingProxyType
from typing import Mapping, Tuple

from ..models.room import WallType

# =============================================================================
# FREQUENCY BAND CONSTANTS
# =============================================================================

# Reverb band center frequencies (Hz), one absorption value per band
REVERB_BAND_FREQUENCIES: Tuple[float, ...] = (
    31.25, 62.5, 125.0, 250.0, 500.0, 1000.0, 2000.0, 4000.0, 8000.0
)

# Number of reverb bands in the reference configuration
NUM_REVERB_BANDS: int = len(REVERB_BAND_FREQUENCIES)

# =============================================================================
# EARLY REFLECTION CONSTANTS
# =============================================================================

# First band of the averaging window used for single-value reflection coefficients (500 Hz)
DEFAULT_REFLECTIONS_STARTING_BAND: int = 4

# Number of bands averaged (500 Hz, 1 kHz, 2 kHz)
DEFAULT_REFLECTIONS_NUM_AVERAGING_BANDS: int = 3

# =============================================================================
# REVERBERATION CONSTANTS
# =============================================================================

# Speed of sound in air at roughly 20 C (m/s)
DEFAULT_SPEED_OF_SOUND: float = 343.0

# 24 * ln(10), numerator of the RT60 acoustic constant k = 24 ln(10) / c
TWENTY_FOUR_LOG10: float = 24.0 * math.log(10.0)

# Rooms below this volume (m^3) have no modeled reverberation
MIN_VOLUME: float = 1e-4

# Atmospheric energy absorption per band (1/m), added to both RT60 equations
AIR_ABSORPTION_COEFFICIENTS: Tuple[float, ...] = (
    0.0006, 0.0006, 0.0007, 0.0008, 0.0010, 0.0015, 0.0026, 0.0060, 0.0207
)

# Mean absorption at or below which the Sabine equation is used instead of Eyring
SABINE_MAX_MEAN_ABSORPTION: float = 0.5

# =============================================================================
# MATERIAL DEFAULTS
# =============================================================================

# Transparent (fully absorptive) stands for "no wall present"
DEFAULT_WALL_MATERIAL: str = 'Transparent'

DEFAULT_MATERIALS: Mapping[WallType, str] = MappingProxyType(
    {wall: DEFAULT_WALL_MATERIAL for wall in WallType}
)


@dataclass(frozen=True)
class AcousticsConfig:
    """
    Configuration surface for the room acoustics calculators

    Every calculator takes one of these; DEFAULT_CONFIG carries the
    reference values documented above. Instances are immutable and may be
    shared freely between threads.
    """
    num_reverb_bands: int = NUM_REVERB_BANDS
    band_frequencies: Tuple[float, ...] = REVERB_BAND_FREQUENCIES
    reflections_starting_band: int = DEFAULT_REFLECTIONS_STARTING_BAND
    reflections_num_averaging_bands: int = DEFAULT_REFLECTIONS_NUM_AVERAGING_BANDS
    speed_of_sound: float = DEFAULT_SPEED_OF_SOUND
    air_absorption_coefficients: Tuple[float, ...] = AIR_ABSORPTION_COEFFICIENTS
    min_volume: float = MIN_VOLUME
    default_materials: Mapping[WallType, str] = field(default_factory=lambda: DEFAULT_MATERIALS)

    def __post_init__(self):
        # Normalize sequences and mappings so the instance stays immutable
        object.__setattr__(self, 'band_frequencies', tuple(float(f) for f in self.band_frequencies))
        object.__setattr__(self, 'air_absorption_coefficients',
                           tuple(float(a) for a in self.air_absorption_coefficients))
        defaults = {}
        for key, material in dict(self.default_materials).items():
            wall = WallType.coerce(key)
            if wall is None:
                raise ValueError(f"Unknown wall '{key}' in default materials")
            defaults[wall] = material
        object.__setattr__(self, 'default_materials', MappingProxyType(defaults))
        self._validate()

    def __hash__(self):
        # default_materials is a mapping proxy, which is not hashable itself
        return hash((
            self.num_reverb_bands,
            self.band_frequencies,
            self.reflections_starting_band,
            self.reflections_num_averaging_bands,
            self.speed_of_sound,
            self.air_absorption_coefficients,
            self.min_volume,
            frozenset(self.default_materials.items()),
        ))

    def _validate(self):
        """Check the configuration is internally consistent"""
        if self.num_reverb_bands <= 0:
            raise ValueError("num_reverb_bands must be positive")
        if len(self.band_frequencies) != self.num_reverb_bands:
            raise ValueError(
                f"band_frequencies has {len(self.band_frequencies)} entries, "
                f"expected {self.num_reverb_bands}"
            )
        if len(self.air_absorption_coefficients) != self.num_reverb_bands:
            raise ValueError(
                f"air_absorption_coefficients has {len(self.air_absorption_coefficients)} entries, "
                f"expected {self.num_reverb_bands}"
            )
        if any(a < 0 or not math.isfinite(a) for a in self.air_absorption_coefficients):
            raise ValueError("air_absorption_coefficients must be finite and non-negative")
        if self.reflections_num_averaging_bands <= 0:
            raise ValueError("reflections_num_averaging_bands must be positive")
        last_band = self.reflections_starting_band + self.reflections_num_averaging_bands
        if self.reflections_starting_band < 0 or last_band > self.num_reverb_bands:
            raise ValueError(
                f"Reflection averaging window [{self.reflections_starting_band}, {last_band}) "
                f"is outside 0..{self.num_reverb_bands}"
            )
        if not math.isfinite(self.speed_of_sound) or self.speed_of_sound <= 0:
            raise ValueError("speed_of_sound must be a positive finite number")
        if not math.isfinite(self.min_volume) or self.min_volume < 0:
            raise ValueError("min_volume must be a finite non-negative number")
        missing = [wall.value for wall in WallType if wall not in self.default_materials]
        if missing:
            raise ValueError(f"No default material configured for walls: {', '.join(missing)}")

    @property
    def reflection_band_slice(self) -> slice:
        """Slice selecting the bands averaged for early reflections"""
        start = self.reflections_starting_band
        return slice(start, start + self.reflections_num_averaging_bands)

    def get_frequency_labels(self, as_strings: bool = False):
        """Get band center frequencies as floats or display labels"""
        if as_strings:
            return [_band_label(f) for f in self.band_frequencies]
        return list(self.band_frequencies)

    def replace(self, **changes) -> 'AcousticsConfig':
        """Return a copy of this configuration with some fields changed"""
        return dataclass_replace(self, **changes)


def _band_label(freq_hz: float) -> str:
    """Generate human-readable label for a frequency band"""
    if freq_hz >= 1000.0:
        khz = freq_hz / 1000.0
        return f"{khz:g} kHz"
    return f"{freq_hz:g} Hz"


DEFAULT_CONFIG = AcousticsConfig()
