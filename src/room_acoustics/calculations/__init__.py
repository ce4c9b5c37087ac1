"""
Acoustic calculation engines for room coefficients, reflections and RT60
"""

# Common constants (imported first for use by other modules)
from .acoustic_constants import (
    AcousticsConfig, DEFAULT_CONFIG, REVERB_BAND_FREQUENCIES, NUM_REVERB_BANDS,
    AIR_ABSORPTION_COEFFICIENTS, DEFAULT_SPEED_OF_SOUND, MIN_VOLUME
)
from .result_types import (
    RoomAcousticsError, InvalidDimensionError, InvalidCoefficientError,
    ResultStatus, CalculationResult
)
from .diagnostics import (
    DiagnosticKind, MaterialDiagnostic, DiagnosticsSink, NullDiagnosticsSink,
    CollectingDiagnosticsSink, LoggingDiagnosticsSink, configure_debug_logging
)
from .sanitizers import sanitize_coefficients, sanitize_dimensions
from .coefficient_resolver import CoefficientResolver, resolve_coefficients
from .reflection_calculator import ReflectionCoefficientCalculator, compute_reflection_coefficients
from .rt60_calculator import RT60Calculator, compute_rt60, format_rt60_report
from .room_acoustics import RoomAcousticProfile, calculate_room_acoustics

__all__ = [
    # Configuration
    'AcousticsConfig',
    'DEFAULT_CONFIG',
    'REVERB_BAND_FREQUENCIES',
    'NUM_REVERB_BANDS',
    'AIR_ABSORPTION_COEFFICIENTS',
    'DEFAULT_SPEED_OF_SOUND',
    'MIN_VOLUME',
    # Errors and results
    'RoomAcousticsError',
    'InvalidDimensionError',
    'InvalidCoefficientError',
    'ResultStatus',
    'CalculationResult',
    # Diagnostics
    'DiagnosticKind',
    'MaterialDiagnostic',
    'DiagnosticsSink',
    'NullDiagnosticsSink',
    'CollectingDiagnosticsSink',
    'LoggingDiagnosticsSink',
    'configure_debug_logging',
    # Core calculators
    'sanitize_coefficients',
    'sanitize_dimensions',
    'CoefficientResolver',
    'resolve_coefficients',
    'ReflectionCoefficientCalculator',
    'compute_reflection_coefficients',
    'RT60Calculator',
    'compute_rt60',
    'format_rt60_report',
    'RoomAcousticProfile',
    'calculate_room_acoustics'
]
