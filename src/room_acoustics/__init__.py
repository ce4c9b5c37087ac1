"""
Room Acoustics - Wall absorption, early reflection and RT60 profiles for rectangular rooms

Computes per-wall, per-band absorption from named materials, a single
early-reflection coefficient per wall and a per-band reverberation time
for use by spatial-audio reflection and reverb generators.
"""

from .models import WallType, DimensionAxis, WALLS_ALIAS, SIDE_WALLS
from .data import DEFAULT_LIBRARY, MaterialLibrary
from .calculations import (
    AcousticsConfig, DEFAULT_CONFIG,
    RoomAcousticsError, InvalidDimensionError, InvalidCoefficientError,
    ResultStatus, CalculationResult,
    DiagnosticKind, MaterialDiagnostic, DiagnosticsSink, NullDiagnosticsSink,
    CollectingDiagnosticsSink, LoggingDiagnosticsSink, configure_debug_logging,
    sanitize_coefficients, sanitize_dimensions,
    CoefficientResolver, resolve_coefficients,
    ReflectionCoefficientCalculator, compute_reflection_coefficients,
    RT60Calculator, compute_rt60, format_rt60_report,
    RoomAcousticProfile, calculate_room_acoustics
)

__version__ = "1.0.0"

configure_debug_logging()

__all__ = [
    'WallType',
    'DimensionAxis',
    'WALLS_ALIAS',
    'SIDE_WALLS',
    'DEFAULT_LIBRARY',
    'MaterialLibrary',
    'AcousticsConfig',
    'DEFAULT_CONFIG',
    'RoomAcousticsError',
    'InvalidDimensionError',
    'InvalidCoefficientError',
    'ResultStatus',
    'CalculationResult',
    'DiagnosticKind',
    'MaterialDiagnostic',
    'DiagnosticsSink',
    'NullDiagnosticsSink',
    'CollectingDiagnosticsSink',
    'LoggingDiagnosticsSink',
    'configure_debug_logging',
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
