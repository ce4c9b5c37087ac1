"""
Room acoustic profile - one-shot coefficient, reflection and RT60 calculation
"""

from dataclasses import dataclass
from typing import Optional, Mapping

import numpy as np

from ..data.materials import MaterialLibrary
from ..models.room import (
    CoefficientSet, ReflectionCoefficientSet, RoomDimensions, RT60Profile,
    WallMaterialAssignment
)
from .acoustic_constants import AcousticsConfig, DEFAULT_CONFIG
from .coefficient_resolver import CoefficientResolver
from .diagnostics import CollectingDiagnosticsSink, DiagnosticsSink
from .reflection_calculator import ReflectionCoefficientCalculator
from .result_types import CalculationResult, InvalidDimensionError
from .rt60_calculator import RT60Calculator
from .sanitizers import sanitize_dimensions


@dataclass
class RoomAcousticProfile:
    """Everything the reflection and reverberation generators need for one room"""
    dimensions: RoomDimensions
    coefficients: CoefficientSet
    reflection_coefficients: ReflectionCoefficientSet
    rt60: RT60Profile
    speed_of_sound: float

    @property
    def mean_rt60(self) -> float:
        return float(np.mean(self.rt60)) if len(self.rt60) else 0.0


def calculate_room_acoustics(dimensions: Optional[Mapping] = None,
                             materials: Optional[WallMaterialAssignment] = None,
                             speed_of_sound: Optional[float] = None,
                             config: Optional[AcousticsConfig] = None,
                             library: Optional[MaterialLibrary] = None,
                             sink: Optional[DiagnosticsSink] = None) -> CalculationResult[RoomAcousticProfile]:
    """
    Resolve materials and compute reflection coefficients and RT60 for a room

    Material fallbacks become result warnings (and are also forwarded to
    ``sink`` when one is given). Invalid dimensions produce a
    validation-failed result instead of an exception.
    """
    config = config or DEFAULT_CONFIG
    collector = CollectingDiagnosticsSink()

    try:
        sanitized_dimensions = sanitize_dimensions(dimensions)
        resolver = CoefficientResolver(library=library, config=config, sink=collector)
        coefficients = resolver.resolve(materials)
        if sink is not None:
            for event in collector.events:
                sink.emit(event)

        reflections = ReflectionCoefficientCalculator(config=config, library=library).compute(coefficients)
        rt60 = RT60Calculator(config=config, library=library).calculate_rt60(
            sanitized_dimensions, coefficients, speed_of_sound
        )
    except InvalidDimensionError as e:
        return CalculationResult.validation_failed(
            str(e),
            warnings=collector.messages,
            metadata={'parameter': e.name, 'value': e.value}
        )

    profile = RoomAcousticProfile(
        dimensions=sanitized_dimensions,
        coefficients=coefficients,
        reflection_coefficients=reflections,
        rt60=rt60,
        speed_of_sound=float(speed_of_sound if speed_of_sound is not None else config.speed_of_sound)
    )
    return CalculationResult.success(
        profile,
        warnings=collector.messages,
        metadata={'diagnostics': [event.to_dict() for event in collector.events]}
    )
