"""
Room geometry and surface enumerations for rectangular room acoustics
"""

import enum
from typing import Dict, Mapping, Optional, Union

import numpy as np


class WallType(enum.Enum):
    """Enum for the six surfaces of a rectangular room"""
    LEFT = "left"
    RIGHT = "right"
    FRONT = "front"
    BACK = "back"
    CEILING = "ceiling"
    FLOOR = "floor"

    @classmethod
    def coerce(cls, key: Union['WallType', str]) -> Optional['WallType']:
        """Map a WallType or its (case-insensitive) string value to a WallType, or None"""
        if isinstance(key, cls):
            return key
        if isinstance(key, str):
            try:
                return cls(key.strip().lower())
            except ValueError:
                return None
        return None


class DimensionAxis(enum.Enum):
    """Enum for the three room dimensions (meters)"""
    WIDTH = "width"
    HEIGHT = "height"
    DEPTH = "depth"

    @classmethod
    def coerce(cls, key: Union['DimensionAxis', str]) -> Optional['DimensionAxis']:
        """Map a DimensionAxis or its (case-insensitive) string value to a DimensionAxis, or None"""
        if isinstance(key, cls):
            return key
        if isinstance(key, str):
            try:
                return cls(key.strip().lower())
            except ValueError:
                return None
        return None


# Pseudo-key of a material assignment applying one material to all side walls
WALLS_ALIAS = "walls"

# Walls covered by WALLS_ALIAS; ceiling and floor are never included
SIDE_WALLS = (WallType.LEFT, WallType.RIGHT, WallType.FRONT, WallType.BACK)

WallKey = Union[WallType, str]
AxisKey = Union[DimensionAxis, str]

RoomDimensions = Dict[DimensionAxis, float]
WallMaterialAssignment = Mapping[WallKey, str]
CoefficientSet = Dict[WallType, np.ndarray]
ReflectionCoefficientSet = Dict[WallType, float]
RT60Profile = np.ndarray
