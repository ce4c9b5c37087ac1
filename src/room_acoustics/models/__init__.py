"""
Room models for the room acoustics package
"""

from .room import (
    WallType, DimensionAxis, WALLS_ALIAS, SIDE_WALLS,
    WallKey, AxisKey, RoomDimensions, WallMaterialAssignment,
    CoefficientSet, ReflectionCoefficientSet, RT60Profile
)

__all__ = [
    'WallType',
    'DimensionAxis',
    'WALLS_ALIAS',
    'SIDE_WALLS',
    'WallKey',
    'AxisKey',
    'RoomDimensions',
    'WallMaterialAssignment',
    'CoefficientSet',
    'ReflectionCoefficientSet',
    'RT60Profile'
]
