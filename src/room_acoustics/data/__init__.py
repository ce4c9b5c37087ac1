"""
Standard data libraries for room acoustics
"""

from .materials import (
    STANDARD_MATERIAL_DATA, MATERIAL_COEFFICIENTS,
    DEFAULT_LIBRARY, MaterialLibrary, calculate_nrc
)

__all__ = [
    'STANDARD_MATERIAL_DATA',
    'MATERIAL_COEFFICIENTS',
    'DEFAULT_LIBRARY',
    'MaterialLibrary',
    'calculate_nrc'
]
