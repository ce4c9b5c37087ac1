"""
Standardized result and error types for room acoustics calculations
Ensures consistent return patterns across the calculation system
"""

from typing import Generic, TypeVar, Optional, List, Any
from dataclasses import dataclass
from enum import Enum

T = TypeVar('T')


class RoomAcousticsError(Exception):
    """Base class for errors raised by the room acoustics calculators"""


class InvalidDimensionError(RoomAcousticsError, ValueError):
    """A room dimension or speed of sound is negative, non-finite or not a number"""

    def __init__(self, name: str, value: Any, reason: str):
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value for '{name}': {value!r} ({reason})")


class InvalidCoefficientError(RoomAcousticsError, ValueError):
    """A wall's absorption vector does not match the configured band layout"""

    def __init__(self, wall: str, reason: str):
        self.wall = wall
        self.reason = reason
        super().__init__(f"Invalid absorption coefficients for wall '{wall}': {reason}")


class ResultStatus(Enum):
    """Enumeration of possible result statuses"""
    SUCCESS = "success"
    VALIDATION_FAILED = "validation_failed"


@dataclass
class CalculationResult(Generic[T]):
    """
    Standardized result wrapper for room acoustics operations

    Fallback decisions taken along the way (unknown materials, undefined
    walls) are carried as warnings next to the data.
    """
    status: ResultStatus
    data: Optional[T] = None
    error_message: Optional[str] = None
    warnings: List[str] = None
    metadata: Optional[dict] = None

    def __post_init__(self):
        if self.warnings is None:
            self.warnings = []
        if self.metadata is None:
            self.metadata = {}

    @property
    def is_success(self) -> bool:
        """Check if the operation was successful"""
        return self.status == ResultStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        """Check if the operation failed"""
        return self.status == ResultStatus.VALIDATION_FAILED

    @property
    def has_warnings(self) -> bool:
        """Check if there are warnings"""
        return len(self.warnings) > 0

    @classmethod
    def success(cls, data: T, warnings: List[str] = None, metadata: dict = None) -> 'CalculationResult[T]':
        """Create a successful result"""
        return cls(
            status=ResultStatus.SUCCESS,
            data=data,
            warnings=warnings or [],
            metadata=metadata or {}
        )

    @classmethod
    def validation_failed(cls, error_message: str, warnings: List[str] = None, metadata: dict = None) -> 'CalculationResult[T]':
        """Create a validation failed result"""
        return cls(
            status=ResultStatus.VALIDATION_FAILED,
            error_message=error_message,
            warnings=warnings or [],
            metadata=metadata or {}
        )
