"""
Core infrastructure for pykaplan.

Shared abstractions used by the survival estimators.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities
"""

from pykaplan.core.result import Result
from pykaplan.core.exceptions import (
    PyKaplanError,
    ValidationError,
    DimensionError,
    InvalidInputError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyKaplanError",
    "ValidationError",
    "DimensionError",
    "InvalidInputError",
]
