"""
Exception hierarchy for pykaplan.

All exceptions inherit from PyKaplanError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyKaplanError(Exception):
    """Base exception for all pykaplan errors."""
    pass


class ValidationError(PyKaplanError):
    """
    Input validation failed.

    Raised when user-provided arguments fail validation checks
    (confidence level, interval type, evaluation times).
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class InvalidInputError(ValidationError, ValueError):
    """
    Observations cannot be turned into an event-time table.

    Raised before aggregation when the time and status sequences are
    empty, differ in length, contain negative or non-finite times, or
    contain status values outside {event, censored}.

    Attributes:
        argument: Name of the offending argument ('time' or 'status')
        n_invalid: Number of offending entries, if counted
    """

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        n_invalid: int | None = None
    ):
        super().__init__(message)
        self.argument = argument
        self.n_invalid = n_invalid
