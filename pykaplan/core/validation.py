"""
Input validation utilities for pykaplan.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages

Every validator takes an ``error`` class so that callers at the observation
boundary can raise InvalidInputError while argument checks elsewhere raise
plain ValidationError.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pykaplan.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
    error: type[ValidationError] = ValidationError,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages
        error: Exception class to raise

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        error: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise error(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise error(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise error(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(
    array: NDArray[np.floating[Any]],
    name: str,
    error: type[ValidationError] = ValidationError,
) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        error: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise error(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_non_negative(
    array: NDArray[np.floating[Any]],
    name: str,
    error: type[ValidationError] = ValidationError,
) -> None:
    """
    Verify every entry is >= 0.

    Raises:
        error: If any entry is negative
    """
    negative = array < 0
    if np.any(negative):
        n_bad = int(np.sum(negative))
        raise error(
            f"{name}: must be non-negative, got {n_bad} negative value(s) "
            f"(min={float(np.min(array))})"
        )


def check_ndim(
    array: NDArray[Any],
    ndim: int,
    name: str,
    error: type[ValidationError] = DimensionError,
) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        error: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise error(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(
    array: NDArray[Any],
    name: str,
    error: type[ValidationError] = DimensionError,
) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name, error)


def check_consistent_length(
    *arrays: NDArray[Any],
    names: tuple[str, ...],
    error: type[ValidationError] = DimensionError,
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)
        error: Exception class to raise on mismatch

    Raises:
        ValueError: If number of names doesn't match number of arrays
        error: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise error(f"Inconsistent lengths: {details}")


def check_min_samples(
    array: NDArray[Any],
    min_samples: int,
    name: str,
    error: type[ValidationError] = ValidationError,
) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        error: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise error(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_open_unit_interval(value: float, name: str) -> float:
    """
    Verify a scalar lies strictly between 0 and 1.

    Used for significance levels, where both endpoints make the normal
    quantile infinite.

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not a real number in (0, 1)
    """
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name}: expected a real number, got {value!r}") from e

    if not 0.0 < value < 1.0:
        raise ValidationError(f"{name} must be in (0, 1), got {value}")
    return value
