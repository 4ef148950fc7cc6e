"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection
    - check_finite: NaN/Inf detection
    - check_non_negative: negative value detection
    - check_ndim / check_1d: dimensionality checks
    - check_consistent_length: multi-array length matching
    - check_min_samples: minimum sample count
    - check_open_unit_interval: scalar in (0, 1)
    - error= override on each validator
"""

import numpy as np
import pytest

from pykaplan.core.exceptions import DimensionError, InvalidInputError, ValidationError
from pykaplan.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
    check_ndim,
    check_non_negative,
    check_open_unit_interval,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "time")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64

    def test_float32_preserved(self):
        result = check_array(np.array([1.0, 2.0], dtype=np.float32), "time")
        assert result.dtype == np.float32

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "time")

    def test_mixed_types_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([1, "a", None], "time")

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError):
            check_array([[1, 2], [3]], "time")

    def test_custom_error_class(self):
        with pytest.raises(InvalidInputError, match="time"):
            check_array(["a"], "time", InvalidInputError)


# ═══════════════════════════════════════════════════════════════════════
# check_finite / check_non_negative
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([0.0, 1.0, 2.0]), "time")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "time")

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="2 Inf"):
            check_finite(np.array([np.inf, -np.inf, 1.0]), "time")


class TestCheckNonNegative:

    def test_zero_allowed(self):
        check_non_negative(np.array([0.0, 3.0]), "time")

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="non-negative"):
            check_non_negative(np.array([1.0, -2.0]), "time")

    def test_message_reports_count_and_min(self):
        with pytest.raises(ValidationError, match=r"2 negative.*min=-3"):
            check_non_negative(np.array([-1.0, -3.0, 4.0]), "time")


# ═══════════════════════════════════════════════════════════════════════
# Dimensions
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNdim:

    def test_1d_passes(self):
        check_1d(np.zeros(3), "time")

    def test_2d_rejected(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((3, 2)), "time")

    def test_ndim_custom(self):
        check_ndim(np.zeros((2, 2, 2)), 3, "cube")


class TestCheckConsistentLength:

    def test_same_length_passes(self):
        check_consistent_length(np.zeros(3), np.ones(3), names=("time", "status"))

    def test_mismatch_rejected(self):
        with pytest.raises(DimensionError, match="time=3, status=2"):
            check_consistent_length(np.zeros(3), np.ones(2), names=("time", "status"))

    def test_single_array_passes(self):
        check_consistent_length(np.zeros(3), names=("time",))

    def test_names_count_mismatch(self):
        with pytest.raises(ValueError, match="must match number of names"):
            check_consistent_length(np.zeros(3), np.zeros(3), names=("time",))

    def test_custom_error_class(self):
        with pytest.raises(InvalidInputError):
            check_consistent_length(
                np.zeros(3), np.ones(2),
                names=("time", "status"),
                error=InvalidInputError,
            )


class TestCheckMinSamples:

    def test_enough(self):
        check_min_samples(np.zeros(1), 1, "time")

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="at least 1"):
            check_min_samples(np.zeros(0), 1, "time")


# ═══════════════════════════════════════════════════════════════════════
# check_open_unit_interval
# ═══════════════════════════════════════════════════════════════════════


class TestCheckOpenUnitInterval:

    @pytest.mark.parametrize("value", [1e-6, 0.05, 0.5, 0.999])
    def test_inside(self, value):
        assert check_open_unit_interval(value, "alpha") == pytest.approx(value)

    @pytest.mark.parametrize("value", [0.0, 1.0, -0.1, 1.5])
    def test_outside(self, value):
        with pytest.raises(ValidationError, match="alpha must be in"):
            check_open_unit_interval(value, "alpha")

    def test_non_numeric(self):
        with pytest.raises(ValidationError, match="real number"):
            check_open_unit_interval("0.05x", "alpha")

    def test_returns_python_float(self):
        assert isinstance(check_open_unit_interval(np.float32(0.1), "alpha"), float)
