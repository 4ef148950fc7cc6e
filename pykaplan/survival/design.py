"""
SurvivalDesign: immutable container for right-censored observations.

Wraps time and event indicator. Validates inputs at construction time;
all downstream code trusts clean data.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from pykaplan.core.exceptions import InvalidInputError
from pykaplan.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
    check_non_negative,
)
from pykaplan.survival._common import Status


_STATUS_NAMES = {s.value: s is Status.EVENT for s in Status}


def _as_status_array(status) -> NDArray:
    """Convert status to an array without stringifying mixed sequences.

    numpy turns [True, "censored"] into a string array, so anything that is
    not already bool or numeric is kept as objects.
    """
    arr = np.asarray(status)
    if arr.dtype == bool or np.issubdtype(arr.dtype, np.number):
        return arr
    return np.asarray(status, dtype=object)


def _coerce_status(status) -> NDArray:
    """Map status values onto a boolean event indicator.

    Accepts booleans, 0/1 numbers, Status members and the strings
    'event' / 'censored'.
    """
    arr = np.asarray(status)

    if arr.dtype == bool:
        return arr.copy()

    if np.issubdtype(arr.dtype, np.number):
        valid = (arr == 0) | (arr == 1)
        if not np.all(valid):
            bad = np.unique(arr[~valid])
            raise InvalidInputError(
                f"status must contain only 0 and 1, "
                f"got unexpected values: {bad}",
                argument="status",
                n_invalid=int(np.sum(~valid)),
            )
        return arr == 1

    event = np.empty(arr.shape, dtype=bool)
    bad = []
    for i, value in enumerate(arr):
        if isinstance(value, Status):
            event[i] = value is Status.EVENT
        elif isinstance(value, (bool, np.bool_)):
            event[i] = bool(value)
        elif isinstance(value, str) and value.lower() in _STATUS_NAMES:
            event[i] = _STATUS_NAMES[value.lower()]
        elif isinstance(value, (int, np.integer, float, np.floating)) and value in (0, 1):
            event[i] = value == 1
        else:
            bad.append(value)

    if bad:
        raise InvalidInputError(
            f"status values must be event or censored, "
            f"got unexpected values: {bad[:5]}",
            argument="status",
            n_invalid=len(bad),
        )
    return event


@dataclass(frozen=True)
class SurvivalDesign:
    """Immutable survival data container.

    Parameters
    ----------
    time : NDArray
        Time to event or censoring. Non-negative and finite.
    event : NDArray
        Boolean event indicator: True = event observed, False = censored.
    """

    time: NDArray
    event: NDArray

    @classmethod
    def for_survival(cls, time, status) -> SurvivalDesign:
        """Create and validate survival data.

        Parameters
        ----------
        time : array-like
            Time to event or censoring.
        status : array-like
            Booleans, 0/1, Status members or 'event'/'censored' strings.

        Returns
        -------
        SurvivalDesign

        Raises
        ------
        InvalidInputError
            If inputs are empty, of different lengths, contain negative
            or non-finite times, or unrecognised status values.
        """
        time = check_array(time, "time", InvalidInputError).astype(np.float64)
        status_arr = _as_status_array(status)
        check_1d(time, "time", InvalidInputError)
        check_1d(status_arr, "status", InvalidInputError)

        check_min_samples(time, 1, "time", InvalidInputError)
        check_consistent_length(
            time, status_arr,
            names=("time", "status"),
            error=InvalidInputError,
        )
        check_finite(time, "time", InvalidInputError)
        check_non_negative(time, "time", InvalidInputError)

        event = _coerce_status(status_arr)

        return cls(time=time, event=event)

    @property
    def n(self) -> int:
        """Number of observations."""
        return len(self.time)

    @property
    def n_events(self) -> int:
        """Number of observed events."""
        return int(np.sum(self.event))

    @property
    def n_censored(self) -> int:
        """Number of censored observations."""
        return self.n - self.n_events
