"""
Event-time table construction.

Collapses per-subject (time, event) observations into one row per
distinct time with event, censoring and risk-set counts. The risk set at
t is the number of subjects with time >= t, obtained from a single
backward cumulative sum of the per-time removals.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pykaplan.survival._common import EventTable


def event_table(time: NDArray, event: NDArray) -> EventTable:
    """Aggregate observations by distinct time.

    Parameters
    ----------
    time : NDArray
        (n,) validated non-negative times.
    event : NDArray
        (n,) boolean event indicator.

    Returns
    -------
    EventTable
        Ascending distinct times. Censoring-only times are kept: they
        carry no survival drop but shrink later risk sets.
    """
    # Sorted distinct times plus each subject's slot among them
    distinct, slot = np.unique(time, return_inverse=True)
    slot = slot.ravel()
    k = len(distinct)

    n_events = np.bincount(slot[event], minlength=k).astype(np.int64)
    n_censored = np.bincount(slot[~event], minlength=k).astype(np.int64)

    # Subjects leaving at or after t, accumulated from the last time back
    removed = n_events + n_censored
    n_at_risk = np.cumsum(removed[::-1])[::-1]

    return EventTable(
        time=distinct,
        n_events=n_events,
        n_censored=n_censored,
        n_at_risk=n_at_risk,
    )
