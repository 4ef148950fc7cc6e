"""
Parameter payloads and record types for survival estimates.

Each dataclass is frozen. KMParams is carried inside a Result[P] envelope;
EventTable is the intermediate product of aggregation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from numpy.typing import NDArray


class Status(Enum):
    """Observation status for right-censored data."""

    EVENT = "event"
    CENSORED = "censored"


@dataclass(frozen=True)
class EventTimeRecord:
    """One row of the event-time table."""

    time: float
    n_events: int
    n_censored: int
    n_at_risk: int


@dataclass(frozen=True)
class EventTable:
    """Observations aggregated by distinct time.

    All arrays are index-aligned and ordered by ascending time.
    """

    time: NDArray                # (k,) distinct observed times
    n_events: NDArray            # (k,) events at each time
    n_censored: NDArray          # (k,) censorings at each time
    n_at_risk: NDArray           # (k,) subjects with time >= t

    def __len__(self) -> int:
        return len(self.time)

    def records(self) -> Iterator[EventTimeRecord]:
        for t, d, c, n in zip(self.time, self.n_events,
                              self.n_censored, self.n_at_risk):
            yield EventTimeRecord(
                time=float(t),
                n_events=int(d),
                n_censored=int(c),
                n_at_risk=int(n),
            )


@dataclass(frozen=True)
class KMParams:
    """Kaplan-Meier survivor function estimate.

    One entry per distinct observed time, censoring-only times included.
    """

    time: NDArray                # (k,) distinct observed times
    n_events: NDArray            # (k,) events at each time
    n_censored: NDArray          # (k,) censorings at each time
    n_at_risk: NDArray           # (k,) risk set size at each time
    survival: NDArray            # (k,) product-limit S(t)
    stderr: NDArray              # (k,) standard error of log S(t)
    n_observations: int          # total n
    n_events_total: int          # total events
    risk_set_exhausted: bool     # final risk set lost entirely to events
