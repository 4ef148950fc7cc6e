"""
Solution wrapper for Kaplan-Meier results.

KMSolution wraps a Result[KMParams] and exposes user-friendly properties
with an R-style summary() method.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from pykaplan.core.result import Result
from pykaplan.core.validation import check_array, check_finite, check_non_negative
from pykaplan.survival._common import EventTable, EventTimeRecord, KMParams


class KMSolution:
    """Kaplan-Meier survivor function estimate.

    Immutable: every array property is a read-only view of the payload.
    """

    __slots__ = ('_result',)

    def __init__(self, _result: Result[KMParams]) -> None:
        for arr in (_result.params.time, _result.params.n_events,
                    _result.params.n_censored, _result.params.n_at_risk,
                    _result.params.survival, _result.params.stderr):
            arr.flags.writeable = False
        self._result = _result

    # -- Properties delegating to KMParams --

    @property
    def params(self) -> KMParams:
        return self._result.params

    @property
    def times(self):
        """Distinct observed times, ascending."""
        return self._result.params.time

    @property
    def n_events(self):
        """Number of events at each time."""
        return self._result.params.n_events

    @property
    def n_censored(self):
        """Number censored at each time."""
        return self._result.params.n_censored

    @property
    def n_at_risk(self):
        """Number of subjects with time >= each time."""
        return self._result.params.n_at_risk

    @property
    def survival(self):
        """S(t) at each time."""
        return self._result.params.survival

    @property
    def stderr(self):
        """Standard error of log S(t) (square root of the Greenwood sum)."""
        return self._result.params.stderr

    @property
    def greenwood_se(self):
        """Greenwood standard error of S(t) itself."""
        # S == 0 with infinite stderr is 0 * inf; report inf there
        with np.errstate(invalid='ignore'):
            se = self.survival * self.stderr
        return np.where(np.isinf(self.stderr), np.inf, se)

    @property
    def n_observations(self) -> int:
        return self._result.params.n_observations

    @property
    def n_events_total(self) -> int:
        return self._result.params.n_events_total

    @property
    def risk_set_exhausted(self) -> bool:
        return self._result.params.risk_set_exhausted

    @property
    def records(self) -> list[EventTimeRecord]:
        """The event-time table as a list of records."""
        p = self._result.params
        table = EventTable(
            time=p.time, n_events=p.n_events,
            n_censored=p.n_censored, n_at_risk=p.n_at_risk,
        )
        return list(table.records())

    @property
    def median_survival(self) -> float | None:
        """Median survival time (smallest t where S(t) <= 0.5)."""
        idx = self.survival <= 0.5
        if not idx.any():
            return None
        return float(self.times[idx][0])

    @property
    def info(self) -> dict:
        return self._result.info

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def timing(self):
        return self._result.timing

    # -- Queries --

    def confint(
        self,
        alpha: float = 0.05,
        *,
        conf_type: str = "log-log",
        quantile: Callable[[float], float] | None = None,
    ) -> list[tuple[float, float]]:
        """Pointwise (lower, upper) bounds for S(t), one pair per time.

        See pykaplan.survival.confint.
        """
        from pykaplan.survival.solvers import confint
        return confint(self, alpha, conf_type=conf_type, quantile=quantile)

    def survival_at(self, t):
        """Evaluate the right-continuous step function S at arbitrary times.

        S is 1 before the first observed time and keeps its last value
        after the final one.

        Parameters
        ----------
        t : float or array-like
            Non-negative evaluation times.

        Returns
        -------
        float for scalar input, otherwise an NDArray of the same shape.
        """
        t_arr = check_array(t, "t")
        check_finite(t_arr, "t")
        check_non_negative(t_arr, "t")

        idx = np.searchsorted(self.times, t_arr, side="right") - 1
        out = np.where(
            idx >= 0,
            self.survival[np.clip(idx, 0, None)],
            1.0,
        )
        if out.ndim == 0:
            return float(out)
        return out

    def summary(self, alpha: float = 0.05) -> str:
        """R-style summary of Kaplan-Meier fit."""
        lines = []
        lines.append("Call: kaplan_meier()")
        lines.append("")
        lines.append(
            f"  n={self.n_observations}, "
            f"events={self.n_events_total}"
        )
        lines.append("")

        median = self.median_survival
        median_str = f"{median:.4g}" if median is not None else "NA"
        lines.append(f"  median survival = {median_str}")
        lines.append("")

        bounds = self.confint(alpha)
        ci_pct = f"{100 * (1 - alpha):g}"
        lines.append(
            f"  {'time':>8s}  {'n.risk':>8s}  {'n.event':>8s}  "
            f"{'n.censor':>8s}  {'survival':>10s}  {'std.err':>10s}  "
            f"{'lower ' + ci_pct + '%':>10s}  {'upper ' + ci_pct + '%':>10s}"
        )

        # Show up to 20 rows
        m = len(self.times)
        show = min(m, 20)
        for i in range(show):
            lo, hi = bounds[i]
            lines.append(
                f"  {self.times[i]:8.4g}  {self.n_at_risk[i]:8d}  "
                f"{self.n_events[i]:8d}  {self.n_censored[i]:8d}  "
                f"{self.survival[i]:10.6f}  {self.stderr[i]:10.6f}  "
                f"{lo:10.6f}  {hi:10.6f}"
            )
        if m > 20:
            lines.append(f"  ... ({m - 20} more rows)")

        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self.times)

    def __repr__(self) -> str:
        return (
            f"KMSolution(n={self.n_observations}, "
            f"events={self.n_events_total}, "
            f"median={self.median_survival})"
        )
