"""
Public API for survival analysis.

    kaplan_meier(time, status) -> KMSolution
    confint(estimate, alpha) -> list of (lower, upper)

kaplan_meier() validates inputs, creates a SurvivalDesign, aggregates the
event-time table, runs the product-limit recurrence and wraps the Result
in a Solution.
"""

from __future__ import annotations

import warnings
from typing import Callable, Literal

from pykaplan.core.result import Result
from pykaplan.core.compute.timing import Timer
from pykaplan.core.validation import check_open_unit_interval
from pykaplan.survival.design import SurvivalDesign
from pykaplan.survival._aggregate import event_table
from pykaplan.survival._km import confidence_interval, kaplan_meier_fit
from pykaplan.survival.solution import KMSolution


NO_EVENTS_WARNING = "No events observed; survival is 1 at every time"


def kaplan_meier(time, status) -> KMSolution:
    """Kaplan-Meier survivor function estimation.

    Parameters
    ----------
    time : array-like
        Time to event or censoring. Non-negative.
    status : array-like
        Event indicator: True/1/Status.EVENT/'event' for an observed
        event, False/0/Status.CENSORED/'censored' for right censoring.

    Returns
    -------
    KMSolution
        One entry per distinct observed time. ``stderr`` is the standard
        error of log S(t).

    Raises
    ------
    InvalidInputError
        If the inputs are empty, of different lengths, contain negative
        times or unrecognised status values.
    """
    design = SurvivalDesign.for_survival(time, status)

    timer = Timer()
    timer.start()

    with timer.section('aggregate'):
        table = event_table(design.time, design.event)

    with timer.section('recurrence'):
        params = kaplan_meier_fit(table)

    timer.stop()

    warnings_list = []
    if params.n_events_total == 0:
        warnings_list.append(NO_EVENTS_WARNING)
        warnings.warn(NO_EVENTS_WARNING, UserWarning, stacklevel=2)

    result = Result(
        params=params,
        info={
            "method": "Kaplan-Meier",
            "n_times": len(table),
            "risk_set_exhausted": params.risk_set_exhausted,
        },
        timing=timer.result(),
        backend_name="cpu_km",
        warnings=tuple(warnings_list),
    )

    return KMSolution(_result=result)


def confint(
    estimate: KMSolution,
    alpha: float = 0.05,
    *,
    conf_type: Literal["log-log", "log", "plain"] = "log-log",
    quantile: Callable[[float], float] | None = None,
) -> list[tuple[float, float]]:
    """Pointwise confidence intervals for the survivor function.

    Parameters
    ----------
    estimate : KMSolution
        A finished Kaplan-Meier fit.
    alpha : float
        Significance level in (0, 1); coverage is 1 - alpha.
    conf_type : str
        "log-log" (default), "log", or "plain".
    quantile : callable or None
        Standard normal quantile function. Called once with 1 - alpha/2.
        Defaults to scipy.stats.norm.ppf.

    Returns
    -------
    list of (lower, upper)
        Index-aligned with ``estimate.times``. Both bounds are 1 where
        S(t) == 1 and 0 where S(t) == 0.

    Raises
    ------
    ValidationError
        If alpha is outside (0, 1) or conf_type is unknown.
    """
    alpha = check_open_unit_interval(alpha, "alpha")

    lower, upper = confidence_interval(
        estimate.survival, estimate.stderr,
        alpha=alpha,
        conf_type=conf_type,
        quantile=quantile,
    )
    return [(float(lo), float(hi)) for lo, hi in zip(lower, upper)]
