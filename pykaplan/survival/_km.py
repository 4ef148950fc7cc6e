"""
Kaplan-Meier product-limit estimator.

- Product-limit survival estimate: S(t) = ∏(1 - d_j / n_j)
- Greenwood sum: Var(log S(t)) = Σ(d_j / (n_j * (n_j - d_j)))
- Confidence intervals via log-log (default), log, or plain transformation

``stderr`` throughout is the standard error of log S(t), i.e. the square
root of the Greenwood sum. The standard error of S(t) itself is
``survival * stderr``.

References:
    Kaplan, E. L., & Meier, P. (1958). Nonparametric estimation from
        incomplete observations. JASA, 53(282), 457-481.
    Kalbfleisch, J. D., & Prentice, R. L. (2002). The Statistical Analysis
        of Failure Time Data, 2nd ed., Section 1.4.
"""

from __future__ import annotations

import math
from typing import Callable

import numpy as np
from numpy.typing import NDArray
from scipy import stats

from pykaplan.core.exceptions import ValidationError
from pykaplan.survival._common import EventTable, KMParams


CONF_TYPES = ("log-log", "log", "plain")


def kaplan_meier_fit(table: EventTable) -> KMParams:
    """Run the product-limit and Greenwood recurrences over an event table.

    Parameters
    ----------
    table : EventTable
        Output of event_table(), ascending by time.

    Returns
    -------
    KMParams

    Notes
    -----
    When every subject at risk has an event (n_j == d_j) the Greenwood
    term is undefined. Survival is set to exactly 0 and the running sum
    to +inf, so ``stderr`` is inf from that time on. Since nobody is left
    at risk afterwards, this can only happen at the last time.
    """
    k = len(table)
    survival = np.empty(k, dtype=np.float64)
    stderr = np.empty(k, dtype=np.float64)

    survival_accum = 1.0
    variance_accum = 0.0
    exhausted = False

    for i in range(k):
        d = int(table.n_events[i])
        n = int(table.n_at_risk[i])

        if d > 0:
            if n > d:
                survival_accum *= 1.0 - d / n
                variance_accum += d / (n * (n - d))
            else:
                survival_accum = 0.0
                variance_accum = math.inf
                exhausted = True

        survival[i] = survival_accum
        stderr[i] = math.sqrt(variance_accum)

    return KMParams(
        time=table.time,
        n_events=table.n_events,
        n_censored=table.n_censored,
        n_at_risk=table.n_at_risk,
        survival=survival,
        stderr=stderr,
        n_observations=int(table.n_at_risk[0]) if k else 0,
        n_events_total=int(np.sum(table.n_events)),
        risk_set_exhausted=exhausted,
    )


def confidence_interval(
    survival: NDArray,
    stderr: NDArray,
    alpha: float = 0.05,
    conf_type: str = "log-log",
    quantile: Callable[[float], float] | None = None,
) -> tuple[NDArray, NDArray]:
    """Pointwise confidence bounds for S(t).

    Parameters
    ----------
    survival : S(t) values
    stderr : standard errors of log S(t)
    alpha : significance level; coverage is 1 - alpha
    conf_type : "log-log", "log", or "plain"
    quantile : standard normal quantile function, called once with
        1 - alpha/2. Defaults to scipy.stats.norm.ppf.

    Returns
    -------
    (lower, upper)
        Where S(t) == 1 both bounds are 1; where S(t) == 0 both are 0.

    Raises
    ------
    ValidationError
        If conf_type is not one of CONF_TYPES.
    """
    if conf_type not in CONF_TYPES:
        raise ValidationError(
            f"conf_type must be one of {', '.join(repr(c) for c in CONF_TYPES)}, "
            f"got '{conf_type}'"
        )

    if quantile is None:
        quantile = stats.norm.ppf
    q = float(quantile(1.0 - alpha / 2.0))

    survival = np.asarray(survival, dtype=np.float64)
    stderr = np.asarray(stderr, dtype=np.float64)

    # Degenerate points keep S itself as both bounds
    lower = survival.copy()
    upper = survival.copy()

    interior = (survival > 0.0) & (survival < 1.0)
    s = survival[interior]
    se = stderr[interior]

    if conf_type == "log-log":
        log_s = np.log(s)
        log_neg_log_s = np.log(-log_s)
        a = q * se / log_s
        lower[interior] = np.exp(-np.exp(log_neg_log_s - a))
        upper[interior] = np.exp(-np.exp(log_neg_log_s + a))

    elif conf_type == "log":
        log_s = np.log(s)
        lower[interior] = np.exp(log_s - q * se)
        upper[interior] = np.minimum(np.exp(log_s + q * se), 1.0)

    else:
        # se of S is S * se(log S)
        half_width = q * s * se
        lower[interior] = np.clip(s - half_width, 0.0, 1.0)
        upper[interior] = np.clip(s + half_width, 0.0, 1.0)

    return lower, upper
