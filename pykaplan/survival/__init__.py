"""
Survival analysis.

Public API:
    kaplan_meier(time, status) -> KMSolution
    confint(estimate, alpha=0.05) -> list[tuple[float, float]]
"""

from pykaplan.survival._common import EventTimeRecord, KMParams, Status
from pykaplan.survival.solution import KMSolution
from pykaplan.survival.solvers import confint, kaplan_meier

__all__ = [
    "kaplan_meier",
    "confint",
    "KMSolution",
    "KMParams",
    "EventTimeRecord",
    "Status",
]
