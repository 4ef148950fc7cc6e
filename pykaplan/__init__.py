"""
pykaplan: Kaplan-Meier survivor function estimation for Python.

Product-limit estimates, Greenwood standard errors and pointwise
confidence intervals from right-censored time-to-event data.

Submodules:
    survival: Kaplan-Meier estimator and confidence intervals
    core: Result envelope, exceptions, validation, timing
"""

__version__ = "0.1.0"

from pykaplan import survival
from pykaplan.survival import kaplan_meier, confint

__all__ = [
    "__version__",
    "survival",
    "kaplan_meier",
    "confint",
]
