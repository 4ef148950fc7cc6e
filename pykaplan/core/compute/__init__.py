"""
Shared compute infrastructure for pykaplan.

Submodules:
    timing: Execution timing utilities
"""

from pykaplan.core.compute.timing import Timer

__all__ = [
    "Timer",
]
