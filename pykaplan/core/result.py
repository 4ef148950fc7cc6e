"""
Generic result container for pykaplan computations.

The Result class is the envelope the survival estimators return. It keeps
timing, diagnostics and warnings next to the estimate while letting each
estimator define its own parameter payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, degeneracies)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for survival computations.

    Type Parameters:
        P: The estimator-specific parameter payload type

    Attributes:
        params: Estimator payload (survival curve, standard errors, ...)
        info: Structured metadata (method, risk_set_exhausted, ...)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=KMParams(...),
        ...     info={'method': 'Kaplan-Meier', 'risk_set_exhausted': False},
        ...     timing={'total_seconds': 0.001, 'aggregate': 0.0004},
        ...     backend_name='cpu_km'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
