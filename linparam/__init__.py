"""
linparam - Training parameters for linear classifiers and regressors

Validated, copy-safe configuration objects that capture everything a
liblinear-style training engine needs to know about a run: solver type,
regularization strength, stopping tolerance, iteration cap, class weights
and an optional warm-start vector.

Example:
    >>> from linparam import Parameter, SolverType
    >>> 
    >>> param = Parameter(SolverType.L2R_LR, C=1.0, eps=0.01)
    >>> param.set_weights([2.0, 3.0], [1, 2])
    >>> 
    >>> # Warm start from a previous solution
    >>> param.init_sol = [0.0, 0.5, -0.5]
    >>>
    >>> # Independent duplicate for a second run
    >>> other = param.copy()
    >>> other.C = 10.0
    >>> param.C
    1.0
"""

__version__ = "1.0.0"

# Import public API
from .parameter import Parameter, DEFAULT_MAX_ITERS, DEFAULT_P
from .types import (
    SolverType,
    ParameterError,
    InvalidArgumentError,
)

# Public API
__all__ = [
    # Configuration
    "Parameter",
    "DEFAULT_MAX_ITERS",
    "DEFAULT_P",
    
    # Types
    "SolverType",
    
    # Exceptions
    "ParameterError",
    "InvalidArgumentError",
    
    # Utilities
    "version",
]


def version() -> str:
    """Get linparam version string.
    
    Returns:
        Version string (e.g., "1.0.0")
    """
    return __version__
