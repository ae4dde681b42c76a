"""
Data types for the linparam interface.

This module defines the solver enumeration and the exception hierarchy.
Kept separate for easy extension and documentation.
"""

from enum import IntEnum


class ParameterError(Exception):
    """Base exception for linparam errors."""
    pass


class InvalidArgumentError(ParameterError, ValueError):
    """Raised when a constructor or setter receives an invalid value."""
    pass


class SolverType(IntEnum):
    """Solver types understood by the training engine.

    Values match the numeric solver ids used by liblinear model files and
    command-line tools, so ``SolverType(2)`` and ``SolverType.by_id(2)``
    both name ``L2R_L2LOSS_SVC``.
    """
    L2R_LR = 0               # L2-regularized logistic regression (primal)
    L2R_L2LOSS_SVC_DUAL = 1  # L2-regularized L2-loss SVC (dual)
    L2R_L2LOSS_SVC = 2       # L2-regularized L2-loss SVC (primal)
    L2R_L1LOSS_SVC_DUAL = 3  # L2-regularized L1-loss SVC (dual)
    MCSVM_CS = 4             # Crammer and Singer multi-class SVC
    L1R_L2LOSS_SVC = 5       # L1-regularized L2-loss SVC
    L1R_LR = 6               # L1-regularized logistic regression
    L2R_LR_DUAL = 7          # L2-regularized logistic regression (dual)
    L2R_L2LOSS_SVR = 11      # L2-regularized L2-loss SVR (primal)
    L2R_L2LOSS_SVR_DUAL = 12 # L2-regularized L2-loss SVR (dual)
    L2R_L1LOSS_SVR_DUAL = 13 # L2-regularized L1-loss SVR (dual)
    ONECLASS_SVM = 21        # One-class SVM (dual)

    @property
    def is_logistic_regression(self) -> bool:
        """Whether the solver produces probability estimates."""
        return self in _LOGISTIC_REGRESSION

    @property
    def is_support_vector_regression(self) -> bool:
        """Whether the solver fits a regression model using the p margin."""
        return self in _SUPPORT_VECTOR_REGRESSION

    @property
    def supports_init_sol(self) -> bool:
        """Whether the solver can be warm-started from an initial solution."""
        return self in _INIT_SOL_SOLVERS

    @classmethod
    def by_id(cls, solver_id: int) -> 'SolverType':
        """Look up a solver type by its numeric id.

        Raises:
            InvalidArgumentError: If no solver has this id
        """
        try:
            return cls(solver_id)
        except ValueError:
            raise InvalidArgumentError(f"unknown solver id: {solver_id!r}") from None

    @classmethod
    def by_name(cls, name: str) -> 'SolverType':
        """Look up a solver type by name, ignoring case.

        Raises:
            InvalidArgumentError: If no solver has this name
        """
        try:
            return cls[name.upper()]
        except KeyError:
            raise InvalidArgumentError(f"unknown solver name: {name!r}") from None


_LOGISTIC_REGRESSION = frozenset({
    SolverType.L2R_LR,
    SolverType.L1R_LR,
    SolverType.L2R_LR_DUAL,
})

_SUPPORT_VECTOR_REGRESSION = frozenset({
    SolverType.L2R_L2LOSS_SVR,
    SolverType.L2R_L2LOSS_SVR_DUAL,
    SolverType.L2R_L1LOSS_SVR_DUAL,
})

_INIT_SOL_SOLVERS = frozenset({
    SolverType.L2R_LR,
    SolverType.L2R_L2LOSS_SVC,
})
