"""
Training parameters for linear models.

Defines the Parameter configuration handed to the training engine.
"""

import numbers
from typing import Optional, Sequence, Union

import numpy as np

from . import _arrays
from .types import InvalidArgumentError, SolverType

DEFAULT_MAX_ITERS = 1000
DEFAULT_P = 0.1

ArrayLike = Union[Sequence[float], np.ndarray]
SolverLike = Union[SolverType, int, str]


def _check_real(value, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgumentError(f"{name} must be a real number, got {value!r}")
    return float(value)


def _check_solver_type(value: SolverLike) -> SolverType:
    if value is None:
        raise InvalidArgumentError("solver type must not be None")
    if isinstance(value, SolverType):
        return value
    if isinstance(value, str):
        return SolverType.by_name(value)
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return SolverType.by_id(int(value))
    raise InvalidArgumentError(f"solver type must be a SolverType, got {value!r}")


class Parameter:
    """Settings for one training run of a linear model.

    Scalar settings are properties whose setters validate before assigning,
    so an instance never holds an out-of-range value. Array settings are
    copied on the way in and on the way out: callers never share storage
    with the instance.

    Attributes:
        solver_type: Solver used by the training engine
        C: Cost of constraint violation (C > 0), usually 1 to 1000
        eps: Stopping tolerance (eps > 0), usually 0.01
        max_iters: Iteration cap (max_iters > 0), default 1000
        p: Epsilon in the loss of epsilon-SVR (p >= 0), default 0.1
        init_sol: Initial solution for warm starts, or None

    Example:
        >>> param = Parameter(SolverType.L2R_LR, C=1.0, eps=0.01)
        >>> param.set_weights([2.0, 3.0], [1, 2])
        >>> param.get_weights()
        array([2., 3.])
    """

    def __init__(self,
                 solver_type: SolverLike,
                 C: float,
                 eps: float,
                 max_iters: int = DEFAULT_MAX_ITERS,
                 p: float = DEFAULT_P):
        """Create a parameter set.

        Raises:
            InvalidArgumentError: If any argument violates its constraint
        """
        self._weight = None
        self._weight_label = None
        self._ovr_rest_weights = None
        self._init_sol = None

        self.solver_type = solver_type
        self.C = C
        self.eps = eps
        self.max_iters = max_iters
        self.p = p

    # ------------------------------------------------------------------
    # Scalar settings
    # ------------------------------------------------------------------

    @property
    def solver_type(self) -> SolverType:
        return self._solver_type

    @solver_type.setter
    def solver_type(self, value: SolverLike):
        self._solver_type = _check_solver_type(value)

    @property
    def C(self) -> float:
        """Cost of constraints violation."""
        return self._C

    @C.setter
    def C(self, value: float):
        value = _check_real(value, "C")
        if not value > 0:
            raise InvalidArgumentError(f"C must be > 0, got {value}")
        self._C = value

    @property
    def eps(self) -> float:
        """Stopping criterion."""
        return self._eps

    @eps.setter
    def eps(self, value: float):
        value = _check_real(value, "eps")
        if not value > 0:
            raise InvalidArgumentError(f"eps must be > 0, got {value}")
        self._eps = value

    @property
    def max_iters(self) -> int:
        return self._max_iters

    @max_iters.setter
    def max_iters(self, value: int):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise InvalidArgumentError(f"max_iters must be an integer, got {value!r}")
        if value <= 0:
            raise InvalidArgumentError(f"max_iters must be > 0, got {value}")
        self._max_iters = int(value)

    @property
    def p(self) -> float:
        """Epsilon in the loss function of epsilon-SVR."""
        return self._p

    @p.setter
    def p(self, value: float):
        value = _check_real(value, "p")
        if not value >= 0:
            raise InvalidArgumentError(f"p must be >= 0, got {value}")
        self._p = value

    # ------------------------------------------------------------------
    # Class weights
    # ------------------------------------------------------------------

    def set_weights(self,
                    weights: ArrayLike,
                    weight_labels: Sequence[int],
                    ovr_rest_weights: Optional[ArrayLike] = None):
        """Change the penalty for some classes.

        The penalty of class ``weight_labels[i]`` is scaled by
        ``weights[i]``; classes not listed keep a factor of 1. Useful for
        unbalanced data or asymmetric misclassification cost.

        ``ovr_rest_weights[i]``, when given, scales the penalty of the
        "rest" side when class ``weight_labels[i]`` is trained one-vs-rest.

        All three fields are replaced together. Omitting ovr_rest_weights
        clears any previously stored rest weights.

        Args:
            weights: Penalty factor per listed class
            weight_labels: Class label per factor, same length as weights
            ovr_rest_weights: Optional rest-class factors, same length

        Raises:
            InvalidArgumentError: On a missing array or a length mismatch;
                the stored weights are left untouched
        """
        if weights is None:
            raise InvalidArgumentError("'weights' must not be None")
        if weight_labels is None:
            raise InvalidArgumentError("'weight_labels' must not be None")

        new_weight = _arrays.copy_floats(weights, "weights")
        new_label = _arrays.copy_labels(weight_labels, "weight_labels")
        if len(new_label) != len(new_weight):
            raise InvalidArgumentError(
                f"'weight_labels' must have same length as 'weights' "
                f"({len(new_label)} != {len(new_weight)})"
            )

        new_rest = None
        if ovr_rest_weights is not None:
            new_rest = _arrays.copy_floats(ovr_rest_weights, "ovr_rest_weights")
            if len(new_rest) != len(new_label):
                raise InvalidArgumentError(
                    f"'ovr_rest_weights' must have same length as 'weight_labels' "
                    f"({len(new_rest)} != {len(new_label)})"
                )

        self._weight = new_weight
        self._weight_label = new_label
        self._ovr_rest_weights = new_rest

    def clear_weights(self):
        """Drop all class weights so every class keeps a factor of 1."""
        self._weight = None
        self._weight_label = None
        self._ovr_rest_weights = None

    def get_weights(self) -> Optional[np.ndarray]:
        """Copy of the class penalty factors, or None if unset."""
        return _arrays.duplicate(self._weight)

    def get_ovr_rest_weights(self) -> Optional[np.ndarray]:
        """Copy of the one-vs-rest rest-class factors, or None if unset."""
        return _arrays.duplicate(self._ovr_rest_weights)

    def get_weight_labels(self) -> Optional[np.ndarray]:
        """Copy of the class labels the weights apply to, or None if unset."""
        return _arrays.duplicate(self._weight_label)

    @property
    def num_weights(self) -> int:
        return _arrays.length(self._weight)

    @property
    def num_ovr_rest_weights(self) -> int:
        return _arrays.length(self._ovr_rest_weights)

    # ------------------------------------------------------------------
    # Warm start
    # ------------------------------------------------------------------

    @property
    def init_sol(self) -> Optional[np.ndarray]:
        """Initial solution for the solver, or None.

        Only L2R_LR and L2R_L2LOSS_SVC use it (see
        ``SolverType.supports_init_sol``). No check is made here against
        the solver type or the number of features.
        """
        return _arrays.duplicate(self._init_sol)

    @init_sol.setter
    def init_sol(self, value: Optional[ArrayLike]):
        if value is None:
            self._init_sol = None
        else:
            self._init_sol = _arrays.copy_floats(value, "init_sol")

    # ------------------------------------------------------------------
    # Duplication and comparison
    # ------------------------------------------------------------------

    def copy(self) -> 'Parameter':
        """Return an independent duplicate.

        Every array, init_sol included, is copied, so changes to either
        instance never show up in the other.
        """
        clone = type(self)(self._solver_type, self._C, self._eps,
                           self._max_iters, self._p)
        clone._weight = _arrays.duplicate(self._weight)
        clone._weight_label = _arrays.duplicate(self._weight_label)
        clone._ovr_rest_weights = _arrays.duplicate(self._ovr_rest_weights)
        clone._init_sol = _arrays.duplicate(self._init_sol)
        return clone

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __eq__(self, other):
        if not isinstance(other, Parameter):
            return NotImplemented
        return (
            self._solver_type == other._solver_type
            and self._C == other._C
            and self._eps == other._eps
            and self._max_iters == other._max_iters
            and self._p == other._p
            and _arrays.equal(self._weight, other._weight)
            and _arrays.equal(self._weight_label, other._weight_label)
            and _arrays.equal(self._ovr_rest_weights, other._ovr_rest_weights)
            and _arrays.equal(self._init_sol, other._init_sol)
        )

    # Mutable, so not hashable
    __hash__ = None

    def __repr__(self):
        return (
            f"Parameter(solver={self._solver_type.name}, C={self._C}, "
            f"eps={self._eps}, max_iters={self._max_iters}, p={self._p}, "
            f"weights={self.num_weights})"
        )
