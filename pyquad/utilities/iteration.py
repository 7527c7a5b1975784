"""Root-finding routines."""

from typing import Callable, Tuple

import numpy as np

from .basics import Evaluation, SolverStats


def newton_iterator(
        initial: float, evaluate: Callable[[float], Evaluation], max_iterations: int,
        tolerance_factor: float) -> Tuple[float, SolverStats]:
    """Refine an initial guess for a root with Newton's method in double precision.

    Iteration terminates once a step is no larger than the tolerance factor times the machine epsilon relative to the
    current value. The criterion collapses at a root of exactly zero, so such roots should be handled separately. If
    the maximum number of iterations is exhausted, the last value is returned along with statistics that indicate a
    failure to converge.
    """
    epsilon = np.finfo(np.float64).eps
    x = float(initial)
    iterations = evaluations = 0
    while iterations < max_iterations:
        value, derivative = evaluate(x)
        evaluations += 1
        step = value / derivative
        x -= step
        iterations += 1
        if abs(step) <= tolerance_factor * abs(x) * epsilon:
            return x, SolverStats(True, iterations, evaluations)
    return x, SolverStats(False, iterations, evaluations)
