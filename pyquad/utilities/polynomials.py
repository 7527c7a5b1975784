r"""Evaluation of Legendre polynomials and their derivatives in double precision.

Values are computed with the three-term recurrence

.. math:: (k + 1) P_{k + 1}(x) = (2k + 1) x P_k(x) - k P_{k - 1}(x),

and derivatives with :math:`P_{k + 1}'(x) = P_{k - 1}'(x) + (2k + 1) P_k(x)`. Inputs are coerced to Python floats so
that the recurrence is always carried out in double precision, regardless of the type in which results will
eventually be stored.

"""

from .basics import Evaluation


def legendre_p(degree: int, x: float) -> float:
    """Evaluate the Legendre polynomial of a degree at a point."""
    validate_degree(degree)
    x = float(x)
    if degree == 0:
        return 1.0
    if degree == 1:
        return x

    previous, current = 1.0, x
    for k in range(1, degree):
        previous, current = current, ((2 * k + 1) * x * current - k * previous) / (k + 1)
    return current


def legendre_pd(degree: int, x: float) -> Evaluation:
    """Evaluate the Legendre polynomial of a degree and its first derivative at a point."""
    validate_degree(degree)
    x = float(x)
    if degree == 0:
        return 1.0, 0.0
    if degree == 1:
        return x, 1.0

    previous, current = 1.0, x
    previous_derivative, current_derivative = 0.0, 1.0
    for k in range(1, degree):
        previous, current = current, ((2 * k + 1) * x * current - k * previous) / (k + 1)
        previous_derivative, current_derivative = current_derivative, previous_derivative + (2 * k + 1) * previous
    return current, current_derivative


def legendre_pd_diff(degree: int, x: float) -> Evaluation:
    r"""Evaluate :math:`P_{n + 1} - P_{n - 1}` and its first derivative at a point, where :math:`n` is the degree.

    The difference is proportional to :math:`(x^2 - 1) P_n'(x)`, so its interior roots are the extrema of :math:`P_n`.
    It is better conditioned for Newton's method than :math:`P_n'` itself.
    """
    validate_degree(degree, minimum=1)
    x = float(x)

    # evaluate up to P_{n - 1} and P_n, along with their derivatives
    previous, current = 1.0, x
    previous_derivative, current_derivative = 0.0, 1.0
    for k in range(1, degree):
        previous, current = current, ((2 * k + 1) * x * current - k * previous) / (k + 1)
        previous_derivative, current_derivative = current_derivative, previous_derivative + (2 * k + 1) * previous

    # take one more step to P_{n + 1}
    following = ((2 * degree + 1) * x * current - degree * previous) / (degree + 1)
    following_derivative = previous_derivative + (2 * degree + 1) * current
    return following - previous, following_derivative - previous_derivative


def validate_degree(degree: int, minimum: int = 0) -> None:
    """Validate the degree of a Legendre polynomial or of a difference of them."""
    if not isinstance(degree, int) or degree < minimum:
        raise ValueError(f"degree must be an int of at least {minimum}.")
