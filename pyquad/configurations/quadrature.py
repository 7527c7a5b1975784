"""Construction of nodes and weights for quadrature rules over the reference interval [-1, 1]."""

import functools
from typing import Any, Callable, Optional, Tuple

import numpy as np

from .. import options
from ..exceptions import ConvergenceError, InvalidArgumentError, NonmonotonicRootsError
from ..primitives import QuadratureRule
from ..utilities.basics import Array, StringRepresentation, validate_dtype, warn
from ..utilities.iteration import newton_iterator
from ..utilities.polynomials import legendre_p, legendre_pd, legendre_pd_diff


# define rule names used in descriptions and error messages
LEGENDRE = "Gauss-Legendre"
LOBATTO = "Gauss-Lobatto"
SIMPSON = "Composite Simpson"
SIMPSON_38 = "Composite Simpson 3/8"


class Quadrature(StringRepresentation):
    r"""Configuration for building nodes and weights of a quadrature rule over :math:`[-1, 1]`.

    Parameters
    ----------
    specification : `str`
        How to build nodes and weights. One of the following:

            - ``'legendre'`` - Gauss-Legendre rule, which exactly integrates polynomials of degree up to
              :math:`2n - 1`. Nodes are strictly interior to the interval. See :func:`gauss_legendre`.

            - ``'lobatto'`` - Gauss-Lobatto rule, which includes both endpoints and exactly integrates polynomials of
              degree up to :math:`2n - 3`. See :func:`gauss_lobatto`.

            - ``'simpson'`` - Composite Simpson rule with :math:`(n - 1) / 2` sub-intervals. See
              :func:`composite_simpson`.

            - ``'simpson_38'`` - Composite Simpson 3/8 rule with :math:`(n - 1) / 3` sub-intervals. See
              :func:`composite_simpson_38`.

        Both Gauss rules are well-behaved up to about :math:`n = 200`. For more nodes, a composite rule is usually a
        better choice.

    size : `int`
        The number of nodes, :math:`n`. Each specification places its own restrictions on this number, which are
        validated when the configuration is initialized.

    """

    _size: int
    _specification: str
    _builder: Callable[..., QuadratureRule]
    _description: str

    def __init__(self, specification: str, size: int) -> None:
        """Validate the specification and size and identify the builder."""
        specifications = {
            'legendre': (functools.partial(gauss_legendre), LEGENDRE, validate_legendre_size),
            'lobatto': (functools.partial(gauss_lobatto), LOBATTO, validate_lobatto_size),
            'simpson': (functools.partial(composite_simpson), SIMPSON, validate_simpson_size),
            'simpson_38': (functools.partial(composite_simpson_38), SIMPSON_38, validate_simpson_38_size),
        }

        # validate the configuration
        if specification not in specifications:
            raise ValueError(f"specification must be one of {list(specifications.keys())}.")
        self._builder, self._description, validate = specifications[specification]

        # initialize class attributes
        self._specification = specification
        self._size = validate(size)

    def __str__(self) -> str:
        """Format the configuration as a string."""
        description = f"the {self._size}-point {self._description} rule"
        return f"Configured to construct nodes and weights according to {description}."

    def _build(self, dtype: Optional[Any] = None) -> QuadratureRule:
        """Build nodes and weights."""
        return self._builder(self._size, dtype)


def gauss_legendre(n: int, dtype: Optional[Any] = None) -> QuadratureRule:
    r"""Compute nodes and weights of a Gauss-Legendre quadrature rule with a number of evaluations.

    Integration is over the interval :math:`[-1, 1]`. Gauss-Legendre quadrature maximizes the degree of exactly
    integrable polynomials, which is :math:`2n - 1` for :math:`n` nodes. Nodes are the roots of the Legendre polynomial
    :math:`P_n`, which are found with Newton's method, starting from the roots of the corresponding Chebyshev
    polynomial. Only half of the roots are computed. The others follow from symmetry.

    The rule is numerically well-behaved until about :math:`n = 200` and then becomes progressively less accurate. It is
    generally not a good idea to go much higher. A composite rule will be superior for large :math:`n`.

    Parameters
    ----------
    n : `int`
        Number of nodes, which must be at least ``1``.
    dtype : `dtype, optional`
        Data type of the returned nodes and weights. By default, :attr:`options.dtype` is used. Computation is always
        done in double precision.

    Returns
    -------
    `QuadratureRule`
        The nodes and weights, which can be unpacked with ``nodes, weights = gauss_legendre(n)``.

    Raises
    ------
    `InvalidArgumentError`
        If ``n`` is smaller than ``1``.
    `ConvergenceError`
        If Newton's method fails to converge for one of the roots.

    """
    n = validate_legendre_size(n)
    dtype = validate_dtype(dtype)
    return finalize(*build_legendre(n), LEGENDRE, dtype)


def gauss_lobatto(n: int, dtype: Optional[Any] = None) -> QuadratureRule:
    r"""Compute nodes and weights of a Gauss-Lobatto quadrature rule with a number of evaluations.

    Integration is over the interval :math:`[-1, 1]`. Gauss-Lobatto quadrature is preferable to Gauss-Legendre
    quadrature whenever the endpoints of the interval should explicitly be included. Subject to this constraint, it
    maximizes the degree of exactly integrable polynomials, which is :math:`2n - 3` for :math:`n` nodes. Interior nodes
    are the roots of :math:`P_{n - 1}'`, which are found with Newton's method starting from the asymptotic
    approximation of Parter (1999), "On the Legendre-Gauss-Lobatto Points and Weights."

    The rule is numerically well-behaved until about :math:`n = 200` and then becomes progressively less accurate.

    Parameters
    ----------
    n : `int`
        Number of nodes, which must be at least ``2``.
    dtype : `dtype, optional`
        Data type of the returned nodes and weights. By default, :attr:`options.dtype` is used. Computation is always
        done in double precision.

    Returns
    -------
    `QuadratureRule`
        The nodes and weights, which can be unpacked with ``nodes, weights = gauss_lobatto(n)``.

    Raises
    ------
    `InvalidArgumentError`
        If ``n`` is smaller than ``2``.
    `ConvergenceError`
        If Newton's method fails to converge for one of the roots.

    """
    n = validate_lobatto_size(n)
    dtype = validate_dtype(dtype)
    return finalize(*build_lobatto(n), LOBATTO, dtype)


def composite_simpson(n: int, dtype: Optional[Any] = None) -> QuadratureRule:
    r"""Compute nodes and weights of a composite Simpson quadrature rule with a number of evaluations.

    Integration is over the interval :math:`[-1, 1]`, which is split into :math:`(n - 1) / 2` sub-intervals with
    shared endpoints. A 3-point Simpson rule is applied to each sub-interval, which is exact for polynomials of degree
    three or less.

    Parameters
    ----------
    n : `int`
        Number of nodes, which must be odd and at least ``3``.
    dtype : `dtype, optional`
        Data type of the returned nodes and weights. By default, :attr:`options.dtype` is used.

    Returns
    -------
    `QuadratureRule`
        The nodes and weights, which can be unpacked with ``nodes, weights = composite_simpson(n)``.

    Raises
    ------
    `InvalidArgumentError`
        If ``n`` is even or smaller than ``3``.

    """
    n = validate_simpson_size(n)
    dtype = validate_dtype(dtype)
    return finalize(*build_composite(n, np.array([1, 4, 1]) / 3), SIMPSON, dtype)


def composite_simpson_38(n: int, dtype: Optional[Any] = None) -> QuadratureRule:
    r"""Compute nodes and weights of a composite Simpson 3/8 quadrature rule with a number of evaluations.

    Integration is over the interval :math:`[-1, 1]`, which is split into :math:`(n - 1) / 3` sub-intervals with
    shared endpoints. A 4-point Simpson 3/8 rule is applied to each sub-interval, which is exact for polynomials of
    degree three or less.

    Parameters
    ----------
    n : `int`
        Number of nodes. The number ``n - 1`` must be divisible by ``3`` and ``n`` must be at least ``4``.
    dtype : `dtype, optional`
        Data type of the returned nodes and weights. By default, :attr:`options.dtype` is used.

    Returns
    -------
    `QuadratureRule`
        The nodes and weights, which can be unpacked with ``nodes, weights = composite_simpson_38(n)``.

    Raises
    ------
    `InvalidArgumentError`
        If ``n - 1`` is not divisible by ``3`` or ``n`` is smaller than ``4``.

    """
    n = validate_simpson_38_size(n)
    dtype = validate_dtype(dtype)
    return finalize(*build_composite(n, 3 * np.array([1, 3, 3, 1]) / 8), SIMPSON_38, dtype)


def build_legendre(size: int) -> Tuple[Array, Array]:
    """Compute Gauss-Legendre nodes and weights in double precision."""
    nodes = np.zeros(size, np.float64)
    weights = np.zeros(size, np.float64)

    # the two smallest rules have closed forms
    if size == 1:
        weights[0] = 2
        return nodes, weights
    if size == 2:
        nodes[:] = [-np.sqrt(1 / 3), np.sqrt(1 / 3)]
        weights[:] = 1
        return nodes, weights

    # solve for the negative roots of P_n and mirror them
    last = size - 1
    evaluate = functools.partial(legendre_pd, size)
    for index in range((last + 1) // 2):
        initial = -np.cos((2 * index + 1) / (2 * last + 2) * np.pi)
        x = find_root(LEGENDRE, size, index, initial, evaluate)
        if index > 0 and not x > nodes[index - 1]:
            raise NonmonotonicRootsError(LEGENDRE, size, index)
        derivative = legendre_pd(size, x)[1]
        nodes[index], nodes[last - index] = x, -x
        weights[index] = weights[last - index] = 2 / ((1 - x**2) * derivative**2)

    # the middle root of an odd-sized rule is exactly zero
    if last % 2 == 0:
        derivative = legendre_pd(size, 0.0)[1]
        nodes[last // 2] = 0
        weights[last // 2] = 2 / derivative**2
    return nodes, weights


def build_lobatto(size: int) -> Tuple[Array, Array]:
    """Compute Gauss-Lobatto nodes and weights in double precision."""
    nodes = np.zeros(size, np.float64)
    weights = np.zeros(size, np.float64)

    # endpoints are fixed
    degree = last = size - 1
    scale = degree * (degree + 1)
    nodes[0], nodes[last] = -1, 1
    weights[0] = weights[last] = 2 / scale

    # interior nodes are the roots of P_{n - 1}', which are shared by P_n - P_{n - 2}
    evaluate = functools.partial(legendre_pd_diff, degree)
    for index in range(1, (last + 1) // 2):
        initial = -np.cos((index + 0.25) * np.pi / degree - 3 / (8 * degree * np.pi * (index + 0.25)))
        x = find_root(LOBATTO, size, index, initial, evaluate)
        if not x > nodes[index - 1]:
            raise NonmonotonicRootsError(LOBATTO, size, index)
        value = legendre_p(degree, x)
        nodes[index], nodes[last - index] = x, -x
        weights[index] = weights[last - index] = 2 / (scale * value**2)

    # the middle node of an odd-sized rule is exactly zero
    if last % 2 == 0:
        value = legendre_p(degree, 0.0)
        nodes[last // 2] = 0
        weights[last // 2] = 2 / (scale * value**2)
    return nodes, weights


def build_composite(size: int, pattern: Array) -> Tuple[Array, Array]:
    """Compute nodes and weights of a composite Newton-Cotes rule with equally-spaced nodes in double precision. The
    pattern holds the weights of a single sub-interval relative to the node spacing. Weights at shared sub-interval
    endpoints are summed.
    """
    points = pattern.size - 1
    intervals = (size - 1) // points
    spacing = 2 / (size - 1)

    # equally-spaced negative nodes are mirrored, and the middle node of an odd-sized rule is exactly zero
    half = size // 2
    nodes = np.zeros(size, np.float64)
    nodes[:half] = -1 + spacing * np.arange(half, dtype=np.float64)
    nodes[size - half:] = -nodes[:half][::-1]

    # accumulate weights sub-interval by sub-interval
    weights = np.zeros(size, np.float64)
    for interval in range(intervals):
        start = interval * points
        weights[start:start + points + 1] += spacing * pattern
    return nodes, weights


def find_root(name: str, size: int, index: int, initial: float, evaluate: Callable) -> float:
    """Refine an initial guess for a root with Newton's method, raising an error if it fails to converge."""
    x, stats = newton_iterator(initial, evaluate, options.newton_max_iterations, options.newton_tolerance_factor)
    if not stats.converged:
        raise ConvergenceError(name, size, index, stats.iterations)
    return x


def finalize(nodes: Array, weights: Array, name: str, dtype: Any) -> QuadratureRule:
    """Check that double precision weights sum to the length of the interval before converting nodes and weights to
    the requested data type.
    """
    total = weights.sum()
    if np.abs(total - 2) > options.weights_tol:
        warn(
            f"{name} weights for {nodes.size} nodes sum to {total}, which differs from 2 by more than "
            f"options.weights_tol = {options.weights_tol}."
        )
    return QuadratureRule(nodes.astype(dtype), weights.astype(dtype), name)


def validate_integer(name: str, size: Any) -> int:
    """Validate that a number of nodes is an integer."""
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise InvalidArgumentError(name, size, "must be an int")
    return int(size)


def validate_legendre_size(size: Any) -> int:
    """Validate the number of nodes in a Gauss-Legendre rule."""
    size = validate_integer(LEGENDRE, size)
    if size < 1:
        raise InvalidArgumentError(LEGENDRE, size, "must be at least 1")
    return size


def validate_lobatto_size(size: Any) -> int:
    """Validate the number of nodes in a Gauss-Lobatto rule."""
    size = validate_integer(LOBATTO, size)
    if size < 2:
        raise InvalidArgumentError(LOBATTO, size, "must be at least 2")
    return size


def validate_simpson_size(size: Any) -> int:
    """Validate the number of nodes in a composite Simpson rule."""
    size = validate_integer(SIMPSON, size)
    if size % 2 != 1 or size < 3:
        raise InvalidArgumentError(SIMPSON, size, "must be odd and at least 3")
    return size


def validate_simpson_38_size(size: Any) -> int:
    """Validate the number of nodes in a composite Simpson 3/8 rule."""
    size = validate_integer(SIMPSON_38, size)
    if (size - 1) % 3 != 0 or size < 4:
        condition = "minus one must be divisible by 3 and the number itself must be at least 4"
        raise InvalidArgumentError(SIMPSON_38, size, condition)
    return size
