"""Primitive data structures that hold quadrature rules."""

from typing import Any, Callable, Iterator

import numpy as np

from .utilities.basics import Array, StringRepresentation, format_number, format_table


class QuadratureRule(StringRepresentation):
    r"""Nodes and weights of a quadrature rule over the reference interval :math:`[-1, 1]`.

    Rules are returned by :func:`gauss_legendre`, :func:`gauss_lobatto`, :func:`composite_simpson`, and
    :func:`composite_simpson_38`. They can be unpacked into nodes and weights::

        nodes, weights = pyquad.gauss_legendre(5)

    so that :math:`\int_{-1}^1 f(x) dx \approx \sum_i w_i f(x_i)`. Integrals over another interval :math:`[a, b]`
    can be approximated by rescaling nodes to :math:`(b - a)(x + 1) / 2 + a` and weights to :math:`(b - a) w / 2`.

    Rules are immutable: both arrays are read-only.

    Attributes
    ----------
    nodes : `ndarray`
        Strictly increasing nodes, :math:`x`.
    weights : `ndarray`
        Weights, :math:`w`, which correspond to the nodes by position.
    name : `str`
        Description of the rule.

    """

    nodes: Array
    weights: Array
    name: str

    def __init__(self, nodes: Array, weights: Array, name: str) -> None:
        """Store read-only copies of the nodes and weights."""
        self.nodes = np.array(nodes, copy=True)
        self.weights = np.array(weights, copy=True)
        if self.nodes.shape != self.weights.shape or self.nodes.ndim != 1:
            raise ValueError("nodes and weights must be one-dimensional arrays of the same size.")
        self.nodes.flags.writeable = False
        self.weights.flags.writeable = False
        self.name = name

    @property
    def size(self) -> int:
        """Number of nodes."""
        return self.nodes.size

    @property
    def dtype(self) -> Any:
        """Data type of the nodes and weights."""
        return self.nodes.dtype

    def __iter__(self) -> Iterator[Array]:
        """Unpack the rule into nodes and weights."""
        return iter((self.nodes, self.weights))

    def __len__(self) -> int:
        """Defer to the number of nodes."""
        return self.size

    def __str__(self) -> str:
        """Format the nodes and weights as a string."""
        header = ["Index", "Node", "Weight"]
        data = [[i, format_number(x), format_number(w)] for i, (x, w) in enumerate(zip(self.nodes, self.weights))]
        return format_table(header, *data, title=f"{self.size}-Point {self.name} Rule")

    def integrate(self, function: Callable[[Array], Array]) -> Any:
        r"""Approximate the integral of a vectorized function over :math:`[-1, 1]`.

        Parameters
        ----------
        function : `callable`
            Function that accepts an array of nodes and returns an array of values of the same size.

        Returns
        -------
        `numeric`
            The weighted sum :math:`\sum_i w_i f(x_i)`.

        """
        values = np.asarray(function(self.nodes))
        if values.shape != self.nodes.shape:
            raise ValueError("function must return an array with the same shape as the nodes.")
        return self.weights @ values
