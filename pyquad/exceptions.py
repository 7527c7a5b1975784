"""Quadrature-specific exceptions."""

from typing import Optional

from .utilities.basics import Error


class QuadratureError(Error):
    """Failed to construct nodes and weights for a quadrature rule."""

    _name: str
    _size: int

    def __init__(self, name: str, size: int) -> None:
        """Store the name of the rule and the requested number of nodes."""
        super().__init__()
        self._name = name
        self._size = size

    @property
    def size(self) -> int:
        """Requested number of nodes."""
        return self._size

    def __str__(self) -> str:
        """Supplement the error with the rule."""
        return f"{super().__str__()} Rule: {self._name}({self._size})."


class InvalidArgumentError(QuadratureError, ValueError):
    """The requested number of nodes is not supported by the quadrature rule."""

    _condition: str

    def __init__(self, name: str, size: int, condition: str) -> None:
        """Store the violated condition."""
        super().__init__(name, size)
        self._condition = condition

    def __str__(self) -> str:
        """Supplement the error with the violated condition."""
        return f"{super().__str__()} The number of nodes {self._condition}."


class ConvergenceError(QuadratureError):
    """Newton's method failed to converge to a root of a Legendre polynomial.

    Gauss rules are only well-behaved up to about 200 nodes. For more nodes, consider using a composite rule instead.

    """

    _index: Optional[int]
    _iterations: int

    def __init__(self, name: str, size: int, index: Optional[int], iterations: int) -> None:
        """Store the index of the root and the number of iterations."""
        super().__init__(name, size)
        self._index = index
        self._iterations = iterations

    @property
    def index(self) -> Optional[int]:
        """Index of the node whose root did not converge."""
        return self._index

    @property
    def iterations(self) -> int:
        """Number of Newton iterations that were taken."""
        return self._iterations

    def __str__(self) -> str:
        """Supplement the error with the failed root."""
        return f"{super().__str__()} Node index: {self._index}. Iterations: {self._iterations}."


class NonmonotonicRootsError(QuadratureError):
    """Roots found by Newton's method were not strictly increasing.

    This indicates a defect in polynomial evaluation or root-finding, not a problem with the requested rule.

    """

    _index: int

    def __init__(self, name: str, size: int, index: int) -> None:
        """Store the index of the offending root."""
        super().__init__(name, size)
        self._index = index

    @property
    def index(self) -> int:
        """Index of the node that was not greater than its predecessor."""
        return self._index

    def __str__(self) -> str:
        """Supplement the error with the offending root."""
        return f"{super().__str__()} Node index: {self._index}."
