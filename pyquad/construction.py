"""Data construction."""

import time
from typing import Any, Optional

from .configurations.quadrature import Quadrature
from .utilities.basics import RecArray, format_seconds, output, structure_matrices, validate_dtype


def build_quadrature(quadrature: Quadrature, dtype: Optional[Any] = None) -> RecArray:
    r"""Build nodes and weights for integration over the reference interval :math:`[-1, 1]`.

    This function structures the rule described by a :class:`Quadrature` configuration as a record array, which can be
    convenient when nodes and weights are stored alongside other data.

    Parameters
    ----------
    quadrature : `Quadrature`
        :class:`Quadrature` configuration for how to build nodes and weights.
    dtype : `dtype, optional`
        Data type of the nodes and weights. By default, :attr:`options.dtype` is used.

    Returns
    -------
    `recarray`
        Nodes and weights for integration. Fields:

            - **nodes** : (`numeric`) - Quadrature nodes, :math:`x`.

            - **weights** : (`numeric`) - Quadrature weights, :math:`w`.

    """
    if not isinstance(quadrature, Quadrature):
        raise TypeError("quadrature must be a Quadrature instance.")
    dtype = validate_dtype(dtype)

    # build the rule
    output(f"Constructing nodes and weights with the {quadrature._size}-point {quadrature._description} rule ...")
    start_time = time.time()
    rule = quadrature._build(dtype)
    output(f"Constructed {rule.size} nodes and weights after {format_seconds(time.time() - start_time)}.")
    return structure_matrices({
        'nodes': (rule.nodes, dtype),
        'weights': (rule.weights, dtype)
    })
