"""General functionality."""

from .basics import (
    output, warn, format_seconds, format_number, format_table, structure_matrices, validate_dtype,
    SolverStats, StringRepresentation, Error
)
from .iteration import newton_iterator
from .polynomials import legendre_p, legendre_pd, legendre_pd_diff
