"""Public-facing objects."""

from . import exceptions, options
from .configurations.quadrature import (
    Quadrature, composite_simpson, composite_simpson_38, gauss_legendre, gauss_lobatto
)
from .construction import build_quadrature
from .primitives import QuadratureRule
from .version import __version__

__all__ = [
    'exceptions', 'options', 'Quadrature', 'composite_simpson', 'composite_simpson_38', 'gauss_legendre',
    'gauss_lobatto', 'build_quadrature', 'QuadratureRule', '__version__'
]
