"""Tests of Legendre polynomial evaluation."""

from typing import Any, Callable

import numpy as np
import pytest
import scipy.special
from numpy.polynomial import Legendre

from pyquad.utilities.polynomials import legendre_p, legendre_pd, legendre_pd_diff


POINTS = [-1.0, -0.83, -0.5, -0.1, 0.0, 0.2, 0.61, 0.97, 1.0]


@pytest.mark.parametrize('degree', [
    pytest.param(0, id="constant"),
    pytest.param(1, id="linear"),
    pytest.param(2, id="quadratic"),
    pytest.param(5, id="quintic"),
    pytest.param(12, id="degree 12"),
    pytest.param(30, id="degree 30"),
])
def test_values_and_derivatives(degree: int) -> None:
    """Test that values agree with SciPy and that derivatives agree with NumPy's Legendre series."""
    derivative = Legendre.basis(degree).deriv()
    for x in POINTS:
        value = legendre_p(degree, x)
        pd_value, pd_derivative = legendre_pd(degree, x)
        np.testing.assert_allclose(value, scipy.special.eval_legendre(degree, x), rtol=0, atol=1e-13)
        np.testing.assert_allclose(pd_value, value, rtol=0, atol=0)
        np.testing.assert_allclose(pd_derivative, derivative(x), rtol=1e-12, atol=1e-12)


@pytest.mark.parametrize('degree', [
    pytest.param(1, id="linear"),
    pytest.param(2, id="quadratic"),
    pytest.param(7, id="degree 7"),
    pytest.param(20, id="degree 20"),
])
def test_differences(degree: int) -> None:
    """Test that the difference between neighboring Legendre polynomials and its derivative agree with NumPy's Legendre
    series, and that the difference vanishes at the extrema of the middle polynomial.
    """
    difference = Legendre.basis(degree + 1) - Legendre.basis(degree - 1)
    for x in POINTS:
        value, derivative = legendre_pd_diff(degree, x)
        np.testing.assert_allclose(value, difference(x), rtol=1e-12, atol=1e-12)
        np.testing.assert_allclose(derivative, difference.deriv()(x), rtol=1e-12, atol=1e-12)
    for root in Legendre.basis(degree).deriv().roots():
        np.testing.assert_allclose(legendre_pd_diff(degree, root)[0], 0, rtol=0, atol=1e-12)


def test_endpoints() -> None:
    """Test the closed-form values of Legendre polynomials and their derivatives at the endpoints."""
    for degree in range(10):
        value, derivative = legendre_pd(degree, 1.0)
        assert value == 1
        assert derivative == degree * (degree + 1) / 2
        assert legendre_p(degree, -1.0) == (-1)**degree


@pytest.mark.parametrize(['function', 'degree'], [
    pytest.param(legendre_p, -1, id="negative value degree"),
    pytest.param(legendre_pd, -2, id="negative derivative degree"),
    pytest.param(legendre_p, 1.5, id="fractional value degree"),
    pytest.param(legendre_pd_diff, 0, id="zero difference degree"),
    pytest.param(legendre_pd_diff, -1, id="negative difference degree"),
    pytest.param(legendre_pd_diff, 2.0, id="float difference degree"),
])
def test_invalid_degree(function: Callable, degree: Any) -> None:
    """Test that invalid degrees are rejected."""
    with pytest.raises(ValueError, match="degree"):
        function(degree, 0.5)


def test_degree_minimums() -> None:
    """Test that differences of Legendre polynomials require a higher minimum degree than the polynomials themselves."""
    assert legendre_p(0, 0.5) == 1
    with pytest.raises(ValueError, match="at least 1"):
        legendre_pd_diff(0, 0.5)
    with pytest.raises(ValueError, match="at least 0"):
        legendre_pd(-1, 0.5)
