"""Fixtures used by tests."""

import os
from typing import Any, Iterator, cast

import numpy as np
import pytest

from pyquad import options


@pytest.fixture(scope='session', autouse=True)
def configure() -> Iterator[None]:
    """Configure NumPy so that it raises all warnings as exceptions. Next, if a DTYPE environment variable is set in
    this testing environment that is different from the default data type, use it as the default data type of nodes and
    weights. Finally, turn off status updates so that test output is not cluttered.
    """

    # configure NumPy so that it raises all warnings as exceptions
    old_error = np.seterr(all='raise')

    # use any different data type for nodes and weights
    old_dtype = options.dtype
    dtype_string = os.environ.get('DTYPE')
    if dtype_string:
        options.dtype = cast(Any, np.dtype(dtype_string).type)
        if np.finfo(options.dtype).dtype == old_dtype:
            pytest.skip(f"The {dtype_string} data type is the same as the default one in this environment.")

    # silence status updates
    old_verbose = options.verbose
    options.verbose = False

    # run tests before reverting all changes
    yield
    options.verbose = old_verbose
    options.dtype = old_dtype
    np.seterr(**old_error)
