"""Basic functionality."""

import inspect
import re
import sys
import traceback
from typing import Any, List, Mapping, Optional, Sequence, Tuple
import warnings

import numpy as np

from .. import options


# define common types
Array = Any
RecArray = Any
Evaluation = Tuple[float, float]


def structure_matrices(mapping: Mapping) -> RecArray:
    """Structure a mapping of keys to (array, type) tuples as a record array of two-dimensional sub-arrays."""
    matrices = {k: np.c_[a] for k, (a, _) in mapping.items()}
    size = next(iter(matrices.values())).shape[0]
    structured: RecArray = np.recarray(size, [(k, t, matrices[k].shape[1:]) for k, (_, t) in mapping.items()])
    for key, matrix in matrices.items():
        structured[key] = matrix
    return structured


def validate_dtype(dtype: Any) -> Any:
    """Resolve an output data type, defaulting to the configured one, and make sure that it is a floating point type."""
    if dtype is None:
        dtype = options.dtype
    try:
        resolved = np.dtype(dtype)
    except TypeError as exception:
        raise ValueError(f"dtype must be a NumPy floating point type, not {dtype!r}.") from exception
    if not np.issubdtype(resolved, np.floating):
        raise ValueError(f"dtype must be a NumPy floating point type, not {resolved}.")
    return resolved.type


def warn(message: Any) -> None:
    """Output a warning."""
    old_formatwarning = warnings.formatwarning
    warnings.formatwarning = lambda x, *_, **__: f"{x}\n"
    warnings.warn(message)
    warnings.formatwarning = old_formatwarning


def output(message: Any) -> None:
    """Print a message if verbosity is turned on."""
    if options.verbose:
        if not callable(options.verbose_output):
            raise TypeError("options.verbose_output should be callable.")
        options.verbose_output(str(message))
        if options.flush_output:
            sys.stdout.flush()


def format_seconds(seconds: float) -> str:
    """Prepare a number of seconds to be displayed as a string."""
    hours, remainder = divmod(int(round(seconds)), 60**2)
    minutes, seconds = divmod(remainder, 60)
    return f'{hours:02}:{minutes:02}:{seconds:02}'


def format_number(number: Any) -> str:
    """Prepare a number to be displayed as a string."""
    if not isinstance(options.digits, int):
        raise TypeError("options.digits must be an int.")
    template = f"{{:^+{options.digits + 6}.{options.digits - 1}E}}"
    formatted = template.format(float(number))
    if "NAN" in formatted:
        formatted = formatted.replace("+", " ")
    return formatted


def format_table(header: Sequence[str], *data: Sequence, title: Optional[str] = None) -> str:
    """Format table information as a string with fixed widths, a border, a header, and optionally a title."""

    # convert the data to strings and compute column widths
    rows = [[str(c) for c in r] for r in data]
    widths = [max(len(r[i]) for r in [list(header)] + rows) for i in range(len(header))]
    template = "  ".join(f"{{:^{w}}}" for w in widths)
    border = "=" * len(template.format(*[""] * len(widths)))

    # build the table
    lines: List[str] = []
    if title is not None:
        lines.append(f"{title}:")
    lines.extend([border, template.format(*header), template.format(*("-" * w for w in widths))])
    lines.extend(template.format(*r) for r in rows)
    lines.append(border)
    return "\n".join(lines)


class SolverStats(object):
    """Structured statistics returned by a generic numerical solver."""

    converged: bool
    iterations: int
    evaluations: int

    def __init__(self, converged: bool = True, iterations: int = 0, evaluations: int = 0) -> None:
        """Structure the statistics."""
        self.converged = converged
        self.iterations = iterations
        self.evaluations = evaluations


class StringRepresentation(object):
    """Object that defers to its string representation."""

    def __repr__(self) -> str:
        """Defer to the string representation."""
        return str(self)


class Error(Exception):
    """Errors that are indistinguishable from others with the same message, which is parsed from the docstring."""

    stack: Optional[str]

    def __init__(self) -> None:
        """Optionally store the full current traceback for debugging purposes."""
        super().__init__()
        if options.verbose_tracebacks:
            self.stack = ''.join(traceback.format_stack())
        else:
            self.stack = None

    def __eq__(self, other: Any) -> bool:
        """Defer to hashes."""
        return hash(self) == hash(other)

    def __hash__(self) -> int:
        """Hash this instance such that in collections it is indistinguishable from others with the same message."""
        return hash((type(self).__name__, str(self)))

    def __repr__(self) -> str:
        """Defer to the string representation."""
        return str(self)

    def __str__(self) -> str:
        """Replace docstring markdown with simple text."""
        doc = inspect.getdoc(self)
        assert doc is not None

        # normalize LaTeX
        while True:
            match = re.search(r':math:`([^`]+)`', doc)
            if match is None:
                break
            start, end = match.span()
            doc = doc[:start] + re.sub(r'\s+', ' ', re.sub(r'[\\{}]', ' ', match.group(1))).lower() + doc[end:]

        # remove all remaining domains and compress whitespace
        doc = re.sub(r'[\s\n]+', ' ', re.sub(r':[a-z\-]+:|`', '', doc))

        # optionally add the full traceback
        if self.stack is not None:
            doc = f"{doc} Traceback:\n\n{self.stack}\n"
        return doc
