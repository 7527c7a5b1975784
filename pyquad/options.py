r"""Global options.

Attributes
----------
digits : `int`
    Number of digits displayed by status updates and formatted rules. The default number of digits is ``7``. The number
    of digits can be changed to, for example, ``2``, with ``pyquad.options.digits = 2``.
verbose : `bool`
    Whether to output status updates. By default, verbosity is turned on. Verbosity can be turned off with
    ``pyquad.options.verbose = False``.
verbose_tracebacks : `bool`
    Whether to include full tracebacks in error messages. By default, full tracebacks are turned off. These can be
    useful when attempting to find the source of an error message. Tracebacks can be turned on with
    ``pyquad.options.verbose_tracebacks = True``.
verbose_output : `callable`
    Function used to output status updates. The default function is simply ``print``. The function can be changed, for
    example, to include an indicator that statuses are from this package, with
    ``pyquad.options.verbose_output = lambda x: print(f"pyquad: {x}")``.
flush_output : `bool`
    Whether to call ``sys.stdout.flush()`` after outputting a status update. By default, output is not flushed to
    standard output. To force standard output flushes after every status update, set
    ``pyquad.options.flush_output = True``.
dtype : `dtype`
    The data type in which nodes and weights are returned when no ``dtype`` is passed to a rule, which is by default
    ``numpy.float64``. Other options are ``numpy.float32`` and ``numpy.longdouble``.

    Regardless of this data type, roots of Legendre polynomials are always found in double precision, and nodes and
    weights are only converted to the requested type once they have been computed. Choosing ``numpy.longdouble``
    therefore does not make nodes and weights any more accurate than those computed with ``numpy.float64``.

weights_tol : `float`
    Tolerance for detecting quadrature weights that do not sum to two, the length of the reference interval, which is
    by default ``1e-10``. The check is done in double precision before weights are converted to their final type.
    Warnings can be disabled by setting this to ``numpy.inf``.
newton_max_iterations : `int`
    Maximum number of Newton iterations used to refine each root of a Gauss-Legendre or Gauss-Lobatto rule, which is
    by default ``20``. If a root has not converged after this many iterations, a
    :class:`~pyquad.exceptions.ConvergenceError` is raised. With the default, this should only happen for rules with
    many more than ``200`` nodes, for which a composite rule is a better choice anyway.
newton_tolerance_factor : `float`
    Newton's method terminates once a step is no larger than this factor times the double precision machine epsilon
    relative to the current iterate. The default factor is ``4``.

"""

import numpy as _np


digits = 7
verbose = True
verbose_tracebacks = False
verbose_output = print
flush_output = False
dtype = _np.float64
weights_tol = 1e-10
newton_max_iterations = 20
newton_tolerance_factor = 4
