"""
TOMS 748 - Bracketed Root Finding

A pure Python implementation of Algorithm 748 (Alefeld, Potra and Shi) for
locating a zero of a continuous function on an interval whose endpoints
have function values of opposite sign. No derivatives are needed, the
bracket always contains a root, and convergence is superlinear in
practice.

Basic Usage:
    >>> import math
    >>> from toms748 import toms748
    >>>
    >>> root = toms748(lambda x: math.sin(x) - x / 2, math.pi / 2, math.pi,
    ...                tol=1e-15, max_iter=100)
    >>> print(f"x = {root.x:.5f} after {root.iterations} evaluations")
"""

__version__ = '1.0.0'

# Bracket bookkeeping
from .bracket import Bracket, divided_difference, second_divided_difference
from .bracket import update_bracket
# Exceptions
from .exceptions import InvalidBudgetError, InvalidIntervalError
from .exceptions import InvalidToleranceError, NotBracketingError
from .exceptions import RootFindingError
# Interpolation steps
from .interpolation import EPS, interpolation_step, inverse_cubic, is_distinct
from .interpolation import newton_quadratic, secant_step
# Main solver API
from .solver import DEFAULT_MAX_ITER, DEFAULT_TOL, Root, bisection, find_root
from .solver import toms748

__all__ = [
    # Version
    '__version__',
    # Main API
    'toms748',
    'bisection',
    'find_root',
    'Root',
    'DEFAULT_TOL',
    'DEFAULT_MAX_ITER',
    # Bracket
    'Bracket',
    'update_bracket',
    'divided_difference',
    'second_divided_difference',
    # Interpolation
    'EPS',
    'is_distinct',
    'secant_step',
    'newton_quadratic',
    'inverse_cubic',
    'interpolation_step',
    # Exceptions
    'RootFindingError',
    'InvalidIntervalError',
    'InvalidToleranceError',
    'InvalidBudgetError',
    'NotBracketingError',
]
