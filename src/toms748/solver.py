"""
Bracketed root finding with TOMS Algorithm 748.

Implements the method of Alefeld, Potra and Shi ("Algorithm 748:
Enclosing Zeros of Continuous Functions", ACM TOMS 21, 1995). Each cycle
takes two interpolation steps (inverse cubic or Newton-quadratic), then a
double-length secant step, and bisects when the bracket did not shrink
enough. The bracket always encloses a root, and convergence is
superlinear for smooth functions.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from .bracket import Bracket, divided_difference, update_bracket
from .exceptions import InvalidBudgetError, InvalidIntervalError
from .exceptions import InvalidToleranceError, NotBracketingError
from .interpolation import interpolation_step, newton_quadratic, secant_step

logger = logging.getLogger(__name__)

DEFAULT_TOL = 1e-12
DEFAULT_MAX_ITER = 100


@dataclass(frozen=True)
class Root:
    """
    Result of a root search.

    x is the root estimate and iterations the number of function
    evaluations spent on it, not counting f(a) and f(b). A search that
    ran out of budget still returns its latest estimate, so callers that
    care must compare iterations against max_iter.
    """

    x: float
    iterations: int


class _CountingFunction:
    """Wraps f, counting calls and returning float64 values."""

    def __init__(self, f: Callable[[float], float]):
        self._f = f
        self.calls = 0

    def __call__(self, x: float) -> np.float64:
        self.calls += 1
        return np.float64(self._f(float(x)))


def _prepare(
    f: Callable[[float], float],
    a: float,
    b: float,
    tol: float,
    max_iter: int,
    fa: float | None,
    fb: float | None,
) -> tuple[Root | None, float | None, float | None]:
    """
    Validate the inputs and resolve the endpoint values.

    Returns
        (root, fa, fb) where root is set if no iteration is needed
    """
    if not a < b:
        raise InvalidIntervalError(a, b)
    if not tol > 0:
        raise InvalidToleranceError(tol)
    if not max_iter > 0:
        raise InvalidBudgetError(max_iter)

    # Without precomputed values a degenerate interval costs no evaluation
    if fa is None or fb is None:
        if a >= b - tol:
            return Root(float((a + b) / 2), 0), fa, fb
        if fa is None:
            fa = f(a)
        if fb is None:
            fb = f(b)

    if fa == 0:
        return Root(float(a), 0), fa, fb
    if fb == 0:
        return Root(float(b), 0), fa, fb
    if a >= b - tol:
        return Root(float((a + b) / 2), 0), fa, fb

    if not np.sign(fa) * np.sign(fb) < 0:
        raise NotBracketingError(a, b, fa, fb)

    return None, fa, fb


def toms748(
    f: Callable[[float], float],
    a: float,
    b: float,
    tol: float = DEFAULT_TOL,
    max_iter: int = DEFAULT_MAX_ITER,
    fa: float | None = None,
    fb: float | None = None,
    callback: Callable[[Bracket], None] | None = None,
) -> Root:
    """
    Find a root of f in [a, b] using TOMS Algorithm 748.

    f must be continuous with f(a) and f(b) of opposite signs. The search
    stops on an exact zero, when the bracket is narrower than tol, or
    after max_iter evaluations of f, whichever comes first.

    Args:
        f: Function to find root of
        a: Lower bound of search interval
        b: Upper bound of search interval
        tol: Width of the final bracket
        max_iter: Maximum number of evaluations of f
        fa: f(a) if already known
        fb: f(b) if already known
        callback: Called with the new Bracket after every update

    Returns
        Root with the estimate and the number of evaluations used

    Raises
        InvalidIntervalError: If a >= b
        InvalidToleranceError: If tol <= 0
        InvalidBudgetError: If max_iter <= 0
        NotBracketingError: If f(a) and f(b) have the same sign
    """
    root, fa, fb = _prepare(f, a, b, tol, max_iter, fa, fb)
    if root is not None:
        logger.debug('toms748: resolved [%r, %r] without iterating', a, b)
        return root

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        return _search(f, a, b, fa, fb, tol, max_iter, callback)


def _search(
    f: Callable[[float], float],
    a: float,
    b: float,
    fa: float,
    fb: float,
    tol: float,
    max_iter: int,
    callback: Callable[[Bracket], None] | None,
) -> Root:
    fx = _CountingFunction(f)

    def evaluate(kind: str, c: float) -> np.float64:
        fc = fx(c)
        logger.debug(
            'toms748 %s step %d: x=%.17g f(x)=%.17g',
            kind, fx.calls, float(c), float(fc),
        )
        return fc

    def finished(fc: float) -> bool:
        return fc == 0 or fx.calls >= max_iter

    def publish(bracket: Bracket) -> Bracket:
        logger.debug(
            'toms748 bracket: [%.17g, %.17g] width=%.3g',
            float(bracket.a), float(bracket.b), float(bracket.width),
        )
        if callback is not None:
            callback(bracket)
        return bracket

    def narrow(bracket: Bracket, c: float, fc: float) -> Bracket:
        return publish(bracket.narrow(c, fc))

    # First step: secant
    c = secant_step(a, b, fa, fb)
    fc = evaluate('secant', c)
    if finished(fc):
        return Root(float(c), fx.calls)
    bracket = publish(update_bracket(a, b, c, fa, fb, fc))

    # Second step: quadratic interpolation
    c = newton_quadratic(
        bracket.a, bracket.b, bracket.d, bracket.fa, bracket.fb, bracket.fd,
        steps=2,
    )
    e, fe = bracket.d, bracket.fd
    fc = evaluate('quadratic', c)
    if finished(fc):
        return Root(float(c), fx.calls)
    bracket = narrow(bracket, c, fc)

    while fx.calls < max_iter and bracket.a <= bracket.b - tol:
        start_width = bracket.width

        for steps in (2, 3):
            c = interpolation_step(
                bracket.a, bracket.b, bracket.d, e,
                bracket.fa, bracket.fb, bracket.fd, fe,
                steps,
            )
            fc = evaluate('interpolation', c)
            if finished(fc):
                return Root(float(c), fx.calls)
            e, fe = bracket.d, bracket.fd
            bracket = narrow(bracket, c, fc)

        # Double-length secant step from the endpoint with smaller |f|
        if abs(bracket.fa) < abs(bracket.fb):
            u, fu = bracket.a, bracket.fa
        else:
            u, fu = bracket.b, bracket.fb
        slope = divided_difference(bracket.a, bracket.b, bracket.fa, bracket.fb)
        c = u - 2 * fu / slope
        if abs(c - u) > bracket.width / 2:
            c = bracket.midpoint
        fc = evaluate('double secant', c)
        if finished(fc):
            return Root(float(c), fx.calls)
        bracket = narrow(bracket, c, fc)

        if bracket.width < start_width / 2:
            continue

        # Not shrinking fast enough: bisect the caller's original interval
        e, fe = bracket.d, bracket.fd
        z = (a + b) / 2
        fz = evaluate('bisection', z)
        if finished(fz):
            return Root(float(z), fx.calls)
        bracket = narrow(bracket, z, fz)

    if fx.calls >= max_iter:
        logger.debug('toms748: budget of %d evaluations exhausted', max_iter)
    return Root(float(bracket.midpoint), fx.calls)


def bisection(
    f: Callable[[float], float],
    a: float,
    b: float,
    tol: float = DEFAULT_TOL,
    max_iter: int = DEFAULT_MAX_ITER,
    fa: float | None = None,
    fb: float | None = None,
    callback: Callable[[Bracket], None] | None = None,
) -> Root:
    """
    Find a root using the bisection method.

    Slow but predictable: the bracket halves with every evaluation. Takes
    the same arguments, raises the same errors and returns the same Root
    as toms748.

    Args:
        f: Function to find root of
        a: Lower bound
        b: Upper bound
        tol: Width of the final bracket
        max_iter: Maximum number of evaluations of f
        fa: f(a) if already known
        fb: f(b) if already known
        callback: Called with the new Bracket after every update

    Returns
        Root with the estimate and the number of evaluations used
    """
    root, fa, fb = _prepare(f, a, b, tol, max_iter, fa, fb)
    if root is not None:
        return root

    fx = _CountingFunction(f)
    while fx.calls < max_iter and a <= b - tol:
        mid = (a + b) / 2
        fmid = fx(mid)
        if fmid == 0:
            return Root(float(mid), fx.calls)

        bracket = update_bracket(a, b, mid, fa, fb, fmid)
        if callback is not None:
            callback(bracket)
        a, b, fa, fb = bracket.a, bracket.b, bracket.fa, bracket.fb

    logger.debug('bisection: stopped after %d evaluations', fx.calls)
    return Root(float((a + b) / 2), fx.calls)


def find_root(
    f: Callable[[float], float],
    a: float,
    b: float,
    tol: float = DEFAULT_TOL,
    max_iter: int = DEFAULT_MAX_ITER,
    method: str = 'toms748',
) -> Root:
    """
    Find a root of f in [a, b].

    Args:
        f: Function to find root of
        a: Lower bound
        b: Upper bound
        tol: Tolerance
        max_iter: Maximum number of evaluations of f
        method: 'toms748' or 'bisection'

    Returns
        Root with the estimate and the number of evaluations used
    """
    if method == 'toms748':
        return toms748(f, a, b, tol, max_iter)
    elif method == 'bisection':
        return bisection(f, a, b, tol, max_iter)
    else:
        raise ValueError(f'Unknown root finding method: {method}')
