"""
Bracket bookkeeping for the TOMS 748 root finder.

A bracket is the interval [a, b] whose endpoint values have opposite
signs, together with the most recently discarded point d. The interpolation
steps use d (and one older point) to fit quadratics and inverse cubics.
"""

import functools
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np


def float64_arithmetic(func: Callable) -> Callable:
    """
    Run a numeric helper on float64 scalars with IEEE division semantics.

    Positional arguments are converted to numpy float64, so a zero divisor
    produces inf or nan instead of raising ZeroDivisionError. Comparisons
    against nan are false, which sends every step into its fallback branch.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            return func(*(np.float64(x) for x in args), **kwargs)

    return wrapper


@dataclass(frozen=True)
class Bracket:
    """
    Immutable search state: [a, b] with a sign change, plus the last
    discarded point d.

    d may lie outside [a, b]; it is only used for interpolation.
    """

    a: float
    b: float
    d: float
    fa: float
    fb: float
    fd: float

    @property
    def width(self) -> float:
        return self.b - self.a

    @property
    def midpoint(self) -> float:
        return (self.a + self.b) / 2

    def narrow(self, c: float, fc: float) -> 'Bracket':
        """Return the bracket obtained by evaluating f(c) = fc."""
        return update_bracket(self.a, self.b, c, self.fa, self.fb, fc)


@float64_arithmetic
def update_bracket(
    a: float,
    b: float,
    c: float,
    fa: float,
    fb: float,
    fc: float,
) -> Bracket:
    """
    Keep the half of [a, b] split at c that still changes sign.

    If f(a) and f(c) differ in sign the new bracket is [a, c] and b is
    discarded, otherwise it is [c, b] and a is discarded.

    Args:
        a: Lower endpoint
        b: Upper endpoint
        c: Newly evaluated point
        fa: f(a)
        fb: f(b)
        fc: f(c)

    Returns
        New Bracket with the discarded endpoint stored as d
    """
    if np.sign(fa) * np.sign(fc) < 0:
        return Bracket(a, c, b, fa, fc, fb)
    return Bracket(c, b, a, fc, fb, fa)


@float64_arithmetic
def divided_difference(a: float, b: float, fa: float, fb: float) -> float:
    """
    First divided difference f[a, b] = (f(b) - f(a)) / (b - a).

    This is the slope of the secant through (a, fa) and (b, fb).
    """
    return (fb - fa) / (b - a)


@float64_arithmetic
def second_divided_difference(
    a: float,
    b: float,
    d: float,
    fa: float,
    fb: float,
    fd: float,
) -> float:
    """Second divided difference f[a, b, d] = (f[b, d] - f[a, b]) / (d - a)."""
    return (
        divided_difference(b, d, fb, fd) - divided_difference(a, b, fa, fb)
    ) / (d - a)
