"""
Interpolation steps used by the TOMS 748 root finder.

Each step proposes the next point to evaluate from the current bracket:
- Secant step (linear interpolation), used once to start the search
- Newton iterations on the interpolating quadratic
- Inverse cubic interpolation through four points

All steps are pure functions of their arguments and always return a point
usable by the solver, falling back to the bracket midpoint when the
interpolant is degenerate.
"""

from itertools import combinations

from .bracket import divided_difference, float64_arithmetic
from .bracket import second_divided_difference

# Threshold for numerically distinct function values and for secant
# estimates that sit on top of an endpoint. Unrelated to the user tolerance.
EPS = 1e-14


def is_distinct(fa: float, fb: float, fd: float, fe: float) -> bool:
    """True if the four function values pairwise differ by more than EPS."""
    return all(abs(x - y) > EPS for x, y in combinations((fa, fb, fd, fe), 2))


@float64_arithmetic
def secant_step(a: float, b: float, fa: float, fb: float) -> float:
    """
    Root of the line through (a, fa) and (b, fb).

    If the estimate lands within a relative EPS of either endpoint the
    midpoint is returned instead, since evaluating there makes no progress.

    Args:
        a: Lower endpoint
        b: Upper endpoint
        fa: f(a)
        fb: f(b)

    Returns
        Point strictly inside [a, b]
    """
    c = a - fa / divided_difference(a, b, fa, fb)
    if c <= a + abs(a) * EPS or c >= b - abs(b) * EPS:
        return (a + b) / 2
    return c


@float64_arithmetic
def newton_quadratic(
    a: float,
    b: float,
    d: float,
    fa: float,
    fb: float,
    fd: float,
    *,
    steps: int = 2,
) -> float:
    """
    Approximate the zero of the quadratic through (a, fa), (b, fb), (d, fd).

    The quadratic is written in Newton form

        P(x) = f[a, b, d](x - a)(x - b) + f[a, b](x - a) + f(a)

    and its zero in [a, b] is approached with a fixed number of Newton
    iterations, starting from the endpoint selected by the sign of
    f[a, b, d] * f(a). An iterate that leaves (a, b) ends the
    refinement: the last interior iterate is returned, or the midpoint
    if there is none yet.

    If the second divided difference vanishes the quadratic is a line and
    its root is returned directly.

    Args:
        a: Lower endpoint
        b: Upper endpoint
        d: Previously discarded point
        fa: f(a)
        fb: f(b)
        fd: f(d)
        steps: Number of Newton iterations (2 or 3)

    Returns
        Approximate zero of the quadratic inside [a, b]
    """
    A = second_divided_difference(a, b, d, fa, fb, fd)
    B = divided_difference(a, b, fa, fb)

    if A == 0:
        return a - fa / B

    r = a if A * fa > 0 else b
    for _ in range(steps):
        rn = r - ((A * (r - b) + B) * (r - a) + fa) / (B + A * (2 * (r - a - b)))
        if a < rn < b:
            r = rn
        elif a < r < b:
            return r
        else:
            r = (a + b) / 2
    return r


@float64_arithmetic
def inverse_cubic(
    a: float,
    b: float,
    c: float,
    d: float,
    fa: float,
    fb: float,
    fc: float,
    fd: float,
) -> float:
    """
    Zero of the inverse cubic through four points.

    Fits x as a cubic polynomial in f through (fa, a), (fb, b), (fc, c),
    (fd, d) and evaluates it at f = 0, using Neville-style differences.
    The four function values must be distinct (see is_distinct); the
    result is not guaranteed to lie inside [a, b].
    """
    q11 = (c - d) * fc / (fd - fc)
    q21 = (b - c) * fb / (fc - fb)
    q31 = (a - b) * fa / (fb - fa)
    d21 = (b - c) * fc / (fc - fb)
    d31 = (a - b) * fb / (fb - fa)

    q22 = (d21 - q11) * fb / (fd - fb)
    q32 = (d31 - q21) * fa / (fc - fa)
    d32 = (d31 - q21) * fc / (fc - fa)

    q33 = (d32 - q22) * fa / (fd - fa)

    return a + q31 + q32 + q33


def interpolation_step(
    a: float,
    b: float,
    d: float,
    e: float,
    fa: float,
    fb: float,
    fd: float,
    fe: float,
    steps: int,
) -> float:
    """
    Choose the next estimate: inverse cubic when possible, else quadratic.

    The inverse cubic is used when the four tracked function values are
    distinct and its estimate falls strictly inside (a, b).
    """
    if is_distinct(fa, fb, fd, fe):
        r = inverse_cubic(a, b, d, e, fa, fb, fd, fe)
        if a < r < b:
            return r
    return newton_quadratic(a, b, d, fa, fb, fd, steps=steps)

