"""
Custom exceptions for the TOMS 748 root finder.

All of them are precondition violations raised before the first
iteration. Once the preconditions hold the solver always returns a value.
"""


class RootFindingError(Exception):
    """Base exception for all root finder errors."""


class InvalidIntervalError(RootFindingError, ValueError):
    """The interval is empty or reversed (a >= b)."""

    def __init__(self, a: float, b: float):
        self.a = a
        self.b = b
        super().__init__(
            f'Parameter a should be strictly smaller than b: a={a}, b={b}'
        )


class InvalidToleranceError(RootFindingError, ValueError):
    """The convergence tolerance is not positive."""

    def __init__(self, tol: float):
        self.tol = tol
        super().__init__(f'The tolerance should be positive: tol={tol}')


class InvalidBudgetError(RootFindingError, ValueError):
    """The iteration budget is not positive."""

    def __init__(self, max_iter: int):
        self.max_iter = max_iter
        super().__init__(
            f'The maximum number of iterations should be positive: '
            f'max_iter={max_iter}'
        )


class NotBracketingError(RootFindingError, ValueError):
    """f(a) and f(b) share a sign, so [a, b] does not bracket a root."""

    def __init__(self, a: float, b: float, fa: float, fb: float):
        self.a = a
        self.b = b
        self.fa = fa
        self.fb = fb
        super().__init__(
            f'Function values at bounds must have opposite signs: '
            f'f({a})={fa}, f({b})={fb}'
        )
