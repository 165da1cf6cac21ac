"""
Shared test fixtures for root finder tests.
"""

import os
import sys

import numpy as np
import pytest
import pathlib

# Add src to path for imports
sys.path.insert(0, os.path.join(pathlib.Path(__file__).parent, '..', 'src'))


@pytest.fixture
def sin_minus_half_x():
    """sin(x) - x/2, single root near 1.89549 in [pi/2, pi]."""
    def f(x):
        return np.sin(x) - x / 2
    return f


@pytest.fixture
def damped_linear():
    """-100 x exp(-2x), root at 0 in [-9, 31]."""
    def f(x):
        return -100 * x * np.exp(-2 * x)
    return f


@pytest.fixture
def sqrt_shift():
    """sqrt(x) - sqrt(2), root at 2 in [1, 100]."""
    def f(x):
        return np.sqrt(x) - np.sqrt(2.0)
    return f


@pytest.fixture
def scenarios(sin_minus_half_x, damped_linear, sqrt_shift):
    """(f, a, b, expected root, evaluation bound) for the reference problems."""
    return [
        (sin_minus_half_x, np.pi / 2, np.pi, 1.89549, 10),
        (damped_linear, -9.0, 31.0, 0.0, 26),
        (sqrt_shift, 1.0, 100.0, 2.0, 5),
    ]


class CallRecorder:
    """Wraps a function and records every point it is evaluated at."""

    def __init__(self, f):
        self.f = f
        self.points = []

    def __call__(self, x):
        self.points.append(x)
        return self.f(x)


@pytest.fixture
def recorder():
    """Factory for CallRecorder wrappers."""
    return CallRecorder
