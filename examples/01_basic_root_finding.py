#!/usr/bin/env python3
"""
Basic Root Finding
==================

This example demonstrates:
1. Finding a root with TOMS Algorithm 748
2. Comparing its evaluation count against plain bisection
3. Watching the bracket shrink through the callback hook
"""

import logging
import math

from toms748 import bisection, toms748

# Set to logging.DEBUG to see every step of the search
logging.basicConfig(level=logging.INFO)

print('=' * 70)
print('TOMS 748 - Basic Root Finding')
print('=' * 70)
print()

# =============================================================================
# Reference Problems
# =============================================================================

problems = [
    ('sin(x) - x/2', lambda x: math.sin(x) - x / 2, math.pi / 2, math.pi),
    ('-100 x exp(-2x)', lambda x: -100 * x * math.exp(-2 * x), -9.0, 31.0),
    ('sqrt(x) - sqrt(2)', lambda x: math.sqrt(x) - math.sqrt(2), 1.0, 100.0),
]

print(f"{'Function':<20} {'Root':>22} {'TOMS 748':>10} {'Bisection':>10}")
print('-' * 70)

for name, f, a, b in problems:
    fast = toms748(f, a, b, tol=1e-15, max_iter=100)
    slow = bisection(f, a, b, tol=1e-15, max_iter=200)
    print(f'{name:<20} {fast.x:>22.15f} {fast.iterations:>10} {slow.iterations:>10}')

print()

# =============================================================================
# Bracket Evolution
# =============================================================================

print('-' * 70)
print('Bracket evolution for sin(x) - x/2')
print('-' * 70)
print()


def show(bracket):
    print(f'  [{bracket.a:.15f}, {bracket.b:.15f}]  width={bracket.width:.3e}')


toms748(problems[0][1], math.pi / 2, math.pi, tol=1e-15, max_iter=100, callback=show)
