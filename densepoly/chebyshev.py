"""Chebyshev polynomials of the first and second kind.

The polynomials T_n and U_n satisfy the same three-term recurrence
P_{n+1} = 2X P_n - P_{n-1}, starting from T_0 = U_0 = 1, T_1 = X, U_1 = 2X.
Chebyshev series are evaluated with Clenshaw's algorithm, and functions
on [-1,1] are approximated by interpolation at the roots of T_n.
"""

import math
import itertools
from densepoly.polynomial import LE, poly, one, x, sub_poly, mult_poly

_2x = poly(LE, [0, 2])


def _recurrence(p0, p1):
    while True:
        yield p0
        p0, p1 = p1, sub_poly(mult_poly(_2x, p1), p0)


def ts():
    """Generate Chebyshev polynomials of the first kind T_0, T_1, T_2, ..."""
    return _recurrence(one, x)


def us():
    """Generate Chebyshev polynomials of the second kind U_0, U_1, U_2, ..."""
    return _recurrence(one, _2x)


def t(n):
    """Chebyshev polynomial T_n of the first kind, n >= 0."""
    if n < 0:
        raise ValueError('negative degree')

    return next(itertools.islice(ts(), n, None))


def u(n):
    """Chebyshev polynomial U_n of the second kind, n >= 0."""
    if n < 0:
        raise ValueError('negative degree')

    return next(itertools.islice(us(), n, None))


def _eval_recurrence(y0, y1, s):
    while True:
        yield y0
        y0, y1 = y1, 2 * s * y1 - y0


def eval_ts(s):
    """Generate values T_0(s), T_1(s), T_2(s), ..."""
    return _eval_recurrence(1, s, s)


def eval_us(s):
    """Generate values U_0(s), U_1(s), U_2(s), ..."""
    return _eval_recurrence(1, 2 * s, s)


def eval_t(n, s):
    """Value T_n(s), without computing T_n itself."""
    return next(itertools.islice(eval_ts(s), n, None))


def eval_u(n, s):
    """Value U_n(s), without computing U_n itself."""
    return next(itertools.islice(eval_us(s), n, None))


def t_roots(n):
    """Roots of T_n, in decreasing order."""
    return [math.cos(math.pi * (k + 0.5) / n) for k in range(n)]


def t_extrema(n):
    """Extrema of T_n on [-1,1], in decreasing order (including both endpoints)."""
    if n == 0:
        return []

    return [math.cos(math.pi * k / n) for k in range(n + 1)]


def chebyshev_fit(n, f):
    """Coefficients [c_0, ..., c_{n-1}] of Chebyshev series interpolating f at roots of T_n.

    The series c_0 T_0 + ... + c_{n-1} T_{n-1} agrees with f at all n roots of T_n.
    """
    y = [f(s) for s in t_roots(n)]
    c = []
    for j in range(n):
        c_j = 2 * sum(y_k * math.cos(math.pi * j * (k + 0.5) / n) for k, y_k in enumerate(y)) / n
        c.append(c_j)
    if c:
        c[0] /= 2
    return c


def eval_chebyshev_series(c, s):
    """Value of Chebyshev series c_0 T_0(s) + c_1 T_1(s) + ..., using Clenshaw's algorithm."""
    if not c:
        return 0

    b1, b2 = 0, 0
    for c_k in reversed(c[1:]):
        b1, b2 = c_k + 2 * s * b1 - b2, b1
    return c[0] + s * b1 - b2
