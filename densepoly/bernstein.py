"""Bernstein polynomials and Bernstein series (Bezier curves).

The Bernstein basis polynomials of degree n are b_{n,v} = C(n,v) X^v (1-X)^(n-v)
for v = 0, ..., n. A Bernstein series with coefficients [c_0, ..., c_n] is the
polynomial c_0 b_{n,0} + ... + c_n b_{n,n}, which is evaluated and subdivided
using de Casteljau's algorithm.
"""

from densepoly import gmpy as gmpy2
from densepoly.polynomial import (LE, poly, zero, const_poly, shift_poly, pow_poly, mult_poly,
                                  scale_poly, sum_polys, poly_coeffs, poly_degree)

_1_x = poly(LE, [1, -1])  # 1 - X


def bernstein(n, v):
    """Bernstein basis polynomial b_{n,v}, which is zero unless 0 <= v <= n."""
    if not 0 <= v <= n:
        return zero

    return mult_poly(shift_poly(const_poly(gmpy2.binomial(n, v)), v), pow_poly(_1_x, n - v))


def bernsteins(n):
    """List of all Bernstein basis polynomials of degree n."""
    return [bernstein(n, v) for v in range(n + 1)]


def eval_bernstein(n, v, t):
    """Value b_{n,v}(t)."""
    if not 0 <= v <= n:
        return 0

    return gmpy2.binomial(n, v) * t**v * (1 - t)**(n - v)


def bernstein_fit(n, f):
    """Coefficients [f(0), f(1/n), ..., f(1)] of degree-n Bernstein approximation of f on [0,1]."""
    if n == 0:
        return [f(gmpy2.mpq(0))]

    return [f(gmpy2.mpq(v, n)) for v in range(n + 1)]


def de_casteljau(c, t):
    """Return all rows of de Casteljau's triangle for coefficients c at t.

    Row 0 is c itself, each next row is one shorter, the last row holds the value
    of the Bernstein series at t.
    """
    rows = [list(c)]
    while len(rows[-1]) > 1:
        r = rows[-1]
        rows.append([(1 - t) * r[i] + t * r[i + 1] for i in range(len(r) - 1)])
    return rows


def eval_bernstein_series(c, t):
    """Value of Bernstein series with coefficients c at t."""
    if not c:
        return 0

    return de_casteljau(c, t)[-1][0]


def split_bernstein_series(c, t):
    """Split Bernstein series with coefficients c at t.

    Return coefficients of the two Bernstein series (of same degree) representing
    the given one on [0,t] and on [t,1], respectively, both reparametrized to [0,1].
    """
    rows = de_casteljau(c, t)
    return [r[0] for r in rows], [r[-1] for r in reversed(rows)]


def bernstein_to_poly(c):
    """Polynomial for Bernstein series with coefficients c."""
    n = len(c) - 1
    return sum_polys(scale_poly(c_v, bernstein(n, v)) for v, c_v in enumerate(c))


def poly_to_bernstein(p, n=None):
    """Coefficients of polynomial p as Bernstein series of degree n >= deg(p).

    Default n=None will set n to the degree of p.
    """
    a = poly_coeffs(LE, p)
    if n is None:
        n = poly_degree(p)
    if n < len(a) - 1:
        raise ValueError('degree of Bernstein series too small')

    C = gmpy2.binomial
    return [sum((a[i] * C(v, i) / C(n, i) for i in range(min(v + 1, len(a))) if a[i]), 0)
            for v in range(n + 1)]
