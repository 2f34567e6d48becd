"""Legendre polynomials, with exact rational coefficients.

The Legendre polynomials P_n are orthogonal on [-1,1] and satisfy the recurrence
(n+1) P_{n+1} = (2n+1) X P_n - n P_{n-1}, with P_0 = 1 and P_1 = X.
Coefficients are gmpy2.mpq rationals, so the polynomials can be used
as an exact basis, see module basis.

The shifted Legendre polynomials ~P_n(X) = P_n(2X - 1) are orthogonal on [0,1]
and have integer coefficients.
"""

import itertools
from densepoly import gmpy as gmpy2
from densepoly.polynomial import LE, poly, x, sub_poly, mult_poly, scale_poly


def legendres():
    """Generate Legendre polynomials P_0, P_1, P_2, ..."""
    p0, p1 = poly(LE, [gmpy2.mpq(1)]), poly(LE, [0, gmpy2.mpq(1)])
    n = 1
    yield p0
    while True:
        yield p1
        p0, p1 = p1, sub_poly(scale_poly(gmpy2.mpq(2*n + 1, n + 1), mult_poly(x, p1)),
                              scale_poly(gmpy2.mpq(n, n + 1), p0))
        n += 1


def legendre(n):
    """Legendre polynomial P_n, n >= 0."""
    if n < 0:
        raise ValueError('negative degree')

    return next(itertools.islice(legendres(), n, None))


def eval_legendre(n, s):
    """Value P_n(s), without computing P_n itself."""
    y0, y1 = 1, s
    if n == 0:
        return y0

    for k in range(1, n):
        y0, y1 = y1, ((2*k + 1) * s * y1 - k * y0) / (k + 1)
    return y1


def shifted_legendre(n):
    """Shifted Legendre polynomial ~P_n(X) = P_n(2X - 1), n >= 0."""
    if n < 0:
        raise ValueError('negative degree')

    return poly(LE, [(-1)**(n + k) * gmpy2.binomial(n, k) * gmpy2.binomial(n + k, k)
                     for k in range(n + 1)])
