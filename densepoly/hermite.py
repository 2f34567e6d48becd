"""Hermite polynomials, probabilists' He_n and physicists' H_n."""

import itertools
from densepoly.polynomial import LE, poly, one, x, sub_poly, mult_poly, scale_poly

_2x = poly(LE, [0, 2])


def prob_hermites():
    """Generate probabilists' Hermite polynomials He_0, He_1, He_2, ...

    He_{n+1} = X He_n - n He_{n-1}.
    """
    p0, p1 = one, x
    n = 1
    yield p0
    while True:
        yield p1
        p0, p1 = p1, sub_poly(mult_poly(x, p1), scale_poly(n, p0))
        n += 1


def phys_hermites():
    """Generate physicists' Hermite polynomials H_0, H_1, H_2, ...

    H_{n+1} = 2X H_n - 2n H_{n-1}.
    """
    p0, p1 = one, _2x
    n = 1
    yield p0
    while True:
        yield p1
        p0, p1 = p1, sub_poly(mult_poly(_2x, p1), scale_poly(2 * n, p0))
        n += 1


def prob_hermite(n):
    """Probabilists' Hermite polynomial He_n, n >= 0."""
    if n < 0:
        raise ValueError('negative degree')

    return next(itertools.islice(prob_hermites(), n, None))


def phys_hermite(n):
    """Physicists' Hermite polynomial H_n, n >= 0."""
    if n < 0:
        raise ValueError('negative degree')

    return next(itertools.islice(phys_hermites(), n, None))


def eval_prob_hermite(n, s):
    """Value He_n(s)."""
    y0, y1 = 1, s
    if n == 0:
        return y0

    for k in range(1, n):
        y0, y1 = y1, s * y1 - k * y0
    return y1


def eval_phys_hermite(n, s):
    """Value H_n(s)."""
    y0, y1 = 1, 2 * s
    if n == 0:
        return y0

    for k in range(1, n):
        y0, y1 = y1, 2 * s * y1 - 2 * k * y0
    return y1
