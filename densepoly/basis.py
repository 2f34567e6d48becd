"""Conversion between the power basis and other polynomial bases.

A polynomial family is any sequence or iterable of polynomials whose k-th
member has degree k, such as chebyshev.ts() or legendre.legendres().
Each such family is a basis, so every polynomial p of degree n is a unique
linear combination c_0 f_0 + c_1 f_1 + ... + c_n f_n of its first n+1 members.
"""

import itertools
from densepoly.polynomial import Polynomial, quot_rem_poly, scale_poly, sum_polys


def _members(family, n):
    family = list(itertools.islice(family, n))
    if len(family) < n:
        raise ValueError('polynomial family too short')

    for k, f in enumerate(family):
        if f.degree() != k:
            raise ValueError(f'member {k} of polynomial family has degree {f.degree()}')

    return family


def to_basis(p, family):
    """Return coefficients [c_0, ..., c_n] of polynomial p w.r.t. given family.

    Coefficients are found by division with remainder, from member n down to member 0.
    The zero polynomial has no coefficients.
    """
    a = Polynomial(p)
    n = a.degree()
    family = _members(family, n + 1)
    c = [0] * (n + 1)
    for k in range(n, -1, -1):
        q, a = quot_rem_poly(a, family[k])
        c[k] = q[0]  # NB: deg(a) <= k, so quotient q is a constant
    return c


def from_basis(c, family):
    """Return polynomial with coefficients c w.r.t. given family."""
    c = list(c)
    family = _members(family, len(c))
    return sum_polys(scale_poly(c_k, f) for c_k, f in zip(c, family))
