"""This module collects all gmpy2 functions used by densepoly.

Exact rationals (mpq) serve as the default field of coefficients for the
polynomial families that need division, and the number-theoretic functions
support the prime fields of module gfp.
"""

import logging
from gmpy2 import version, mpq, is_prime, powmod, invert, comb

logging.debug(f'Load gmpy2 version {version()}')


def binomial(n, k):
    """Return binomial coefficient n over k as a Python int (0 if k<0 or k>n)."""
    if k < 0 or k > n:
        return 0

    return int(comb(n, k))
