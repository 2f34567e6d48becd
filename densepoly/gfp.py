"""Prime fields GF(p), for exact polynomial arithmetic in characteristic p.

GF(p) returns the coefficient type of residues modulo prime p. Residues
mix freely with ints, and with the polynomials of module polynomial as
scalars. Use GF(p).poly(order, coeffs) to reduce a coefficient list mod p.

Over GF(p) division is always exact, and derivatives of nonconstant
polynomials may vanish (e.g., X^p), which separate_roots takes into account.
"""

import logging
import numbers
import functools
from densepoly import gmpy as gmpy2
from densepoly.polynomial import poly


@functools.cache
def GF(p):
    """Coefficient type of the prime field of order p."""
    if not isinstance(p, int):
        raise TypeError('int modulus required')

    if not gmpy2.is_prime(p):
        raise ValueError('modulus is not a prime')

    Zp = type(f'GF({p})', (Residue,), {'__slots__': (), 'modulus': p})
    logging.debug(f'Coefficient field {Zp.__name__} ready')
    return Zp


class Residue:
    """Residue modulo a prime, as a polynomial coefficient.

    Invariant: 0 <= value < modulus.
    """

    __slots__ = 'value'

    modulus = None  # set by GF()

    def __init__(self, value):
        if not isinstance(value, int):
            raise TypeError(f'int required, got {type(value).__name__}')

        self.value = value % self.modulus

    @classmethod
    def poly(cls, order, coeffs):
        """Polynomial over this field with given int coefficients, see polynomial.poly()."""
        return poly(order, [cls(c) for c in coeffs])

    @classmethod
    def _coerce(cls, a):
        # ints count as residues, other fields and types are foreign
        if isinstance(a, cls):
            return a.value

        if isinstance(a, int):
            return a

        return NotImplemented

    @classmethod
    def _inverse(cls, a):
        if not a % cls.modulus:
            raise ZeroDivisionError(f'zero has no inverse in {cls.__name__}')

        return int(gmpy2.invert(a, cls.modulus))

    def __int__(self):
        """Signed representative, closest to 0."""
        v = self.value
        return v - self.modulus if v > self.modulus // 2 else v

    def __add__(self, other):
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented

        return type(self)(self.value + b)

    __radd__ = __add__

    def __sub__(self, other):
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented

        return type(self)(self.value - b)

    def __rsub__(self, other):
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented

        return type(self)(b - self.value)

    def __mul__(self, other):
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented

        return type(self)(self.value * b)

    __rmul__ = __mul__

    def __truediv__(self, other):
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented

        return type(self)(self.value * self._inverse(b))

    def __rtruediv__(self, other):
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented

        return type(self)(b * self._inverse(self.value))

    def __neg__(self):
        return type(self)(-self.value)

    def __pos__(self):
        return self

    def __pow__(self, n):
        if not isinstance(n, int):
            return NotImplemented

        a = self.value
        if n < 0:
            a, n = self._inverse(a), -n
        return type(self)(int(gmpy2.powmod(a, n, self.modulus)))

    def reciprocal(self):
        """Multiplicative inverse, for nonzero residues."""
        return type(self)(self._inverse(self.value))

    def __eq__(self, other):
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented

        return (self.value - b) % self.modulus == 0

    def __hash__(self):
        # NB: consistent with == between residues only, not against ints
        return hash((self.modulus, self.value))

    def __bool__(self):
        return self.value != 0

    def __repr__(self):
        return f'{type(self).__name__}({self.value})'


numbers.Number.register(Residue)
