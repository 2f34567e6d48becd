"""This module supports arithmetic with dense univariate polynomials.

Polynomials are represented as coefficient lists.
The polynomial a_0 + a_1 X + ... + a_n X^n corresponds
to the list [a_0, a_1, ... , a_n] of coefficients.
Leading coefficient a_n is nonzero, using [] for the zero polynomial.

Coefficients can be of any numeric type supporting +,-,* and truth testing
(a coefficient is zero iff it tests False). Division with remainder, GCDs,
integrals, monic normalization and root separation also use /, hence
require a field of coefficients: use fractions.Fraction, gmpy2.mpq, or
the prime fields of module gfp for exact results. Zero tests are exact,
also for floats; no epsilon is ever applied.

Coefficients can be read and written in either order: LE (little-endian,
constant term first) or BE (big-endian, leading term first), see
functions poly() and poly_coeffs(). Internally, LE order is used throughout.

The operators +,-,*,**,<<,>>,//,%, and function divmod are overloaded,
as well as == and != (also against scalars). Calling a polynomial evaluates it.
All polynomials are immutable: every operation returns a new polynomial.
"""

import numbers

LE = 'little'  # constant term first
BE = 'big'  # leading term first


class DivideByZeroPolynomial(ZeroDivisionError):
    """Division by the zero polynomial."""


class NegativeExponent(ValueError):
    """Polynomial raised to a negative power."""


class UndefinedGcd(ValueError):
    """GCD of two zero polynomials."""


class ZeroPolynomialInSeparation(ValueError):
    """Root separation of the zero polynomial."""


class Polynomial:
    """Polynomials represented as lists of coefficients, constant term first.

    Invariant: last element of attribute 'value' is nonzero (if 'value' nonempty).
    """

    __slots__ = 'value'

    def __init__(self, value=0, check=True):
        """Initialize polynomial to given value (zero polynomial, by default).

        A list or tuple value is taken as coefficients in LE order,
        a number as a constant polynomial.
        If check is False, value must be a list in canonical form already.
        """
        if check:
            value = self._intern(value)
        self.value = value

    @classmethod
    def _intern(cls, a):
        # convert a to internal format, if possible
        if isinstance(a, (list, tuple)):
            return cls._trim(list(a))

        a = cls._coerce(a)
        if a is NotImplemented:
            raise TypeError('polynomial or numeric coefficient expected')

        return a

    @staticmethod
    def _coerce(a):
        if isinstance(a, Polynomial):
            return a.value

        if isinstance(a, numbers.Number):
            return [a] if a else []

        return NotImplemented

    def __getitem__(self, key):  # NB: no set_item to prevent mutability
        if isinstance(key, slice):
            raise IndexError('slicing of polynomials not supported, use poly_coeffs() instead')

        if not isinstance(key, int):
            raise IndexError('use int for indexing polynomials')

        if key == -1 and not self.value:
            return 0  # e.g., for zero polynomial z we get z[z.degree()] == 0

        if key < 0:
            raise IndexError('negative index not allowed for nonzero polynomials')

        try:
            c = self.value[key]
        except IndexError:
            c = 0
        return c

    def __iter__(self):
        yield from self.value

    def __call__(self, t):
        """Evaluate polynomial at given t."""
        return self._eval(self.value, t)

    @staticmethod
    def _trim(a):
        # NB: in-place
        while a and not a[-1]:
            a.pop()
        return a

    @staticmethod
    def _deg(a):
        return len(a) - 1

    @staticmethod
    def _neg(a):
        return [-a_i for a_i in a]

    @staticmethod
    def _scale(s, a):
        if not s:
            return []

        return Polynomial._trim([s * a_i for a_i in a])

    @staticmethod
    def _add(a, b):
        if len(a) < len(b):
            a, b = b, a
        # len(a) >= len(b)
        c = a[:]
        for i, b_i in enumerate(b):
            c[i] = c[i] + b_i  # NB: no in-place ops on coefficients
        return Polynomial._trim(c)

    @staticmethod
    def _sub(a, b):
        c = a + [0] * (len(b) - len(a))
        for i, b_i in enumerate(b):
            c[i] = c[i] - b_i
        return Polynomial._trim(c)

    @staticmethod
    def _sum(polys):
        c = []
        for a in polys:
            if len(c) < len(a):
                c.extend([0] * (len(a) - len(c)))
            for i, a_i in enumerate(a):
                c[i] = c[i] + a_i
        return Polynomial._trim(c)

    @staticmethod
    def _mul(a, b):
        if len(a) > len(b):
            a, b = b, a
        # len(a) <= len(b)
        if not a:
            return []

        c = [0] * (len(a) + len(b) - 1)
        for i, a_i in enumerate(a):
            if a_i:
                for j, b_j in enumerate(b):
                    c[i + j] = c[i + j] + a_i * b_j
        return Polynomial._trim(c)  # coefficient rings may have zero divisors

    @staticmethod
    def _lshift(a, n):
        if n < 0:
            raise ValueError('negative shift count')

        return [0] * n + a if a else []

    @staticmethod
    def _rshift(a, n):
        if n < 0:
            raise ValueError('negative shift count')

        return a[n:]

    @staticmethod
    def _pow(a, n):
        if not isinstance(n, int):
            raise TypeError('int exponent required')

        if n < 0:
            raise NegativeExponent('negative exponent')

        if n == 0:
            return [1]  # NB: also for zero polynomial a

        b = a
        for i in range(n.bit_length() - 2, -1, -1):
            b = Polynomial._mul(b, b)
            if (n >> i) & 1:
                b = Polynomial._mul(b, a)
        return b

    @staticmethod
    def _compose(a, b):
        c = []
        for a_i in reversed(a):
            c = Polynomial._add([a_i], Polynomial._mul(c, b))
        return c

    @staticmethod
    def _mod(a, b):
        if not b:
            raise DivideByZeroPolynomial('division by zero polynomial')

        m = len(a)
        n = len(b)
        if m < n:
            return a

        b1 = b[-1]
        r = a[:]
        for i in range(m - n, -1, -1):
            # len(r) == i + n
            r_i = r.pop()  # NB: leading term of r dropped, no reliance on cancellation
            q_i = r_i / b1 if r_i else r_i  # zero stays exact
            if q_i:
                for j in range(n - 1):
                    r[i + j] = r[i + j] - q_i * b[j]
        return Polynomial._trim(r)

    @staticmethod
    def _divmod(a, b):
        if not b:
            raise DivideByZeroPolynomial('division by zero polynomial')

        m = len(a)
        n = len(b)
        if m < n:
            return [], a

        b1 = b[-1]
        q, r = [0] * (m - n + 1), a[:]
        for i in range(m - n, -1, -1):
            # len(r) == i + n
            r_i = r.pop()
            q[i] = q_i = r_i / b1 if r_i else r_i
            if q_i:
                for j in range(n - 1):
                    r[i + j] = r[i + j] - q_i * b[j]
        return Polynomial._trim(q), Polynomial._trim(r)

    @staticmethod
    def _eval(a, t):
        if not a:
            return 0

        if not t:
            return a[0]  # avoid multiplications by zero

        y = 0
        for a_i in reversed(a):
            y = a_i + y * t
        return y

    @staticmethod
    def _eval_deriv(a, t):
        y, dy = 0, 0
        for a_i in reversed(a):
            y, dy = y * t + a_i, dy * t + y
        return y, dy

    @staticmethod
    def _eval_derivs(a, t):
        if not a:
            return [0]

        # Taylor coefficients of a at t, updated per coefficient (Horner-style)
        d = []
        for a_i in reversed(a):
            if d:
                d = [d[0] * t + a_i] + [d[k] + t * d[k + 1] for k in range(len(d) - 1)] + d[-1:]
            else:
                d = [a_i]
        f = 1
        for k in range(2, len(d)):
            f *= k
            d[k] = d[k] * f  # k-th derivative = k! times k-th Taylor coefficient
        return d

    @staticmethod
    def _deriv(a):
        return Polynomial._trim([a_i * i for i, a_i in enumerate(a[1:], 1)])

    @staticmethod
    def _integral(a):
        if not a:
            return []

        return Polynomial._trim([0] + [a_i / i if a_i else a_i for i, a_i in enumerate(a, 1)])

    @staticmethod
    def _contract(a, t):
        # synthetic division by x - t, leading coefficient first
        r = 0
        q = []
        for a_i in reversed(a):
            r, q_i = a_i + r * t, r
            q.append(q_i)
        q.reverse()
        return Polynomial._trim(q), r

    @staticmethod
    def _monic(a):
        if not a or a[-1] == 1:
            return a

        a1 = a[-1]
        return [a_i / a1 if a_i else a_i for a_i in a]  # NB: a1 / a1 == 1 exactly

    @staticmethod
    def _gcd(a, b):
        if not a and not b:
            raise UndefinedGcd('gcd of two zero polynomials is undefined')

        while b:
            a, b = b, Polynomial._mod(a, b)
        return Polynomial._monic(a)

    def degree(self):
        """Degree of polynomial (-1 for zero polynomial)."""
        return self._deg(self.value)

    def monic(self):
        """Monic version of polynomial.

        Zero polynomial remains unchanged.
        """
        return Polynomial(self._monic(self.value), check=False)

    def __neg__(self):
        return Polynomial(self._neg(self.value), check=False)

    def __pos__(self):
        return self

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return Polynomial(self._add(self.value, other), check=False)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return Polynomial(self._sub(self.value, other), check=False)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return Polynomial(self._sub(other, self.value), check=False)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return Polynomial(self._mul(self.value, other), check=False)

    def __rmul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return Polynomial(self._mul(other, self.value), check=False)

    def __lshift__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return Polynomial(self._lshift(self.value, other), check=False)

    def __rlshift__(self, other):
        return NotImplemented

    def __rshift__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return Polynomial(self._rshift(self.value, other), check=False)

    def __rrshift__(self, other):
        return NotImplemented

    def __floordiv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return Polynomial(self._divmod(self.value, other)[0], check=False)

    def __rfloordiv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return Polynomial(self._divmod(other, self.value)[0], check=False)

    def __mod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return Polynomial(self._mod(self.value, other), check=False)

    def __rmod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return Polynomial(self._mod(other, self.value), check=False)

    def __divmod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        q, r = self._divmod(self.value, other)
        return Polynomial(q, check=False), Polynomial(r, check=False)

    def __rdivmod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        q, r = self._divmod(other, self.value)
        return Polynomial(q, check=False), Polynomial(r, check=False)

    def __pow__(self, other):
        return Polynomial(self._pow(self.value, other), check=False)

    def __repr__(self):
        return f'{type(self).__name__}({self.value!r})'

    def __eq__(self, other):
        """Equality test."""
        other = self._coerce(other)
        if other is NotImplemented:
            return False

        return self.value == other

    def __ne__(self, other):
        """Negated equality test."""
        other = self._coerce(other)
        if other is NotImplemented:
            return True

        return self.value != other

    def __hash__(self):
        """Make polynomials hashable (e.g., for LRU caching).

        Constant polynomials hash like their value, as they compare equal to it.
        NB: elements of GF(p) equal more than one int, hence polynomials over GF(p)
        hash consistently among themselves only.
        """
        a = self.value
        if len(a) <= 1:
            return hash(a[0] if a else 0)

        return hash(tuple(a))

    def __bool__(self):
        """Truth value testing.

        Return False if this polynomial is zero, True otherwise.
        """
        return bool(self.value)


def _check_order(order):
    if order not in (LE, BE):
        raise ValueError("order must be either 'little' or 'big'")


def poly(order, coeffs):
    """Create polynomial from coefficients given in order LE or BE."""
    _check_order(order)
    a = list(coeffs)
    if order == BE:
        a.reverse()
    return Polynomial(Polynomial._trim(a), check=False)


def poly_coeffs(order, p):
    """Return list of coefficients of polynomial p in order LE or BE."""
    _check_order(order)
    a = Polynomial._intern(p)[:]
    if order == BE:
        a.reverse()
    return a


def poly_degree(p):
    """Degree of polynomial p (-1 if p is zero polynomial)."""
    return Polynomial._deg(Polynomial._intern(p))


def poly_is_zero(p):
    """Test whether p is the zero polynomial."""
    return Polynomial._intern(p) == []


def poly_is_one(p):
    """Test whether p is the constant polynomial 1."""
    return Polynomial._intern(p) == [1]


def const_poly(k):
    """Constant polynomial with value k."""
    return poly(LE, [k])


zero = poly(LE, [])
one = const_poly(1)
x = poly(LE, [0, 1])


def scale_poly(s, p):
    """Multiply polynomial p by scalar s."""
    return Polynomial(Polynomial._scale(s, Polynomial._intern(p)), check=False)


def negate_poly(p):
    """Negate polynomial p."""
    return Polynomial(Polynomial._neg(Polynomial._intern(p)), check=False)


def add_poly(p, q):
    """Add polynomials p and q."""
    a = Polynomial._intern(p)
    b = Polynomial._intern(q)
    return Polynomial(Polynomial._add(a, b), check=False)


def sub_poly(p, q):
    """Subtract polynomial q from polynomial p."""
    a = Polynomial._intern(p)
    b = Polynomial._intern(q)
    return Polynomial(Polynomial._sub(a, b), check=False)


def sum_polys(ps):
    """Sum of all polynomials in iterable ps (zero polynomial if ps is empty)."""
    return Polynomial(Polynomial._sum(map(Polynomial._intern, ps)), check=False)


def mult_poly(p, q):
    """Multiply polynomials p and q."""
    a = Polynomial._intern(p)
    b = Polynomial._intern(q)
    return Polynomial(Polynomial._mul(a, b), check=False)


def shift_poly(p, n):
    """Multiply polynomial p by X^n, for n >= 0."""
    return Polynomial(Polynomial._lshift(Polynomial._intern(p), n), check=False)


def pow_poly(p, n):
    """Polynomial p to the power of n, for n >= 0.

    The result for n=0 is the polynomial 1, also if p is the zero polynomial.
    """
    return Polynomial(Polynomial._pow(Polynomial._intern(p), n), check=False)


def compose_poly(f, g):
    """Composition of polynomials f and g.

    The result h satisfies h(t) == f(g(t)) for all t. Computing h takes
    O(deg(f)^2 deg(g)) operations; to evaluate f(g(t)) for a few values of t
    it is cheaper to evaluate g and f in turn.
    """
    a = Polynomial._intern(f)
    b = Polynomial._intern(g)
    return Polynomial(Polynomial._compose(a, b), check=False)


def quot_rem_poly(a, b):
    """Divide polynomial a by polynomial b with remainder, for nonzero b.

    Return q, r satisfying a == q*b + r with deg(r) < deg(b).
    """
    a = Polynomial._intern(a)
    b = Polynomial._intern(b)
    q, r = Polynomial._divmod(a, b)
    return Polynomial(q, check=False), Polynomial(r, check=False)


def quot_poly(a, b):
    """Quotient of polynomial a divided by polynomial b, for nonzero b."""
    a = Polynomial._intern(a)
    b = Polynomial._intern(b)
    return Polynomial(Polynomial._divmod(a, b)[0], check=False)


def rem_poly(a, b):
    """Reduce polynomial a modulo polynomial b, for nonzero b."""
    a = Polynomial._intern(a)
    b = Polynomial._intern(b)
    return Polynomial(Polynomial._mod(a, b), check=False)


def eval_poly(p, t):
    """Evaluate polynomial p at t (Horner's rule)."""
    return Polynomial._eval(Polynomial._intern(p), t)


def eval_poly_deriv(p, t):
    """Evaluate polynomial p and its derivative at t, returned as a pair."""
    return Polynomial._eval_deriv(Polynomial._intern(p), t)


def eval_poly_derivs(p, t):
    """Evaluate polynomial p and all its nonzero derivatives at t.

    Return list [p(t), p'(t), p''(t), ...] of length deg(p)+1,
    or [0] if p is the zero polynomial. The list is computed in a single
    pass over the coefficients of p.
    """
    return Polynomial._eval_derivs(Polynomial._intern(p), t)


def poly_deriv(p):
    """Derivative of polynomial p."""
    return Polynomial(Polynomial._deriv(Polynomial._intern(p)), check=False)


def poly_integral(p):
    """Integral of polynomial p from 0 to X (constant term 0)."""
    return Polynomial(Polynomial._integral(Polynomial._intern(p)), check=False)


def contract_poly(p, t):
    """Divide out root t of polynomial p.

    Return q, r satisfying p == q*(X - t) + r, where r is a scalar equal to p(t).
    """
    q, r = Polynomial._contract(Polynomial._intern(p), t)
    return Polynomial(q, check=False), r


def monic_poly(p):
    """Monic version of polynomial p, leaving the zero polynomial unchanged."""
    return Polynomial(Polynomial._monic(Polynomial._intern(p)), check=False)


def gcd_poly(a, b):
    """Greatest common divisor of polynomials a and b, not both zero.

    The result is monic.
    """
    a = Polynomial._intern(a)
    b = Polynomial._intern(b)
    return Polynomial(Polynomial._gcd(a, b), check=False)


def separate_roots(p):
    """Separate polynomial p into factors without repeated roots.

    Return list of polynomials whose product is p, up to a scalar factor.
    The first factor contains all roots of p, the second factor contains
    all roots of multiplicity at least 2, and so on.

    Division must be exact for the roots to be separated completely,
    hence exact coefficients (e.g., fractions.Fraction or gmpy2.mpq) are
    recommended. Over a field of characteristic p, factors with vanishing
    derivative are not separated any further.
    """
    a = Polynomial._intern(p)
    if not a:
        raise ZeroPolynomialInSeparation('root separation of zero polynomial')

    factors = []
    while True:
        g = Polynomial._gcd(a, Polynomial._deriv(a))
        if g == [1] or len(g) == len(a):
            factors.append(a)
            break

        factors.append(Polynomial._divmod(a, g)[0])
        a = g
    return [Polynomial(f, check=False) for f in factors]
