"""Lagrange interpolation.

For distinct nodes x_0, ..., x_n, the node polynomial is l(X) = (X - x_0) ... (X - x_n),
and the Lagrange basis polynomials are l_i(X) = w_i l(X) / (X - x_i), with
barycentric weights w_i = 1 / prod_{j != i} (x_i - x_j). Then l_i(x_j) = [i == j].
"""

from densepoly.polynomial import LE, poly, one, mult_poly, contract_poly, scale_poly, sum_polys


def _check_nodes(xs):
    for i in range(len(xs)):
        for j in range(i):
            if xs[i] == xs[j]:
                raise ValueError('interpolation nodes must be distinct')


def lagrange(xs):
    """Node polynomial (X - x_0) ... (X - x_n) for given nodes xs."""
    p = one
    for x_i in xs:
        p = mult_poly(p, poly(LE, [-x_i, 1]))
    return p


def lagrange_weights(xs):
    """Barycentric weights for given distinct nodes xs."""
    xs = list(xs)
    _check_nodes(xs)
    w = []
    for i, x_i in enumerate(xs):
        d = x_i**0  # one, of same type as x_i
        for j, x_j in enumerate(xs):
            if j != i:
                d = d * (x_i - x_j)
        w.append(1 / d)
    return w


def lagrange_basis(xs):
    """Lagrange basis polynomials for given distinct nodes xs."""
    xs = list(xs)
    w = lagrange_weights(xs)
    l = lagrange(xs)
    return [scale_poly(w_i, contract_poly(l, x_i)[0]) for w_i, x_i in zip(w, xs)]


def interpolate(xs, ys):
    """Polynomial of degree at most n through the points (x_i, y_i), i = 0, ..., n."""
    xs = list(xs)
    ys = list(ys)
    if len(xs) != len(ys):
        raise ValueError('number of nodes and values differ')

    return sum_polys(scale_poly(y_i, l_i) for y_i, l_i in zip(ys, lagrange_basis(xs)))


def neville(points, t):
    """Value at t of the polynomial through given points (x_i, y_i), using Neville's algorithm.

    No polynomial coefficients are computed.
    """
    xs = [x_i for x_i, _ in points]
    if not xs:
        raise ValueError('at least one point required')

    _check_nodes(xs)
    p = [y_i for _, y_i in points]
    n = len(p)
    for k in range(1, n):
        for i in range(n - k):
            p[i] = ((t - xs[i + k]) * p[i] + (xs[i] - t) * p[i + 1]) / (xs[i] - xs[i + k])
    return p[0]
