import unittest
from fractions import Fraction
from densepoly import bernstein
from densepoly.gmpy import mpq
from densepoly.polynomial import LE, poly, zero, one, x, const_poly, eval_poly, sum_polys, pow_poly

F = Fraction


class Bernstein(unittest.TestCase):

    def test_basis(self):
        self.assertEqual(bernstein.bernstein(0, 0), one)
        self.assertEqual(bernstein.bernstein(1, 0), poly(LE, [1, -1]))
        self.assertEqual(bernstein.bernstein(1, 1), x)
        self.assertEqual(bernstein.bernstein(2, 0), poly(LE, [1, -2, 1]))
        self.assertEqual(bernstein.bernstein(2, 1), poly(LE, [0, 2, -2]))
        self.assertEqual(bernstein.bernstein(2, 2), pow_poly(x, 2))
        self.assertEqual(bernstein.bernstein(3, 5), zero)
        self.assertEqual(bernstein.bernstein(3, -1), zero)
        for n in range(6):
            b = bernstein.bernsteins(n)
            self.assertEqual(len(b), n + 1)
            self.assertEqual(sum_polys(b), one)  # partition of unity

    def test_eval(self):
        for n in range(5):
            for v in range(-1, n + 2):
                for t in (mpq(0), mpq(1, 3), mpq(1), mpq(-2)):
                    self.assertEqual(bernstein.eval_bernstein(n, v, t),
                                     eval_poly(bernstein.bernstein(n, v), t))

    def test_fit(self):
        self.assertEqual(bernstein.bernstein_fit(3, lambda s: s**2), [0, mpq(1, 9), mpq(4, 9), 1])
        self.assertEqual(bernstein.bernstein_fit(0, lambda s: s + 1), [1])
        c = bernstein.bernstein_fit(4, lambda s: 3 * s - 1)
        # Bernstein approximation reproduces linear functions
        self.assertEqual(bernstein.bernstein_to_poly(c), poly(LE, [-1, 3]))

    def test_de_casteljau(self):
        rows = bernstein.de_casteljau([0, 1, 0], mpq(1, 2))
        self.assertEqual(rows, [[0, 1, 0], [mpq(1, 2), mpq(1, 2)], [mpq(1, 2)]])
        self.assertEqual(bernstein.eval_bernstein_series([], mpq(1, 2)), 0)
        c = [F(1), F(-2), F(5), F(3)]
        p = bernstein.bernstein_to_poly(c)
        for t in (F(0), F(1, 4), F(2, 3), F(1), F(3)):
            self.assertEqual(bernstein.eval_bernstein_series(c, t), eval_poly(p, t))

    def test_split(self):
        c = [F(1), F(-2), F(5), F(3)]
        t = F(1, 3)
        left, right = bernstein.split_bernstein_series(c, t)
        self.assertEqual(len(left), len(c))
        self.assertEqual(len(right), len(c))
        self.assertEqual(left[0], c[0])
        self.assertEqual(right[-1], c[-1])
        self.assertEqual(left[-1], right[0])
        for s in (F(0), F(1, 5), F(1, 2), F(1)):
            self.assertEqual(bernstein.eval_bernstein_series(left, s),
                             bernstein.eval_bernstein_series(c, t * s))
            self.assertEqual(bernstein.eval_bernstein_series(right, s),
                             bernstein.eval_bernstein_series(c, t + (1 - t) * s))

    def test_conversion(self):
        c = [F(1), F(-2), F(5), F(3)]
        self.assertEqual(bernstein.poly_to_bernstein(bernstein.bernstein_to_poly(c)), c)
        self.assertEqual(bernstein.poly_to_bernstein(x, 2), [0, 0.5, 1])
        self.assertEqual(bernstein.poly_to_bernstein(one, 2), [1, 1, 1])
        self.assertEqual(bernstein.poly_to_bernstein(zero), [])
        self.assertEqual(bernstein.bernstein_to_poly([]), zero)
        self.assertEqual(bernstein.bernstein_to_poly([2, 2, 2]), const_poly(2))
        self.assertRaises(ValueError, bernstein.poly_to_bernstein, pow_poly(x, 2), 1)


if __name__ == "__main__":
    unittest.main()
