import unittest

from hull3d.geom import Pt, add, as_points, centroid, cross, div, dot, neg, norm, scale, sub
from hull3d.predicates import orient3d, plane_of, plane_value, visible_from_point
from hull3d.tolerances import EPS, Tolerances


class VectorMathTests(unittest.TestCase):
    def test_arithmetic(self):
        a = Pt(1.0, 2.0, 3.0)
        b = Pt(-1.0, 0.5, 2.0)
        self.assertEqual(add(a, b), Pt(0.0, 2.5, 5.0))
        self.assertEqual(sub(a, b), Pt(2.0, 1.5, 1.0))
        self.assertEqual(scale(a, 2.0), Pt(2.0, 4.0, 6.0))
        self.assertEqual(div(a, 2.0), Pt(0.5, 1.0, 1.5))
        self.assertEqual(neg(a), Pt(-1.0, -2.0, -3.0))
        self.assertEqual(a + b, add(a, b))
        self.assertEqual(a - b, sub(a, b))
        self.assertEqual(2.0 * a, a * 2.0)
        self.assertEqual(a / 2.0, div(a, 2.0))
        self.assertEqual(-a, neg(a))

    def test_dot_cross_norm(self):
        x, y, z = Pt(1, 0, 0), Pt(0, 1, 0), Pt(0, 0, 1)
        self.assertEqual(cross(x, y), z)
        self.assertEqual(cross(y, z), x)
        self.assertEqual(cross(y, x), Pt(0, 0, -1))
        self.assertEqual(dot(Pt(1, 2, 3), Pt(4, 5, 6)), 32)
        self.assertAlmostEqual(norm(Pt(3, 4, 12)), 13.0)

    def test_cross_is_orthogonal(self):
        a, b = Pt(0.3, -1.2, 2.5), Pt(4.0, 0.1, -0.7)
        c = cross(a, b)
        self.assertAlmostEqual(dot(c, a), 0.0, places=12)
        self.assertAlmostEqual(dot(c, b), 0.0, places=12)

    def test_centroid(self):
        c = centroid([Pt(0, 0, 0), Pt(2, 0, 0), Pt(0, 2, 0), Pt(0, 0, 2)])
        self.assertEqual(c, Pt(0.5, 0.5, 0.5))
        with self.assertRaises(ValueError):
            centroid([])

    def test_as_points_keeps_order(self):
        pts = as_points([(0, 0, 1), [1, 2, 3], Pt(4, 5, 6)])
        self.assertEqual(pts, [Pt(0.0, 0.0, 1.0), Pt(1.0, 2.0, 3.0), Pt(4, 5, 6)])
        self.assertEqual(list(pts[1]), [1.0, 2.0, 3.0])


class PredicateTests(unittest.TestCase):
    def test_orient3d_sign(self):
        a, b, c = Pt(0, 0, 0), Pt(1, 0, 0), Pt(0, 1, 0)
        self.assertGreater(orient3d(a, b, c, Pt(0, 0, 1)), 0)
        self.assertLess(orient3d(a, b, c, Pt(0, 0, -1)), 0)
        self.assertEqual(orient3d(a, b, c, Pt(0.3, 0.3, 0)), 0)

    def test_plane_of_contains_vertices(self):
        a, b, c = Pt(1, 0, 0), Pt(0, 1, 0), Pt(0, 0, 1)
        n, d = plane_of(a, b, c)
        for p in (a, b, c):
            self.assertAlmostEqual(plane_value(n, d, p), 0.0)
        self.assertLess(plane_value(n, d, Pt(0, 0, 0)), 0)

    def test_visibility_is_strict(self):
        n, d = Pt(0, 0, 1), 0.0
        self.assertTrue(visible_from_point(n, d, Pt(0, 0, 1e-3)))
        self.assertFalse(visible_from_point(n, d, Pt(5, 5, 0)))
        self.assertFalse(visible_from_point(n, d, Pt(0, 0, EPS / 2)))
        self.assertTrue(visible_from_point(n, d, Pt(0, 0, 1e-6), eps=1e-7))
        self.assertFalse(visible_from_point(n, d, Pt(0, 0, 1e-6), eps=1e-5))


class TolerancesTests(unittest.TestCase):
    def test_defaults_and_uniform(self):
        tol = Tolerances()
        self.assertEqual((tol.collinear, tol.coplanar, tol.visible), (EPS, EPS, EPS))
        u = Tolerances.uniform(1e-6)
        self.assertEqual((u.collinear, u.coplanar, u.visible), (1e-6, 1e-6, 1e-6))

    def test_negative_rejected(self):
        with self.assertRaises(ValueError):
            Tolerances(visible=-1.0)


if __name__ == "__main__":
    unittest.main()
