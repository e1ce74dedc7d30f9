import unittest

from hull3d.faces import FaceStore, edge_key, split_edge_key
from hull3d.geom import Pt, centroid

TETRA = [Pt(0, 0, 0), Pt(1, 0, 0), Pt(0, 1, 0), Pt(0, 0, 1)]


class EdgeKeyTests(unittest.TestCase):
    def test_unordered(self):
        self.assertEqual(edge_key(3, 5), edge_key(5, 3))
        self.assertEqual(edge_key(3, 5), (3 << 32) | 5)

    def test_split(self):
        self.assertEqual(split_edge_key(edge_key(9, 2)), (2, 9))
        self.assertEqual(split_edge_key(edge_key(0, 70000)), (0, 70000))


class FaceStoreTests(unittest.TestCase):
    def setUp(self):
        self.store = FaceStore()
        self.interior = centroid(TETRA)

    def test_add_face_flips_inward_face(self):
        fid = self.store.add_face(0, 1, 2, TETRA, self.interior)
        f = self.store[fid]
        self.assertEqual(fid, 0)
        self.assertEqual(f.v, (0, 2, 1))
        self.assertEqual(f.normal, Pt(0, 0, -1))
        self.assertEqual(f.offset, 0.0)
        self.assertLess(f.value(self.interior), 0)

    def test_add_face_keeps_outward_face(self):
        fid = self.store.add_face(1, 2, 3, TETRA, self.interior)
        f = self.store[fid]
        self.assertEqual(f.v, (1, 2, 3))
        self.assertEqual(f.normal, Pt(1, 1, 1))
        self.assertEqual(f.offset, -1.0)
        for p in TETRA[1:]:
            self.assertAlmostEqual(f.value(p), 0.0)

    def test_every_seed_face_is_outward(self):
        for a, b, c in ((0, 1, 2), (0, 3, 1), (0, 2, 3), (1, 3, 2)):
            self.store.add_face(a, b, c, TETRA, self.interior)
        for f in self.store:
            self.assertLess(f.value(self.interior), 0)
            opposite = ({0, 1, 2, 3} - set(f.v)).pop()
            self.assertLess(f.value(TETRA[opposite]), 0)
            for i in f.v:
                self.assertAlmostEqual(f.value(TETRA[i]), 0.0)

    def test_delete_is_tombstone(self):
        a = self.store.add_face(0, 1, 2, TETRA, self.interior)
        b = self.store.add_face(1, 2, 3, TETRA, self.interior)
        self.store.delete(a)
        self.assertEqual(len(self.store), 2)
        self.assertTrue(self.store[a].deleted)
        self.assertEqual(self.store.alive_ids(), [b])
        self.assertEqual(self.store.alive(), [self.store[b]])
        with self.assertRaises(ValueError):
            self.store.delete(a)

    def test_face_edges(self):
        fid = self.store.add_face(1, 2, 3, TETRA, self.interior)
        self.assertEqual(self.store[fid].edges(), [(1, 2), (2, 3), (3, 1)])


if __name__ == "__main__":
    unittest.main()
