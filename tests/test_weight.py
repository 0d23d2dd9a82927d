import unittest

import numpy as np

from blockfall.exceptions import OutOfBoundsError, ShapeMismatchError
from blockfall.game.geometry import Coordinate, Dimension
from blockfall.game.weight import Weight


def bottom_row_filled() -> Weight:
    cells = np.zeros((20, 10), dtype=np.int8)
    cells[19, :] = 1
    return Weight(Dimension(10, 20), cells)


# [] .
# [][]
#  .[]
S_LEFT = Weight(Dimension(2, 3), [1, 0, 1, 1, 0, 1])


class TestWeight(unittest.TestCase):

    def test_new(self):
        w = Weight(Dimension(2, 3), [1, 0, 1, 0, 1, 1])
        self.assertEqual(w.size, Dimension(2, 3))
        self.assertEqual(w.cells.tolist(), [[1, 0], [1, 0], [1, 1]])
        self.assertEqual(w.weight(Coordinate(1, 2)), 1)
        self.assertEqual(w.weight(Coordinate(1, 0)), 0)

    def test_size_mismatch(self):
        with self.assertRaises(ShapeMismatchError):
            Weight(Dimension(2, 3), [1, 0, 1])

    def test_fits(self):
        a = Weight.zeros(Dimension(10, 20))
        b = Weight.zeros(Dimension(2, 3))
        self.assertTrue(a.fits(Coordinate(0, 0), b))
        self.assertTrue(a.fits(Coordinate(8, 17), b))
        self.assertFalse(a.fits(Coordinate(9, 17), b))
        self.assertFalse(a.fits(Coordinate(8, 18), b))
        self.assertFalse(a.fits(Coordinate(-1, 0), b))

    def test_overlap_top_left(self):
        a = bottom_row_filled()
        expected = a.cells.copy()
        expected[0:3, 0:2] = [[1, 0], [1, 1], [0, 1]]
        self.assertEqual(a.overlap(Coordinate(0, 0), S_LEFT), Weight(a.size, expected))

    def test_overlap_bottom_right(self):
        a = bottom_row_filled()
        out = a.overlap(Coordinate(8, 16), S_LEFT)
        self.assertEqual(out.cells[16:19, 8:10].tolist(), [[1, 0], [1, 1], [0, 1]])
        self.assertEqual(out.cells[19].tolist(), [1] * 10)
        self.assertTrue(out.valid())

    def test_overlap_out_of_bounds(self):
        a = bottom_row_filled()
        with self.assertRaises(OutOfBoundsError):
            a.overlap(Coordinate(9, 16), S_LEFT)
        with self.assertRaises(OutOfBoundsError):
            a.overlap(Coordinate(8, 18), S_LEFT)

    def test_overlap_collision(self):
        a = bottom_row_filled()
        out = a.overlap(Coordinate(8, 17), S_LEFT)
        self.assertEqual(out.cells[19].tolist(), [1, 1, 1, 1, 1, 1, 1, 1, 1, 2])
        self.assertFalse(out.valid())

    def test_overlap_is_cellwise_sum(self):
        a = Weight(Dimension(3, 3), [0, 1, 0, 1, 0, 1, 0, 0, 0])
        b = Weight(Dimension(2, 2), [1, 1, 1, 1])
        out = a.overlap(Coordinate(1, 1), b)
        self.assertEqual(out.cells.tolist(), [[0, 1, 0], [1, 1, 2], [0, 1, 1]])

    def test_overlap_leaves_inputs_untouched(self):
        a = bottom_row_filled()
        before = a.cells.copy()
        a.overlap(Coordinate(0, 0), S_LEFT)
        self.assertTrue(np.array_equal(a.cells, before))


if __name__ == '__main__':
    unittest.main()
