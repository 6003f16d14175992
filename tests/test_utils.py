"""Tests for the board helpers."""

import unittest

from algoquest.backtracking import Queen
from algoquest.utils import (
    conflicts,
    conflicts_on2,
    count_conflicts,
    is_valid_solution,
    reflect_queens,
    rotate_queens,
    same_placement,
    solution_to_board,
)


class ConflictTests(unittest.TestCase):

    def test_conflict_counters_agree(self):
        for board in ([1, 3, 0, 2], [0, 1, 2, 3], [0, 0, 0, 0], [2, 0, 3, 1, 4]):
            with self.subTest(board=board):
                self.assertEqual(conflicts(board), conflicts_on2(board))

    def test_known_values(self):
        self.assertEqual(conflicts([1, 3, 0, 2]), 0)
        self.assertEqual(conflicts([0, 1, 2, 3]), 6)

    def test_count_conflicts(self):
        queens = [Queen(0, 0), Queen(1, 2)]
        self.assertEqual(count_conflicts(queens, Queen(2, 2)), 2)
        self.assertEqual(count_conflicts(queens, Queen(3, 1)), 0)


class ValidationTests(unittest.TestCase):

    def test_valid_solution(self):
        solution = (Queen(0, 1), Queen(1, 3), Queen(2, 0), Queen(3, 2))
        self.assertTrue(is_valid_solution(solution, 4))
        self.assertEqual(solution_to_board(reversed(solution)), [1, 3, 0, 2])

    def test_incomplete_or_out_of_bounds(self):
        self.assertFalse(is_valid_solution((Queen(0, 1), Queen(1, 3)), 4))
        self.assertFalse(is_valid_solution((Queen(0, 1), Queen(1, 3), Queen(2, 0), Queen(3, 4)), 4))

    def test_duplicate_rows_rejected(self):
        self.assertFalse(is_valid_solution((Queen(0, 1), Queen(0, 3), Queen(2, 0), Queen(3, 2)), 4))


class TransformTests(unittest.TestCase):

    def test_rotation_and_reflection(self):
        queens = [Queen(0, 1)]
        self.assertEqual(rotate_queens(queens, 4), [(1, 3)])
        self.assertEqual(reflect_queens(queens, 4), [(0, 2)])

    def test_same_placement_ignores_order(self):
        self.assertTrue(same_placement([(0, 1), (1, 3)], [(1, 3), (0, 1)]))
        self.assertFalse(same_placement([(0, 1)], [(0, 1), (1, 3)]))


if __name__ == "__main__":
    unittest.main()
