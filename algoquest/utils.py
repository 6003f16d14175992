"""Board helpers shared by the N-Queens solver and the analysis pipeline.

This module provides reusable, low-level primitives that the solver and the
validation hooks depend upon: conflict counting, solution validation and the
board transforms used for symmetry detection.

Representation
--------------
Placements are sequences of objects exposing ``row`` and ``col`` (``Queen`` or
``Position``). For the pair-counting routines a solution is flattened into a
1D list where ``board[row] = col``.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Sequence, Tuple


def solution_to_board(queens: Iterable) -> List[int]:
    """Flatten a placement into ``board[row] = col`` ordered by row."""
    return [queen.col for queen in sorted(queens, key=lambda q: q.row)]


def conflicts(board: Sequence[int]) -> int:
    """Compute the number of conflicting queen pairs in O(N).

    Uses counters per column and per diagonal. Rows are unique by
    representation, so only columns and both diagonals can clash.
    """
    col_count: Counter[int] = Counter()
    diag1: Counter[int] = Counter()
    diag2: Counter[int] = Counter()

    for row, col in enumerate(board):
        col_count[col] += 1
        diag1[row - col] += 1
        diag2[row + col] += 1

    def _pairs(counter: Counter[int]) -> int:
        total = 0
        for count in counter.values():
            if count > 1:
                total += count * (count - 1) // 2
        return total

    return _pairs(col_count) + _pairs(diag1) + _pairs(diag2)


def conflicts_on2(board: Sequence[int]) -> int:
    """Compute the number of conflicting queen pairs in O(N^2).

    Reference implementation for validation. Prefer ``conflicts`` in loops.
    """
    n = len(board)
    conflicts_count = 0
    for i in range(n):
        for j in range(i + 1, n):
            if board[i] == board[j] or abs(board[i] - board[j]) == abs(i - j):
                conflicts_count += 1
    return conflicts_count


def is_valid_solution(queens: Sequence, n: int) -> bool:
    """Return True if ``queens`` is a complete, non-attacking placement.

    Contract
    - Exactly ``n`` queens, one per row, every coordinate inside ``[0, n)``.
    - No pair shares a column or a diagonal (``conflicts(board) == 0``).
    """
    if len(queens) != n:
        return False
    rows = set()
    for queen in queens:
        if not (0 <= queen.row < n and 0 <= queen.col < n):
            return False
        rows.add(queen.row)
    if len(rows) != n:
        return False
    return conflicts(solution_to_board(queens)) == 0


def count_conflicts(queens: Iterable, position) -> int:
    """Count the queens that attack ``position`` (row, column or diagonal)."""
    total = 0
    for queen in queens:
        if (
            queen.row == position.row
            or queen.col == position.col
            or abs(queen.row - position.row) == abs(queen.col - position.col)
        ):
            total += 1
    return total


def rotate_queens(queens: Iterable, n: int) -> List[Tuple[int, int]]:
    """Rotate a placement by 90 degrees: ``(r, c) -> (c, n-1-r)``."""
    return [(queen.col, n - 1 - queen.row) for queen in queens]


def reflect_queens(queens: Iterable, n: int) -> List[Tuple[int, int]]:
    """Mirror a placement horizontally: ``(r, c) -> (r, n-1-c)``."""
    return [(queen.row, n - 1 - queen.col) for queen in queens]


def same_placement(first: Iterable[Tuple[int, int]], second: Iterable[Tuple[int, int]]) -> bool:
    """Order-independent equality of two coordinate collections."""
    first_list = list(first)
    second_list = list(second)
    if len(first_list) != len(second_list):
        return False
    return set(first_list) == set(second_list)
