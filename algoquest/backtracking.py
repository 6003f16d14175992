"""Exhaustive backtracking solver for the N-Queens problem.

This module implements the constraint solver behind the N-Queens
visualisation. A ``ConstraintSolver`` is bound to a board size and exposes:

- is_valid_placement(queens, candidate): live validity feedback for manual
    placement.
- get_attack_squares(queen): every square a queen attacks, clipped to the board.
- find_all_solutions(): exhaustive row-by-row backtracking enumerating every
    solution, with search statistics.
- has_symmetry(solution): rotation/reflection invariance flags.
- get_hint_for_position(queens, row): least-conflicting column for assisted play.

Implementation overview
-----------------------
- State representation: the working placement is a list of ``Queen`` objects,
    one per filled row. It is mutated in place (append on placement, pop on
    backtrack), so accepted solutions are snapshotted into tuples.
- Search strategy: depth-first search implemented iteratively with an explicit
    stack of decision frames, avoiding Python recursion overhead.
- Statistics: ``nodes_visited`` counts every frame entered (including complete
    placements), ``backtracks`` counts every placement undone after its subtree
    was explored, and ``branching_factor`` is a running average of the number
    of valid columns per node, updated as ``bf = (bf + valid) / 2``.

Contract (public API)
---------------------
- Input: board size ``n`` (positive integer). Callers bound ``n``; the search
    is exhaustive with no timeout.
- Output: ``find_all_solutions`` returns a list of solutions, each a tuple of
    ``n`` queens ordered by row. An empty list (n = 2 or 3) is a valid result.
- Determinism: columns are tried left to right at every row, so solutions come
    out in lexicographic column order.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Sequence, Tuple, TypedDict

from .utils import count_conflicts, reflect_queens, rotate_queens, same_placement


@dataclass(frozen=True)
class Position:
    """A board square, 0-indexed."""

    row: int
    col: int


@dataclass(frozen=True)
class Queen:
    """A placed queen; ``id`` is stable for a given square."""

    row: int
    col: int

    @property
    def id(self) -> str:
        return f"{self.row}-{self.col}"

    @property
    def position(self) -> Position:
        return Position(self.row, self.col)


Solution = Tuple[Queen, ...]


@dataclass
class SearchStats:
    """Counters collected by ``find_all_solutions``."""

    nodes_visited: int = 0
    backtracks: int = 0
    branching_factor: float = 0.0


class SymmetryFlags(TypedDict):
    rotation: bool
    reflection: bool


@dataclass
class _Frame:
    """Mutable stack frame capturing the state at a row."""

    row: int
    next_col: int = 0
    valid_placements: int = 0


class ConstraintSolver:
    """N-Queens solver for an ``n x n`` board.

    Parameters
    ----------
    n : int
        Board dimension.
    """

    def __init__(self, n: int):
        self.n = n
        self._solutions: List[Solution] = []
        self._stats = SearchStats()

    def is_valid_placement(self, queens: Sequence, candidate) -> bool:
        """Return True iff no queen shares a row, column or diagonal with ``candidate``."""
        for queen in queens:
            if queen.row == candidate.row or queen.col == candidate.col:
                return False
            if abs(queen.row - candidate.row) == abs(queen.col - candidate.col):
                return False
        return True

    def get_attack_squares(self, queen) -> List[Position]:
        """List the squares attacked by ``queen``.

        Row and column squares come first (interleaved by index), followed by
        the four diagonal rays ordered by distance. The queen's own square is
        never included.
        """
        n = self.n
        attacks: List[Position] = []

        for i in range(n):
            if i != queen.col:
                attacks.append(Position(queen.row, i))
            if i != queen.row:
                attacks.append(Position(i, queen.col))

        for distance in range(1, n):
            for d_row, d_col in ((1, 1), (1, -1), (-1, 1), (-1, -1)):
                row = queen.row + d_row * distance
                col = queen.col + d_col * distance
                if 0 <= row < n and 0 <= col < n:
                    attacks.append(Position(row, col))

        return attacks

    def find_all_solutions(self) -> List[Solution]:
        """Enumerate every solution via exhaustive iterative backtracking.

        Returns
        -------
        list[tuple[Queen, ...]]
            All solutions, each ordered by row. Solutions are immutable
            snapshots taken when the last row is filled.

        Notes
        -----
        - Resets the search statistics before starting.
        - Columns are tried in natural order 0..n-1 at every row, and the
          placement is always undone before the next column is tried.
        - Worst case is the full N-Queens search space; intended for the
          bounded board sizes exposed to users.
        """
        self._solutions = []
        self._stats = SearchStats()

        n = self.n
        queens: List[Queen] = []
        stack: List[_Frame] = []
        self._enter(stack, queens, 0)

        while stack:
            frame = stack[-1]

            if frame.next_col >= n:
                # Every column of this row has been tried; retreat one level.
                stack.pop()
                if frame.valid_placements > 0:
                    self._stats.branching_factor = (
                        self._stats.branching_factor + frame.valid_placements
                    ) / 2
                if stack:
                    queens.pop()
                    self._stats.backtracks += 1
                continue

            col = frame.next_col
            frame.next_col += 1
            candidate = Position(frame.row, col)
            if not self.is_valid_placement(queens, candidate):
                continue

            frame.valid_placements += 1
            queens.append(Queen(frame.row, col))
            self._enter(stack, queens, frame.row + 1)

        return list(self._solutions)

    def _enter(self, stack: List[_Frame], queens: List[Queen], row: int) -> None:
        """Visit the node for ``row``; complete placements are recorded and unwound."""
        self._stats.nodes_visited += 1
        if row == self.n:
            self._solutions.append(tuple(queens))
            if stack:
                queens.pop()
                self._stats.backtracks += 1
            return
        stack.append(_Frame(row))

    def get_search_stats(self) -> SearchStats:
        """Return a copy of the statistics gathered by the last search."""
        return replace(self._stats)

    def has_symmetry(self, solution: Sequence) -> SymmetryFlags:
        """Flag whether ``solution`` maps onto itself under rotation or reflection."""
        coordinates = [(queen.row, queen.col) for queen in solution]
        return {
            "rotation": same_placement(coordinates, rotate_queens(solution, self.n)),
            "reflection": same_placement(coordinates, reflect_queens(solution, self.n)),
        }

    def get_hint_for_position(self, queens: Sequence, row: int) -> int:
        """Return the column of ``row`` with the fewest conflicts.

        Ties go to the lowest column index. Returns ``-1`` on an empty board.
        """
        best_col = -1
        min_conflicts = None
        for col in range(self.n):
            found = count_conflicts(queens, Position(row, col))
            if min_conflicts is None or found < min_conflicts:
                min_conflicts = found
                best_col = col
        return best_col
