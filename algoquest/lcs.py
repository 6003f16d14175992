"""Longest Common Subsequence engine for two, three or more sequences.

The engine builds dense dynamic-programming tables bottom-up and reconstructs
one optimal alignment so the presentation layer can replay the fill order and
highlight the traceback.

Entry points
------------
- SequenceAlignmentEngine.solve_two_strings(a, b): classic O(m*n) table plus
    LCS string and alignment path.
- SequenceAlignmentEngine.solve_multiple_strings(strings): dispatches on the
    number of sequences (2: classic, 3: true 3-way DP, 4+: pairwise reduction).
- lcs_length_space_optimized(a, b): length-only variant keeping two rolling
    rows sized by the shorter sequence.

Tie-breaking
------------
Reconstruction is deterministic. In the 2-sequence traceback a mismatch steps
toward the larger neighbour and prefers the row decrement ("up") when both
neighbours are equal. In the 3-sequence traceback ties prefer the first axis,
then the second, then the third.

Approximation for four or more sequences
----------------------------------------
With 4+ sequences the engine reduces pairwise: LCS(s1, s2), then LCS of that
result with s3, and so on. The result is always a common subsequence of every
input but is not guaranteed to be the longest one. Results carry
``exact = False`` in that case.

Comparison is exact character equality; no case folding or normalisation.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple, TypedDict


class _PathStepBase(TypedDict):
    row: int
    col: int


class PathStep(_PathStepBase, total=False):
    char: str


class TwoSequenceResult(TypedDict):
    dp_table: List[List[int]]
    lcs: str
    path: List[PathStep]


Dependency = TypedDict(
    "Dependency",
    {"from": Tuple[int, int, int], "to": Tuple[int, int, int], "value": int},
)


class MultiSequenceResult(TypedDict):
    dp_table: Any
    lcs: str
    dependencies: List[Dependency]
    exact: bool


def lcs_length_space_optimized(a: str, b: str) -> int:
    """Return the LCS length of ``a`` and ``b`` in O(min(m, n)) memory.

    Only two 1D rows are kept; the shorter sequence drives the inner loop and
    the rows swap roles after each outer iteration. The alignment cannot be
    reconstructed from this variant.
    """
    if len(a) > len(b):
        a, b = b, a

    prev = [0] * (len(a) + 1)
    curr = [0] * (len(a) + 1)

    for i in range(1, len(b) + 1):
        for j in range(1, len(a) + 1):
            if a[j - 1] == b[i - 1]:
                curr[j] = prev[j - 1] + 1
            else:
                curr[j] = max(prev[j], curr[j - 1])
        prev, curr = curr, prev

    return prev[len(a)]


class SequenceAlignmentEngine:
    """LCS solver bound to a list of input sequences.

    Parameters
    ----------
    sequences : Sequence[str] | None
        Sequences solved by :meth:`solve`. The explicit ``solve_*`` methods
        take their inputs as arguments and ignore this list.
    """

    def __init__(self, sequences: Optional[Sequence[str]] = None):
        self.sequences: List[str] = list(sequences or [])

    def solve(self) -> MultiSequenceResult:
        """Solve the sequences supplied at construction time."""
        return self.solve_multiple_strings(self.sequences)

    def solve_length_only(self, a: str, b: str) -> int:
        """Space-optimised length of the LCS of ``a`` and ``b``."""
        return lcs_length_space_optimized(a, b)

    def solve_two_strings(self, a: str, b: str) -> TwoSequenceResult:
        """Fill the ``(|a|+1) x (|b|+1)`` table and trace one optimal alignment.

        Returns
        -------
        TwoSequenceResult
            - dp_table: ``dp[i][j]`` is the LCS length of ``a[:i]`` and ``b[:j]``.
            - lcs: the reconstructed subsequence (``len(lcs) == dp[m][n]``).
            - path: traceback steps in ascending order, ending at ``(m, n)``;
              matched steps carry ``char``. Cells on row 0 or column 0 are
              not part of the path.
        """
        m = len(a)
        n = len(b)
        dp = [[0] * (n + 1) for _ in range(m + 1)]

        for i in range(1, m + 1):
            for j in range(1, n + 1):
                if a[i - 1] == b[j - 1]:
                    dp[i][j] = dp[i - 1][j - 1] + 1
                else:
                    dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])

        path: List[PathStep] = []
        chars: List[str] = []
        i, j = m, n
        while i > 0 and j > 0:
            if a[i - 1] == b[j - 1]:
                chars.append(a[i - 1])
                path.append({"row": i, "col": j, "char": a[i - 1]})
                i -= 1
                j -= 1
            elif dp[i - 1][j] >= dp[i][j - 1]:
                path.append({"row": i, "col": j})
                i -= 1
            else:
                path.append({"row": i, "col": j})
                j -= 1

        path.reverse()
        return {"dp_table": dp, "lcs": "".join(reversed(chars)), "path": path}

    def solve_multiple_strings(self, strings: Sequence[str]) -> MultiSequenceResult:
        """Compute the LCS of two or more sequences.

        Raises
        ------
        ValueError
            If fewer than two sequences are supplied.

        Notes
        -----
        For four or more sequences the result comes from pairwise reduction
        and is marked ``exact = False``; see the module docstring.
        """
        if len(strings) < 2:
            raise ValueError(f"Need at least 2 sequences, got {len(strings)}")

        if len(strings) == 2:
            result = self.solve_two_strings(strings[0], strings[1])
            return {
                "dp_table": result["dp_table"],
                "lcs": result["lcs"],
                "dependencies": [],
                "exact": True,
            }

        if len(strings) == 3:
            return self._solve_three(strings[0], strings[1], strings[2])

        return self._solve_pairwise(strings)

    def _solve_three(self, a: str, b: str, c: str) -> MultiSequenceResult:
        l1, l2, l3 = len(a), len(b), len(c)
        dp = [[[0] * (l3 + 1) for _ in range(l2 + 1)] for _ in range(l1 + 1)]
        dependencies: List[Dependency] = []

        for i in range(1, l1 + 1):
            for j in range(1, l2 + 1):
                for k in range(1, l3 + 1):
                    if a[i - 1] == b[j - 1] == c[k - 1]:
                        dp[i][j][k] = dp[i - 1][j - 1][k - 1] + 1
                        dependencies.append(
                            {"from": (i - 1, j - 1, k - 1), "to": (i, j, k), "value": dp[i][j][k]}
                        )
                    else:
                        dp[i][j][k] = max(dp[i - 1][j][k], dp[i][j - 1][k], dp[i][j][k - 1])

        return {
            "dp_table": dp,
            "lcs": self._trace_three(a, b, c, dp),
            "dependencies": dependencies,
            "exact": True,
        }

    @staticmethod
    def _trace_three(a: str, b: str, c: str, dp: List[List[List[int]]]) -> str:
        chars: List[str] = []
        i, j, k = len(a), len(b), len(c)
        while i > 0 and j > 0 and k > 0:
            if a[i - 1] == b[j - 1] == c[k - 1]:
                chars.append(a[i - 1])
                i -= 1
                j -= 1
                k -= 1
                continue
            up_i = dp[i - 1][j][k]
            up_j = dp[i][j - 1][k]
            up_k = dp[i][j][k - 1]
            if up_i >= up_j and up_i >= up_k:
                i -= 1
            elif up_j >= up_k:
                j -= 1
            else:
                k -= 1
        return "".join(reversed(chars))

    def _solve_pairwise(self, strings: Sequence[str]) -> MultiSequenceResult:
        # Reduction: fold the running LCS against each remaining sequence.
        current = strings[0]
        tables: List[List[List[int]]] = []
        for other in strings[1:]:
            result = self.solve_two_strings(current, other)
            tables.append(result["dp_table"])
            current = result["lcs"]

        return {"dp_table": tables, "lcs": current, "dependencies": [], "exact": False}
