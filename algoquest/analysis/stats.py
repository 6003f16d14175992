"""Typed result shapes and statistics helpers for the analysis pipeline.

Defines ``TypedDict`` structures for experiment outputs and provides utilities
to summarize repeated timing measurements.
"""
from __future__ import annotations

import statistics
from typing import Dict, List, Optional, TypedDict


class StatsSummary(TypedDict, total=False):
    count: int
    mean: Optional[float]
    median: Optional[float]
    std: Optional[float]
    min: Optional[float]
    max: Optional[float]
    q25: Optional[float]
    q75: Optional[float]
    range: Optional[float]


class NQEntry(TypedDict):
    solutions: int
    symmetric_rotation: int
    symmetric_reflection: int
    nodes_visited: int
    backtracks: int
    branching_factor: float
    time: StatsSummary
    first_solution: Optional[tuple]


class LCSEntry(TypedDict):
    sequences: List[str]
    lcs: str
    length: int
    exact: bool
    cells: int
    dependencies: int
    time: float


class TrieEntry(TypedDict):
    words: int
    total_nodes: int
    shared_nodes: int
    compression_ratio: float
    nodes: int
    edges: int
    bytes: int
    time: float


class ExperimentResults(TypedDict):
    NQ: Dict[int, NQEntry]
    LCS: List[LCSEntry]
    TRIE: Optional[TrieEntry]


class ProgressPrinter:
    """Minimal, stdout-only progress reporter for long-running loops.

    Parameters
    ----------
    total : int
        Total number of steps/items expected. Values <= 0 are coerced to 1 to
        avoid division by zero when reporting percentages.
    label : str
        Short label printed in front of the progress counters.
    """

    def __init__(self, total: int, label: str):
        self.total = max(1, total)
        self.label = label

    def update(self, index: int, detail: str = "") -> None:
        """Print a single-line progress update to stdout."""
        percent = (index / self.total) * 100
        suffix = f" - {detail}" if detail else ""
        print(f"[{self.label}] {index}/{self.total} ({percent:.0f}%)" + suffix)


def compute_detailed_statistics(values: List[float], label: str = "") -> StatsSummary:
    """Compute summary statistics for a numeric sequence.

    Parameters
    ----------
    values : List[float]
        Numeric values to summarize (finite floats).
    label : str, optional
        Carried for debugging contexts; not used in calculations.

    Returns
    -------
    StatsSummary
        Count, mean, median, population std, min, max, q25, q75 and range.
        When ``values`` is empty, numeric fields are ``None`` and ``count`` is 0
        to keep CSV/plot generation consistent.
    """
    if not values:
        return {
            "count": 0,
            "mean": None,
            "median": None,
            "std": None,
            "min": None,
            "max": None,
            "q25": None,
            "q75": None,
            "range": None,
        }

    sorted_vals = sorted(values)
    n = len(values)

    mean_val = statistics.mean(values)
    median_val = statistics.median(values)
    min_val = min(values)
    max_val = max(values)
    range_val = max_val - min_val
    std_val = statistics.pstdev(values) if n > 1 else 0

    q25 = sorted_vals[n // 4] if n >= 4 else min_val
    q75 = sorted_vals[3 * n // 4] if n >= 4 else max_val

    return {
        "count": n,
        "mean": mean_val,
        "median": median_val,
        "std": std_val,
        "min": min_val,
        "max": max_val,
        "q25": q25,
        "q75": q75,
        "range": range_val,
    }
