"""Experiment runners for the N-Queens, LCS and trie engines.

These routines execute repeatable batches over configured inputs and shape
the outputs into dictionaries suitable for CSV export and plotting.
Validation hooks optionally check solution correctness and the consistency of
reported metrics.
"""
from __future__ import annotations

from time import perf_counter
from typing import Any, List, Optional, Sequence

from . import settings
from .stats import (
    ExperimentResults,
    LCSEntry,
    NQEntry,
    ProgressPrinter,
    TrieEntry,
    compute_detailed_statistics,
)
from algoquest.backtracking import ConstraintSolver
from algoquest.lcs import MultiSequenceResult, SequenceAlignmentEngine, lcs_length_space_optimized
from algoquest.trie import PrefixTree
from algoquest.utils import conflicts_on2, is_valid_solution, solution_to_board


def is_subsequence(candidate: str, sequence: str) -> bool:
    """Return True if ``candidate`` appears in ``sequence`` in order."""
    remaining = iter(sequence)
    return all(char in remaining for char in candidate)


def check_nqueens_solution(solution: Sequence, N: int) -> None:
    """Raise ``AssertionError`` unless ``solution`` is a valid N-Queens placement.

    The O(N) counter check in ``is_valid_solution`` is cross-checked against
    the O(N^2) pairwise reference ``conflicts_on2``.
    """
    if not is_valid_solution(solution, N):
        raise AssertionError(f"Invalid solution produced for N={N}: {solution}")
    pairs = conflicts_on2(solution_to_board(solution))
    if pairs != 0:
        raise AssertionError(f"Pairwise check found {pairs} conflicts for N={N}: {solution}")


def lcs_cell_count(sequences: Sequence[str], result: MultiSequenceResult) -> int:
    """Number of DP cells filled while solving ``sequences``.

    Two or three sequences fill one dense table. Four or more are reduced
    pairwise, so the count is the sum of the intermediate 2D tables.
    """
    if result["exact"]:
        cells = 1
        for sequence in sequences:
            cells *= len(sequence) + 1
        return cells
    return sum(len(table) * len(table[0]) for table in result["dp_table"])


def run_nqueens_experiments(
    N_values: List[int],
    runs: int = 1,
    progress_label: Optional[str] = None,
    validate: bool = False,
) -> dict:
    """Enumerate all solutions for each N and collect search statistics.

    The search is repeated ``runs`` times per N to summarize wall-clock time;
    counts and statistics come from the last run (they are deterministic).
    """
    results: Any = {}
    progress = ProgressPrinter(len(N_values), progress_label) if progress_label else None

    for index, N in enumerate(N_values, start=1):
        settings.check_board_size(N)
        if progress:
            progress.update(index, f"N={N}")

        solver = ConstraintSolver(N)
        times: List[float] = []
        solutions = []
        for _ in range(max(1, runs)):
            start = perf_counter()
            solutions = solver.find_all_solutions()
            times.append(perf_counter() - start)
        search_stats = solver.get_search_stats()

        if validate:
            for solution in solutions:
                check_nqueens_solution(solution, N)
            if len(set(solutions)) != len(solutions):
                raise AssertionError(f"Duplicate solutions produced for N={N}")

        flags = [solver.has_symmetry(solution) for solution in solutions]
        entry: NQEntry = {
            "solutions": len(solutions),
            "symmetric_rotation": sum(1 for f in flags if f["rotation"]),
            "symmetric_reflection": sum(1 for f in flags if f["reflection"]),
            "nodes_visited": search_stats.nodes_visited,
            "backtracks": search_stats.backtracks,
            "branching_factor": search_stats.branching_factor,
            "time": compute_detailed_statistics(times, f"nq_{N}_time"),
            "first_solution": solutions[0] if solutions else None,
        }
        print(
            f"  N={N}: {entry['solutions']} solutions, "
            f"nodes={entry['nodes_visited']}, backtracks={entry['backtracks']}"
        )
        results[N] = entry

    return results


def run_lcs_experiments(
    sequence_sets: Sequence[Sequence[str]],
    progress_label: Optional[str] = None,
    validate: bool = False,
) -> List[LCSEntry]:
    """Solve every sequence set and record LCS length, exactness and cost."""
    engine = SequenceAlignmentEngine()
    entries: List[LCSEntry] = []
    progress = ProgressPrinter(len(sequence_sets), progress_label) if progress_label else None

    for index, sequences in enumerate(sequence_sets, start=1):
        settings.check_sequences(sequences)
        if progress:
            progress.update(index, " / ".join(sequences))

        start = perf_counter()
        result = engine.solve_multiple_strings(list(sequences))
        elapsed = perf_counter() - start

        if validate:
            for sequence in sequences:
                if not is_subsequence(result["lcs"], sequence):
                    raise AssertionError(f"LCS {result['lcs']!r} is not a subsequence of {sequence!r}")
            if len(sequences) == 2:
                expected = lcs_length_space_optimized(sequences[0], sequences[1])
                if expected != len(result["lcs"]):
                    raise AssertionError(
                        f"LCS length mismatch for {list(sequences)}: table={len(result['lcs'])}, rolling={expected}"
                    )

        entries.append(
            {
                "sequences": list(sequences),
                "lcs": result["lcs"],
                "length": len(result["lcs"]),
                "exact": result["exact"],
                "cells": lcs_cell_count(sequences, result),
                "dependencies": len(result["dependencies"]),
                "time": elapsed,
            }
        )

    return entries


def run_trie_experiment(words: Sequence[str], validate: bool = False) -> TrieEntry:
    """Batch-insert ``words`` into a fresh tree and report sharing and memory."""
    tree = PrefixTree()
    start = perf_counter()
    batch = tree.insert_batch(words)
    elapsed = perf_counter() - start
    memory = tree.get_memory_usage()

    if validate:
        missing = [word for word in words if not tree.search(word)["found"]]
        if missing:
            raise AssertionError(f"Inserted words not found: {missing}")
        if memory["nodes"] != batch["total_nodes"] or memory["edges"] != memory["nodes"] - 1:
            raise AssertionError(f"Inconsistent trie accounting: {memory} vs {batch}")

    return {
        "words": len(words),
        "total_nodes": batch["total_nodes"],
        "shared_nodes": batch["shared_nodes"],
        "compression_ratio": batch["compression_ratio"],
        "nodes": memory["nodes"],
        "edges": memory["edges"],
        "bytes": memory["bytes"],
        "time": elapsed,
    }


def run_all_experiments(
    N_values: List[int],
    runs_nq: int,
    sequence_sets: Sequence[Sequence[str]],
    words: Sequence[str],
    validate: bool = False,
    include_nq: bool = True,
    include_lcs: bool = True,
    include_trie: bool = True,
) -> ExperimentResults:
    """Run the selected experiment groups and bundle their results."""
    results: Any = {"NQ": {}, "LCS": [], "TRIE": None}

    if include_nq:
        print("=== N-Queens: exhaustive backtracking ===")
        results["NQ"] = run_nqueens_experiments(
            N_values, runs=runs_nq, progress_label="N-Queens", validate=validate
        )
    if include_lcs:
        print("=== LCS: dynamic programming ===")
        results["LCS"] = run_lcs_experiments(sequence_sets, progress_label="LCS", validate=validate)
    if include_trie:
        print("=== Trie: batch insertion ===")
        results["TRIE"] = run_trie_experiment(words, validate=validate)

    return results
