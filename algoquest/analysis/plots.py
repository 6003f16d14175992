"""Visualization utilities for engine outputs.

Overview
--------
This module renders static PNG counterparts of the interactive views: search
cost curves for N-Queens, solved boards, LCS tables with their traceback, and
trie layouts. All functions write into ``out_dir`` and return the filename.

Chart map (filenames)
---------------------
- 01_search_cost_vs_N.png: Nodes visited and backtracks vs N (log scale)
    - X: N (board size). Y: counts on a log scale, with a log-linear trend
      fitted to the nodes visited.
- 02_solutions_vs_N.png: Number of solutions and symmetric solutions vs N.
- board_N{N}.png: First solution for a board size, queens drawn on a
    checkerboard.
- dp_table_{a}_{b}.png: 2-sequence LCS table as an annotated heatmap with
    the traceback cells outlined; matched cells are filled.
- trie_layout.png: Trie nodes at their computed layout positions; end-of-word
    nodes are highlighted.

Filenames carry the run tag/date suffix from ``algoquest.analysis.settings``.
"""
from __future__ import annotations

import os
from typing import Dict, List, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns
from matplotlib.patches import Rectangle

from .reporting import _date_suffix, _safe_stem, dp_table_to_frame
from .stats import NQEntry
from algoquest.lcs import SequenceAlignmentEngine, TwoSequenceResult
from algoquest.trie import PrefixTree


def plot_search_cost_vs_n(results: Dict[int, NQEntry], N_values: List[int], out_dir: str) -> str:
    """Plot nodes visited and backtracks against N on a log scale.

    A straight line fitted to ``log(nodes_visited)`` is overlaid; its slope
    is the per-size growth factor of the search space.
    """
    os.makedirs(out_dir, exist_ok=True)
    sizes = [N for N in N_values if N in results]
    nodes = [results[N]["nodes_visited"] for N in sizes]
    backtracks = [max(results[N]["backtracks"], 1) for N in sizes]

    plt.figure(figsize=(12, 8))
    plt.semilogy(sizes, nodes, marker="o", linewidth=2, markersize=8, label="Nodes visited")
    plt.semilogy(sizes, backtracks, marker="s", linewidth=2, markersize=8, label="Backtracks")

    if len(sizes) >= 2:
        z = np.polyfit(sizes, np.log(nodes), 1)
        x_trend = np.linspace(min(sizes), max(sizes), 100)
        plt.semilogy(
            x_trend,
            np.exp(np.polyval(z, x_trend)),
            "--",
            alpha=0.8,
            label=f"Trend (x{np.exp(z[0]):.2f} per N)",
        )

    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("Count (log scale)", fontsize=12)
    plt.title("Backtracking Search Cost vs Board Size", fontsize=14)
    plt.legend(fontsize=11)
    plt.grid(True, alpha=0.7)
    plt.xticks(sizes)

    fname = os.path.join(out_dir, f"01_search_cost_vs_N{_date_suffix()}.png")
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    print(f"Saved search-cost chart: {fname}")
    return fname


def plot_solutions_vs_n(results: Dict[int, NQEntry], N_values: List[int], out_dir: str) -> str:
    """Bar chart of solution counts, with rotation/reflection-symmetric counts."""
    os.makedirs(out_dir, exist_ok=True)
    sizes = [N for N in N_values if N in results]
    x = np.arange(len(sizes))
    width = 0.28

    plt.figure(figsize=(12, 8))
    plt.bar(x - width, [results[N]["solutions"] for N in sizes], width, label="Solutions")
    plt.bar(x, [results[N]["symmetric_rotation"] for N in sizes], width, label="Rotation-symmetric")
    plt.bar(x + width, [results[N]["symmetric_reflection"] for N in sizes], width, label="Reflection-symmetric")
    plt.xticks(x, [str(N) for N in sizes])
    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("Count", fontsize=12)
    plt.title("Solutions per Board Size", fontsize=14)
    plt.legend(fontsize=11)
    plt.grid(True, axis="y", alpha=0.7)

    fname = os.path.join(out_dir, f"02_solutions_vs_N{_date_suffix()}.png")
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    print(f"Saved solutions chart: {fname}")
    return fname


def plot_board(solution: Sequence, n: int, out_dir: str, name: Optional[str] = None) -> str:
    """Draw ``solution`` on an ``n x n`` checkerboard."""
    os.makedirs(out_dir, exist_ok=True)
    board = np.indices((n, n)).sum(axis=0) % 2

    fig, ax = plt.subplots(figsize=(6, 6))
    ax.imshow(board, cmap="Greys", vmin=-1, vmax=2)
    for queen in solution:
        ax.text(queen.col, queen.row, "Q", ha="center", va="center", fontsize=max(8, 240 // max(n, 1)), fontweight="bold", color="darkred")
    ax.set_xticks(range(n))
    ax.set_yticks(range(n))
    ax.set_title(f"N-Queens solution (N={n})")

    stem = name or f"board_N{n}"
    fname = os.path.join(out_dir, f"{stem}{_date_suffix()}.png")
    fig.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close(fig)
    print(f"Saved board chart: {fname}")
    return fname


def plot_dp_table(a: str, b: str, result: TwoSequenceResult, out_dir: str, name: Optional[str] = None) -> str:
    """Render the LCS table as a heatmap and outline the traceback path."""
    os.makedirs(out_dir, exist_ok=True)
    frame = dp_table_to_frame(a, b, result["dp_table"])

    fig, ax = plt.subplots(figsize=(max(6, len(b) * 0.7 + 2), max(5, len(a) * 0.6 + 2)))
    sns.heatmap(
        frame.to_numpy(),
        annot=True,
        fmt="d",
        cmap="Blues",
        cbar=False,
        linewidths=0.5,
        xticklabels=list(frame.columns),
        yticklabels=list(frame.index),
        ax=ax,
    )
    for step in result["path"]:
        matched = "char" in step
        ax.add_patch(
            Rectangle(
                (step["col"], step["row"]),
                1,
                1,
                fill=matched,
                alpha=0.35 if matched else 1.0,
                facecolor="orange",
                edgecolor="red",
                linewidth=2,
            )
        )
    ax.set_title(f"LCS table: {a} vs {b} (LCS = {result['lcs']!r})")

    stem = name or f"dp_table_{_safe_stem(a)}_{_safe_stem(b)}"
    fname = os.path.join(out_dir, f"{stem}{_date_suffix()}.png")
    fig.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close(fig)
    print(f"Saved DP table chart: {fname}")
    return fname


def plot_trie_layout(tree: PrefixTree, out_dir: str, name: Optional[str] = None) -> str:
    """Draw the trie at the positions assigned by ``calculate_layout``."""
    os.makedirs(out_dir, exist_ok=True)
    tree.calculate_layout()

    fig, ax = plt.subplots(figsize=(14, 8))
    for node in tree.iter_nodes():
        for child in node.children.values():
            ax.plot([node.x, child.x], [node.y, child.y], color="grey", linewidth=1, zorder=1)
    for node in tree.iter_nodes():
        color = "seagreen" if node.is_end_of_word else ("black" if node is tree.root else "steelblue")
        ax.scatter([node.x], [node.y], s=420, color=color, zorder=2)
        ax.text(node.x, node.y, node.char or "*", ha="center", va="center", color="white", fontsize=10, zorder=3)

    ax.invert_yaxis()
    ax.axis("off")
    memory = tree.get_memory_usage()
    ax.set_title(f"Trie layout ({memory['nodes']} nodes, {memory['edges']} edges, ~{memory['bytes']} bytes)")

    stem = name or "trie_layout"
    fname = os.path.join(out_dir, f"{stem}{_date_suffix()}.png")
    fig.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close(fig)
    print(f"Saved trie layout chart: {fname}")
    return fname


def plot_and_save(
    results,
    N_values: List[int],
    out_dir: str,
    sequence_sets: Sequence[Sequence[str]] = (),
    words: Sequence[str] = (),
) -> List[str]:
    """Generate every chart supported by the available results."""
    written: List[str] = []
    if results.get("NQ"):
        written.append(plot_search_cost_vs_n(results["NQ"], N_values, out_dir))
        written.append(plot_solutions_vs_n(results["NQ"], N_values, out_dir))
        for N in N_values:
            first = results["NQ"].get(N, {}).get("first_solution")
            if first:
                written.append(plot_board(first, N, out_dir))

    if results.get("LCS"):
        engine = SequenceAlignmentEngine()
        for sequences in sequence_sets:
            if len(sequences) == 2:
                a, b = sequences
                written.append(plot_dp_table(a, b, engine.solve_two_strings(a, b), out_dir))

    if results.get("TRIE") is not None and words:
        written.append(plot_trie_layout(PrefixTree(words), out_dir))

    return written
