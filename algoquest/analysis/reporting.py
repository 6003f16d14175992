"""CSV export utilities for experiment outputs and DP tables.

These helpers materialize concise CSV summaries per engine for downstream
analysis or spreadsheet inspection, plus labelled exports of LCS tables.
"""
from __future__ import annotations

import csv
import os
import re
from typing import Dict, List, Optional, Sequence

import pandas as pd

from . import settings
from .stats import LCSEntry, NQEntry, TrieEntry


def _date_suffix() -> str:
    """Return a run tag/date suffix based on settings (or empty).

    Returns
    -------
    str
        A leading ``_`` followed by ``RUN_TAG`` and/or ``RUN_ID`` if enabled;
        otherwise an empty string.
    """
    parts: List[str] = []
    run_tag = getattr(settings, "RUN_TAG", None)
    if run_tag:
        parts.append(str(run_tag))
    if getattr(settings, "DATE_IN_FILENAMES", False):
        run_id = getattr(settings, "RUN_ID", None)
        if run_id:
            parts.append(str(run_id))
    return ("_" + "_".join(parts)) if parts else ""


def _safe_stem(text: str) -> str:
    """Reduce ``text`` to a filename fragment that stays inside ``out_dir``.

    Runs of characters other than letters, digits, ``_`` and ``-`` collapse
    to a single ``_``; an empty result becomes ``"empty"``.
    """
    return re.sub(r"[^A-Za-z0-9_-]+", "_", text) or "empty"


def save_nqueens_results_to_csv(results: Dict[int, NQEntry], N_values: List[int], out_dir: str) -> str:
    """Write per-N search metrics to ``results_NQ<suffix>.csv``.

    Column names follow lowercase snake_case; time columns summarize the
    repeated runs of each search.
    """
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"results_NQ{_date_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow([
            "n",
            "solutions",
            "symmetric_rotation",
            "symmetric_reflection",
            "nodes_visited",
            "backtracks",
            "branching_factor",
            "time_mean",
            "time_median",
            "time_std",
            "time_runs",
        ])
        for N in N_values:
            entry = results.get(N)
            if entry is None:
                continue
            time_stats = entry.get("time", {})
            writer.writerow([
                N,
                entry["solutions"],
                entry["symmetric_rotation"],
                entry["symmetric_reflection"],
                entry["nodes_visited"],
                entry["backtracks"],
                f"{entry['branching_factor']:.6f}",
                time_stats.get("mean", ""),
                time_stats.get("median", ""),
                time_stats.get("std", ""),
                time_stats.get("count", 0),
            ])

    print(f"CSV saved: {filename}")
    return filename


def save_lcs_results_to_csv(entries: Sequence[LCSEntry], out_dir: str) -> str:
    """Write one row per solved sequence set to ``results_LCS<suffix>.csv``."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"results_LCS{_date_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["sequences", "count", "lcs", "length", "exact", "cells", "dependencies", "time_seconds"])
        for entry in entries:
            writer.writerow([
                "|".join(entry["sequences"]),
                len(entry["sequences"]),
                entry["lcs"],
                entry["length"],
                int(entry["exact"]),
                entry["cells"],
                entry["dependencies"],
                entry["time"],
            ])

    print(f"CSV saved: {filename}")
    return filename


def save_trie_results_to_csv(entry: TrieEntry, out_dir: str) -> str:
    """Write the trie batch summary as a single-row CSV."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"results_TRIE{_date_suffix()}.csv")
    columns = ["words", "total_nodes", "shared_nodes", "compression_ratio", "nodes", "edges", "bytes", "time"]

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(columns)
        writer.writerow([entry[column] for column in columns])  # type: ignore[literal-required]

    print(f"CSV saved: {filename}")
    return filename


def dp_table_to_frame(a: str, b: str, dp_table: List[List[int]]) -> pd.DataFrame:
    """Label a 2-sequence table with its characters.

    Row 0 and column 0 (the empty prefixes) are labelled ``"-"``. Labels may
    repeat when a sequence repeats characters.
    """
    index = ["-"] + list(a)
    columns = ["-"] + list(b)
    return pd.DataFrame(dp_table, index=index, columns=columns)


def save_dp_table_csv(
    a: str,
    b: str,
    dp_table: List[List[int]],
    out_dir: str,
    name: Optional[str] = None,
) -> str:
    """Export a labelled 2-sequence table via pandas."""
    os.makedirs(out_dir, exist_ok=True)
    stem = name or f"dp_{_safe_stem(a)}_{_safe_stem(b)}"
    filename = os.path.join(out_dir, f"{stem}{_date_suffix()}.csv")
    dp_table_to_frame(a, b, dp_table).to_csv(filename)
    print(f"DP table saved: {filename}")
    return filename
