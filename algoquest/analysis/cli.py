"""Command-line interface and high-level pipeline for the AlgoQuest engines.

This module wires together configuration loading, input-limit checks, the
experiment runners, CSV export and chart generation. It intentionally isolates
I/O, argument parsing, and progress reporting from the engine modules so that
the rest of the codebase remains easy to test programmatically.
"""
from __future__ import annotations

import argparse
import os
import tempfile
from pathlib import Path
from time import perf_counter
from typing import List, Optional

from . import settings
from .experiments import (
    run_all_experiments,
    run_lcs_experiments,
    run_nqueens_experiments,
    run_trie_experiment,
)
from .plots import plot_and_save
from .reporting import (
    save_dp_table_csv,
    save_lcs_results_to_csv,
    save_nqueens_results_to_csv,
    save_trie_results_to_csv,
)
from config_manager import ConfigManager
from algoquest.lcs import SequenceAlignmentEngine

ALGORITHMS = ("NQ", "LCS", "TRIE")


# ------------- Utils --------------------------------------------------------

def parse_algorithm_filters(alg_args: Optional[List[str]]):
    """Normalize algorithm filter CLI inputs into a list of labels.

    Accepts repeated flags and comma-separated lists. Valid values: NQ, LCS, TRIE.
    Returns None when no filter is provided (meaning all are enabled).
    """
    if not alg_args:
        return None
    selected: List[str] = []
    for entry in alg_args:
        for token in entry.split(","):
            token = token.strip().upper()
            if token:
                if token not in ALGORITHMS:
                    raise ValueError(f"Unknown algorithm '{token}'. Allowed: {', '.join(ALGORITHMS)}")
                selected.append(token)
    unique = list(dict.fromkeys(selected))  # preserve order, remove dups
    return unique or None


def apply_configuration(config_path: str) -> ConfigManager:
    """Load configuration and copy its values into ``settings``.

    Sections that are absent leave the module defaults untouched. Sequence
    sets with fewer than two sequences are rejected here, before any engine
    is invoked.
    """
    config_mgr = ConfigManager(config_path)

    experiment_settings = config_mgr.get_experiment_settings()
    if experiment_settings:
        settings.N_VALUES = [int(n) for n in experiment_settings.get("N_values", settings.N_VALUES)]
        settings.RUNS_NQ_FINAL = int(experiment_settings.get("runs_nq_final", settings.RUNS_NQ_FINAL))
        settings.OUT_DIR = experiment_settings.get("output_dir", settings.OUT_DIR)

    limit_settings = config_mgr.get_limit_settings()
    if limit_settings:
        settings.set_limits(
            max_board_size=limit_settings.get("max_board_size", settings.MAX_BOARD_SIZE),
            max_sequence_length=limit_settings.get("max_sequence_length", settings.MAX_SEQUENCE_LENGTH),
            max_sequence_count=limit_settings.get("max_sequence_count", settings.MAX_SEQUENCE_COUNT),
        )

    sequence_sets = config_mgr.get_lcs_sequence_sets()
    if sequence_sets:
        short = [s for s in sequence_sets if len(s) < 2]
        if short:
            raise ValueError(f"LCS sequence sets need at least 2 sequences: {short}")
        settings.LCS_SEQUENCE_SETS = [[str(seq) for seq in s] for s in sequence_sets]

    words = config_mgr.get_trie_words()
    if words:
        settings.TRIE_WORDS = [str(word) for word in words]

    for N in settings.N_VALUES:
        settings.check_board_size(N)
    for sequences in settings.LCS_SEQUENCE_SETS:
        settings.check_sequences(sequences)

    return config_mgr


# ------------- Pipeline ------------------------------------------------------

def main_pipeline(
    algorithms: Optional[List[str]] = None,
    validate: bool = False,
    plots: bool = True,
) -> None:
    """Run the selected experiments, export CSVs and (optionally) charts."""
    start_total = perf_counter()
    os.makedirs(settings.OUT_DIR, exist_ok=True)

    include_nq = (algorithms is None) or ("NQ" in algorithms)
    include_lcs = (algorithms is None) or ("LCS" in algorithms)
    include_trie = (algorithms is None) or ("TRIE" in algorithms)

    print("\n" + "=" * 70)
    print("PHASE 1: EXPERIMENTS")
    print("=" * 70)
    results = run_all_experiments(
        settings.N_VALUES,
        settings.RUNS_NQ_FINAL,
        settings.LCS_SEQUENCE_SETS,
        settings.TRIE_WORDS,
        validate=validate,
        include_nq=include_nq,
        include_lcs=include_lcs,
        include_trie=include_trie,
    )

    print("\n" + "=" * 70)
    print("PHASE 2: CSV EXPORT")
    print("=" * 70)
    if include_nq:
        save_nqueens_results_to_csv(results["NQ"], settings.N_VALUES, settings.OUT_DIR)
    if include_lcs:
        save_lcs_results_to_csv(results["LCS"], settings.OUT_DIR)
        engine = SequenceAlignmentEngine()
        for sequences in settings.LCS_SEQUENCE_SETS:
            if len(sequences) == 2:
                a, b = sequences
                save_dp_table_csv(a, b, engine.solve_two_strings(a, b)["dp_table"], settings.OUT_DIR)
    if include_trie and results["TRIE"] is not None:
        save_trie_results_to_csv(results["TRIE"], settings.OUT_DIR)

    if plots:
        print("\n" + "=" * 70)
        print("PHASE 3: CHARTS")
        print("=" * 70)
        plot_and_save(
            results,
            settings.N_VALUES,
            settings.OUT_DIR,
            sequence_sets=settings.LCS_SEQUENCE_SETS,
            words=settings.TRIE_WORDS,
        )

    total_time = perf_counter() - start_total
    print("\nPipeline completed!")
    print(f"Total time: {total_time:.1f}s")


# ------------- Quick regression -------------------------------------------

def run_quick_regression_tests() -> None:
    """Execute a fast, deterministic smoke test of all three engines.

    Verifies that:
    - The solver finds the known solution counts for N = 4..8 and none for N = 3.
    - LCS results are common subsequences and 2-sequence lengths agree with
      the space-optimised variant.
    - Every inserted word is found again and the trie accounting is coherent.
    - The CSV exports produce non-empty files in a temporary folder.
    """
    print("Running quick regression tests across all engines...")

    expected_counts = {3: 0, 4: 2, 5: 10, 6: 4, 7: 40, 8: 92}
    nq_results = run_nqueens_experiments(list(expected_counts), runs=1, validate=True)
    for N, expected in expected_counts.items():
        found = nq_results[N]["solutions"]
        if found != expected:
            raise AssertionError(f"Expected {expected} solutions for N={N}, found {found}.")
    print("  [NQ] solution counts match for N=3..8")

    lcs_results = run_lcs_experiments(settings.LCS_SEQUENCE_SETS, validate=True)
    print(f"  [LCS] {len(lcs_results)} sequence sets solved")

    trie_result = run_trie_experiment(settings.TRIE_WORDS, validate=True)
    print(f"  [TRIE] {trie_result['nodes']} nodes for {trie_result['words']} words")

    with tempfile.TemporaryDirectory() as tmpdir:
        written = [
            save_nqueens_results_to_csv(nq_results, list(expected_counts), tmpdir),
            save_lcs_results_to_csv(lcs_results, tmpdir),
            save_trie_results_to_csv(trie_result, tmpdir),
        ]
        for filename in written:
            path = Path(filename)
            if not path.exists() or path.stat().st_size == 0:
                raise AssertionError(f"CSV was not generated successfully during quick tests: {filename}")

    print("Quick regression tests passed.")


# ------------- CLI wiring --------------------------------------------------

def build_arg_parser():
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(description="Run the N-Queens, LCS and trie engine pipelines.")
    parser.add_argument(
        "--alg",
        "-a",
        action="append",
        help="Filter engines to execute: NQ, LCS, TRIE (comma-separated or multiple flags). Default: all.",
    )
    parser.add_argument("--config", default="config.json", help="Path to configuration file (default: config.json).")
    parser.add_argument("--quick-test", action="store_true", help="Run quick regression tests and exit.")
    parser.add_argument("--validate", action="store_true", help="Validate every solution and LCS produced (extra assertions).")
    parser.add_argument("--no-plots", action="store_true", help="Skip chart generation.")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point: parse arguments and run the pipeline."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.quick_test:
        run_quick_regression_tests()
        return

    try:
        alg_filter = parse_algorithm_filters(args.alg)
        apply_configuration(args.config)
    except FileNotFoundError as exc:
        print(f"Configuration file not found: {exc}")
        raise SystemExit(1) from exc
    except ValueError as exc:
        print(f"Configuration error: {exc}")
        raise SystemExit(1) from exc

    print(f"Selected engines: {alg_filter or list(ALGORITHMS)}")

    try:
        main_pipeline(alg_filter, validate=args.validate, plots=not args.no_plots)
    except KeyboardInterrupt:
        print("\nExecution interrupted by user.")
        raise SystemExit(130) from None
    except ValueError as exc:
        print(f"Execution error: {exc}")
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
