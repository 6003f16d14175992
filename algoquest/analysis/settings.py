"""Global settings and input limits for the AlgoQuest analysis pipeline.

This module centralizes tunable constants used across the orchestration code.
Values can be overridden at runtime via the configuration loader in
`algoquest.analysis.cli.apply_configuration`.

The engines never bound their inputs themselves; the pipeline checks board
sizes and sequences against the limits below before invoking them.
"""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Sequence

# Board sizes to enumerate (in ascending order)
N_VALUES: List[int] = [4, 5, 6, 7, 8, 9, 10]

# Repeated timing runs per board size (counts are deterministic, timings are not)
RUNS_NQ_FINAL: int = 3

# Largest board the exhaustive search is allowed to run on
MAX_BOARD_SIZE: int = 12

# 3-way DP allocates (l1+1)*(l2+1)*(l3+1) cells; keep sequences short
MAX_SEQUENCE_LENGTH: int = 64
MAX_SEQUENCE_COUNT: int = 8

# LCS inputs evaluated by the pipeline (each set has at least two sequences)
LCS_SEQUENCE_SETS: List[List[str]] = [
    ["ABCBDAB", "BDCABA"],
    ["AGGTAB", "GXTXAYB"],
    ["AGGT12", "12TXAYB", "12XBA"],
    ["ABCDEF", "ACBDFE", "ABDCEF", "BACDFE"],
]

# Words inserted by the trie experiment
TRIE_WORDS: List[str] = [
    "tree", "trie", "algo", "assoc", "all", "also",
    "team", "tea", "ten", "inn", "in", "int",
]

# Output directory for CSV and charts
OUT_DIR: str = "results_algoquest"

# Output naming policy --------------------------------------------------------

# When True, results and plots will include a datestamp suffix (e.g., _20251113-142530)
DATE_IN_FILENAMES: bool = True

# Unique run identifier used for filename stamping; set once at import time.
RUN_ID: str = datetime.now().strftime("%Y%m%d-%H%M%S")

# Optional run labeling to avoid overwriting outputs
RUN_TAG: Optional[str] = None


def set_limits(
        max_board_size: int = 12,
        max_sequence_length: int = 64,
        max_sequence_count: int = 8,
) -> None:
        """Configure the input bounds enforced before invoking the engines.

        Side effects
        - Updates module-level globals and prints a concise summary to stdout to
            make the active limits explicit at run start.
        """
        global MAX_BOARD_SIZE, MAX_SEQUENCE_LENGTH, MAX_SEQUENCE_COUNT
        MAX_BOARD_SIZE = int(max_board_size)
        MAX_SEQUENCE_LENGTH = int(max_sequence_length)
        MAX_SEQUENCE_COUNT = int(max_sequence_count)

        print("Input limits configured:")
        print(f"   - Board size: <= {MAX_BOARD_SIZE}")
        print(f"   - Sequence length: <= {MAX_SEQUENCE_LENGTH}")
        print(f"   - Sequence count: <= {MAX_SEQUENCE_COUNT}")


def check_board_size(n: int) -> None:
    """Raise ``ValueError`` when ``n`` is outside ``[1, MAX_BOARD_SIZE]``."""
    if n < 1 or n > MAX_BOARD_SIZE:
        raise ValueError(f"Board size {n} outside the allowed range 1..{MAX_BOARD_SIZE}")


def check_sequences(sequences: Sequence[str]) -> None:
    """Raise ``ValueError`` when a sequence set exceeds the configured limits."""
    if len(sequences) > MAX_SEQUENCE_COUNT:
        raise ValueError(f"{len(sequences)} sequences exceed the limit of {MAX_SEQUENCE_COUNT}")
    for sequence in sequences:
        if len(sequence) > MAX_SEQUENCE_LENGTH:
            raise ValueError(
                f"Sequence of length {len(sequence)} exceeds the limit of {MAX_SEQUENCE_LENGTH}"
            )
