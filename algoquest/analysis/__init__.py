"""
Analysis and orchestration package for the AlgoQuest engines.

This package contains:
- settings: global knobs and input limits
- stats: typed summaries and aggregation helpers
- experiments: runners for the N-Queens, LCS and trie engines
- reporting: CSV exports (including labelled DP tables)
- plots: all visualization utilities
- cli: top-level pipeline entry point and argument parser
"""

from . import settings as settings  # re-export for convenience
from .stats import (
    StatsSummary,
    NQEntry,
    LCSEntry,
    TrieEntry,
    ExperimentResults,
    compute_detailed_statistics,
    ProgressPrinter,
)

__all__ = [
    # types
    "StatsSummary",
    "NQEntry",
    "LCSEntry",
    "TrieEntry",
    "ExperimentResults",
    # utils
    "compute_detailed_statistics",
    "ProgressPrinter",
    # settings module
    "settings",
]
