"""Algorithm engines for N-Queens, LCS and prefix trees."""

from .backtracking import ConstraintSolver, Position, Queen, SearchStats
from .lcs import SequenceAlignmentEngine, lcs_length_space_optimized
from .trie import PrefixTree, TrieNode
from .utils import conflicts, conflicts_on2, is_valid_solution

__all__ = [
    "ConstraintSolver",
    "Position",
    "Queen",
    "SearchStats",
    "SequenceAlignmentEngine",
    "lcs_length_space_optimized",
    "PrefixTree",
    "TrieNode",
    "conflicts",
    "conflicts_on2",
    "is_valid_solution",
]
