"""Prefix tree with incremental insertion, queries and layout for rendering.

Every operation returns the nodes it walked so that the presentation layer
can animate the traversal. Nodes are owned by their parent through the
``children`` mapping; there are no back references.

The tree has two lifecycle states: empty (a bare root) and populated. Words
cannot be removed individually; :meth:`PrefixTree.clear` resets the whole tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from typing import Dict, Iterable, Iterator, List, TypedDict

SUGGESTION_LIMIT = 10

# Memory model: rough per-object costs, not a measurement.
NODE_BYTES = 100
EDGE_BYTES = 50

LAYOUT_WIDTH = 400.0
LAYOUT_LEVEL_HEIGHT = 80.0
LAYOUT_SHRINK = 0.8


@dataclass(eq=False)
class TrieNode:
    """A node of the prefix tree; ``char`` is empty for the root."""

    id: str
    char: str
    depth: int
    children: Dict[str, "TrieNode"] = field(default_factory=dict)
    is_end_of_word: bool = False
    x: float = 0.0
    y: float = 0.0

    def __repr__(self) -> str:
        return f"TrieNode(id={self.id!r}, char={self.char!r}, end={self.is_end_of_word})"


class InsertResult(TypedDict):
    path: List[TrieNode]
    new_nodes: List[TrieNode]


class FailedAt(TypedDict):
    node: TrieNode
    char: str
    index: int


class _SearchResultBase(TypedDict):
    found: bool
    path: List[TrieNode]


class SearchResult(_SearchResultBase, total=False):
    failed_at: FailedAt


class PrefixResult(TypedDict):
    has_prefix: bool
    path: List[TrieNode]
    suggestions: List[str]


class MemoryStats(TypedDict):
    nodes: int
    edges: int
    bytes: int


class BatchStats(TypedDict):
    total_nodes: int
    shared_nodes: int
    compression_ratio: float


class PrefixTree:
    """Trie storing a word set with shared prefixes."""

    def __init__(self, words: Iterable[str] = ()):
        self.clear()
        for word in words:
            self.insert(word)

    def clear(self) -> None:
        """Drop every stored word and restart node numbering."""
        self.root = TrieNode(id="root", char="", depth=0)
        self._node_counter = 0

    def insert(self, word: str) -> InsertResult:
        """Insert ``word``, creating nodes only for the unshared suffix.

        ``path`` holds the root followed by one node per character. Inserting
        a word that is already stored creates no nodes.
        """
        path = [self.root]
        new_nodes: List[TrieNode] = []
        current = self.root

        for index, char in enumerate(word):
            child = current.children.get(char)
            if child is None:
                child = TrieNode(id=f"node_{self._node_counter}", char=char, depth=index + 1)
                self._node_counter += 1
                current.children[char] = child
                new_nodes.append(child)
            current = child
            path.append(current)

        current.is_end_of_word = True
        return {"path": path, "new_nodes": new_nodes}

    def search(self, word: str) -> SearchResult:
        """Look up ``word``.

        ``found`` requires the full word to be consumed and its last node to
        end a word. ``failed_at`` is present only when the walk leaves the
        tree: it names the last reached node, the missing character and its
        index in ``word``.
        """
        path = [self.root]
        current = self.root

        for index, char in enumerate(word):
            child = current.children.get(char)
            if child is None:
                return {
                    "found": False,
                    "path": path,
                    "failed_at": {"node": current, "char": char, "index": index},
                }
            current = child
            path.append(current)

        return {"found": current.is_end_of_word, "path": path}

    def starts_with(self, prefix: str) -> PrefixResult:
        """Walk to ``prefix`` and collect up to ``SUGGESTION_LIMIT`` completions.

        Suggestions follow depth-first, child-insertion order; callers should
        not rely on any particular ordering.
        """
        path = [self.root]
        current = self.root

        for char in prefix:
            child = current.children.get(char)
            if child is None:
                return {"has_prefix": False, "path": path, "suggestions": []}
            current = child
            path.append(current)

        suggestions = list(islice(self._iter_words(current, prefix), SUGGESTION_LIMIT))
        return {"has_prefix": True, "path": path, "suggestions": suggestions}

    def get_all_words(self) -> List[str]:
        """Every stored word in traversal order."""
        return list(self._iter_words(self.root, ""))

    def _iter_words(self, node: TrieNode, prefix: str) -> Iterator[str]:
        # Children are pushed reversed so they pop in insertion order.
        stack = [(node, prefix)]
        while stack:
            current, word = stack.pop()
            if current.is_end_of_word:
                yield word
            for char, child in reversed(list(current.children.items())):
                stack.append((child, word + char))

    def iter_nodes(self) -> Iterator[TrieNode]:
        """Yield every node depth-first, parents before children."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(list(node.children.values())))

    def get_memory_usage(self) -> MemoryStats:
        """Count nodes and edges and estimate the storage cost."""
        nodes = 0
        edges = 0
        for node in self.iter_nodes():
            nodes += 1
            edges += len(node.children)
        return {"nodes": nodes, "edges": edges, "bytes": nodes * NODE_BYTES + edges * EDGE_BYTES}

    def calculate_layout(self, width: float = LAYOUT_WIDTH) -> None:
        """Assign ``x``/``y`` to every node for drawing.

        The root sits at ``(0, 0)``. A node's span is split equally among its
        children, each child is centred in its slot one level lower, and the
        span shrinks by ``LAYOUT_SHRINK`` per level.
        """
        stack = [(self.root, 0.0, 0.0, width)]
        while stack:
            node, x, y, span = stack.pop()
            node.x = x
            node.y = y
            children = list(node.children.values())
            if not children:
                continue
            child_span = span / len(children)
            for index, child in enumerate(children):
                child_x = x - span / 2 + child_span * index + child_span / 2
                stack.append((child, child_x, y + LAYOUT_LEVEL_HEIGHT, child_span * LAYOUT_SHRINK))

    def insert_batch(self, words: Iterable[str]) -> BatchStats:
        """Insert ``words`` in order and report prefix-sharing savings.

        The naive estimate stores every word on its own chain
        (``len(word) + 1`` nodes each). ``shared_nodes`` is how many of those
        were avoided; ``compression_ratio`` is the final node count over the
        naive estimate (1.0 for an empty batch).
        """
        word_list = list(words)
        initial_nodes = self._count_nodes()
        for word in word_list:
            self.insert(word)
        final_nodes = self._count_nodes()

        naive_nodes = sum(len(word) for word in word_list) + len(word_list)
        shared_nodes = naive_nodes - (final_nodes - initial_nodes)
        compression_ratio = final_nodes / naive_nodes if naive_nodes > 0 else 1.0
        return {
            "total_nodes": final_nodes,
            "shared_nodes": shared_nodes,
            "compression_ratio": compression_ratio,
        }

    def _count_nodes(self) -> int:
        return sum(1 for _ in self.iter_nodes())

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)["found"]

    def __len__(self) -> int:
        return sum(1 for node in self.iter_nodes() if node.is_end_of_word)
