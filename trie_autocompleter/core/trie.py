# trie.py
# Trie (prefix tree) over a multiset of words.
# Keeps an exact occurrence count per word for top-k ranking.
# Built once from a source, then only read by the query layer.

from __future__ import annotations
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from trie_autocompleter.context.normalizer import normalize_word


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode
    is_word: True if the path from the root to this node spells a stored word
    """

    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_word = False


class Trie:
    """
    Append-only trie used by the CompletionEngine for:
     - exact lookup
     - prefix tests and prefix enumeration
     - the per-word counts read by the FrequencyRanker
    Words are expected lower-cased before they reach insert().
    """

    def __init__(self) -> None:
        self.root = TrieNode()
        self.word_count: Dict[str, int] = {}
        self.revision = 0  # bumped on every insert

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> None:
        """
        Insert a word, creating nodes lazily along its path.
        Re-inserting reuses the path and only bumps the count.
        """
        node = self.root
        for ch in word:
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = node.children[ch] = TrieNode()
            node = nxt
        node.is_word = True
        self.word_count[word] = self.word_count.get(word, 0) + 1
        self.revision += 1

    # lookup ---------------------------------------------------------
    def find_node(self, prefix: str) -> Optional[TrieNode]:
        """Walk from the root along `prefix`; None if the path is missing."""
        node = self.root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        """Exact, case-sensitive membership."""
        node = self.find_node(word)
        return node is not None and node.is_word

    def search_normalized(self, word: str) -> bool:
        """Case-insensitive search: lower-case the query first."""
        return self.search(normalize_word(word))

    def starts_with(self, prefix: str) -> bool:
        return self.find_node(prefix) is not None

    # traversal ------------------------------------------------------
    def enumerate_from(self, node: TrieNode, prefix: str) -> List[str]:
        """
        DFS collecting every word at or below `node`, each spelled with
        `prefix` in front. Order follows child-map iteration, so callers that
        need lexicographic output sort afterwards.

        Uses an explicit stack and one shared character buffer: the buffer is
        cut back to the popped entry's depth before its char is appended, so
        no per-level string copies are kept around.
        """
        out: List[str] = []
        if node.is_word:
            out.append(prefix)

        buf: List[str] = list(prefix)
        base = len(buf)
        # (depth of parent in buf, char, child)
        stack: List[Tuple[int, str, TrieNode]] = [
            (base, ch, child) for ch, child in node.children.items()
        ]
        while stack:
            depth, ch, child = stack.pop()
            del buf[depth:]
            buf.append(ch)
            if child.is_word:
                out.append("".join(buf))
            depth += 1
            for c, grandchild in child.children.items():
                stack.append((depth, c, grandchild))
        return out

    def words(self) -> List[str]:
        """Every distinct stored word, unordered."""
        return self.enumerate_from(self.root, "")

    # counts/inspection ----------------------------------------------
    def count(self, word: str) -> int:
        return self.word_count.get(word, 0)

    @property
    def word_counts(self) -> Mapping[str, int]:
        """Read-only live view of word -> occurrences."""
        return MappingProxyType(self.word_count)

    @property
    def total(self) -> int:
        """Number of insert() calls so far."""
        return sum(self.word_count.values())

    def __len__(self) -> int:
        return len(self.word_count)

    def __contains__(self, word: str) -> bool:
        return self.search(word)
