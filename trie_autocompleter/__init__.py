"""
trie_autocompleter

In-memory word trie with prefix, suffix and prefix+suffix completion and
frequency-ranked top-k, fed from a text file and queried from the CLI.
"""

from .core import (
    Trie,
    TrieNode,
    CompletionEngine,
    FrequencyRanker,
    InvalidArgument,
)

__all__ = [
    "Trie",
    "TrieNode",
    "CompletionEngine",
    "FrequencyRanker",
    "InvalidArgument",
]

__version__ = "0.1.0"
