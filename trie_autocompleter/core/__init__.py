"""
trie_autocompleter.core

The in-memory word index and the queries built on it.
Contains:
 - the prefix tree with per-word counts (Trie, TrieNode)
 - prefix / suffix / prefix+suffix completion (CompletionEngine)
 - frequency ranking (FrequencyRanker)
 - the verb -> handler table used by the CLI (CommandRegistry)
"""

from .trie import Trie, TrieNode
from .completion_engine import CompletionEngine, display_word
from .frequency_ranker import FrequencyRanker, InvalidArgument
from .registry import CommandRegistry, UsageError

__all__ = [
    "Trie",
    "TrieNode",
    "CompletionEngine",
    "display_word",
    "FrequencyRanker",
    "InvalidArgument",
    "CommandRegistry",
    "UsageError",
]
