# commands.py - query verbs and their text output
# Each handler takes raw string args from the command line and returns the
# text to print. Query args are lower-cased, stored words always are.

from __future__ import annotations
from typing import List

from trie_autocompleter.context.normalizer import normalize_word
from trie_autocompleter.core.completion_engine import CompletionEngine, display_word
from trie_autocompleter.core.frequency_ranker import FrequencyRanker, InvalidArgument
from trie_autocompleter.core.registry import CommandRegistry, UsageError
from trie_autocompleter.core.trie import Trie

NO_WORDS = "No words"


def format_words(words: List[str]) -> str:
    """Comma list of display forms, or the no-match text."""
    if not words:
        return NO_WORDS
    return ", ".join(display_word(w) for w in words)


def format_top_k(ranked) -> str:
    return "\n".join(f"{w}: {c}" for w, c in ranked)


def parse_k(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise UsageError(f"topk expects an integer, got {raw!r}") from None


def build_registry(
    trie: Trie,
    engine: CompletionEngine,
    ranker: FrequencyRanker,
    reverse_output: str = "words",
) -> CommandRegistry:
    """Wire the query verbs to one explicitly owned Trie and its helpers."""
    reg = CommandRegistry()
    mirrored = reverse_output == "mirrored"

    def search(word):
        return "true" if trie.search_normalized(word) else "false"

    def autocomplete(prefix):
        return format_words(engine.auto_complete(normalize_word(prefix)))

    def reverse(suffix):
        return format_words(
            engine.reverse_auto_complete(normalize_word(suffix), mirrored=mirrored)
        )

    def full(prefix, suffix):
        prefix, suffix = normalize_word(prefix), normalize_word(suffix)
        if not trie.starts_with(prefix):
            return f"No words found with prefix: {prefix}"
        return "\n".join(engine.full_auto_complete(prefix, suffix))

    def topk(raw_k):
        try:
            return format_top_k(ranker.top_k(parse_k(raw_k)))
        except InvalidArgument as e:
            raise UsageError(str(e)) from e

    reg.add_command("search", search, 1, "search <word>")
    reg.add_command("autocomplete", autocomplete, 1, "autocomplete <prefix>")
    reg.add_command("reverse", reverse, 1, "reverse <suffix>")
    reg.add_command("full", full, 2, "full <prefix> <suffix>")
    reg.add_command("topk", topk, 1, "topk <k>")
    return reg
