# completion_engine.py
# Prefix, suffix and prefix+suffix completion on top of Trie.enumerate_from.
# Suffix queries run prefix logic against a mirror trie holding every
# stored word reversed.

from __future__ import annotations
from typing import List, Optional

from trie_autocompleter.core.trie import Trie
from trie_autocompleter.utils.logger_utils import log


def display_word(word: str) -> str:
    """
    Presentation form of a completion: a word carrying ';' anywhere after its
    first character loses its last character ("end;" -> "end").
    Stored words are never changed by this.
    """
    if word.find(";") > 0:
        return word[:-1]
    return word


class CompletionEngine:
    """
    Query layer over a built Trie.
    An empty list is the no-match signal for every query, missing paths
    never raise.

    cache_mirror: keep the mirror trie between suffix queries and rebuild it
    only after the primary trie has changed. Off means one rebuild per query.
    """

    def __init__(self, trie: Trie, cache_mirror: bool = True) -> None:
        self.trie = trie
        self.cache_mirror = cache_mirror
        self._mirror: Optional[Trie] = None
        self._mirror_rev = -1

    # prefix ---------------------------------------------------------
    def auto_complete(self, prefix: str) -> List[str]:
        """All distinct words starting with `prefix`, sorted ascending."""
        return self._complete(self.trie, prefix)

    @staticmethod
    def _complete(trie: Trie, prefix: str) -> List[str]:
        node = trie.find_node(prefix)
        if node is None:
            return []
        out = trie.enumerate_from(node, prefix)
        out.sort()
        return out

    # suffix ---------------------------------------------------------
    def mirror(self) -> Trie:
        """Trie over every distinct stored word, reversed."""
        if (
            self.cache_mirror
            and self._mirror is not None
            and self._mirror_rev == self.trie.revision
        ):
            return self._mirror

        m = Trie()
        with log.time_block("mirror rebuild"):
            for word in self.trie.words():
                m.insert(word[::-1])
        log.debug(f"mirror trie rebuilt: {len(m)} words (rev {self.trie.revision})")

        if self.cache_mirror:
            self._mirror = m
            self._mirror_rev = self.trie.revision
        return m

    def reverse_auto_complete(self, suffix: str, mirrored: bool = False) -> List[str]:
        """
        All distinct words ending with `suffix`, sorted ascending.

        mirrored=True returns what the mirror trie itself yields: the reversed
        strings, in the mirror's sort order ("cats" comes back as "stac").
        """
        hits = self._complete(self.mirror(), suffix[::-1])
        if mirrored:
            return hits
        out = [w[::-1] for w in hits]
        out.sort()
        return out

    # prefix + suffix ------------------------------------------------
    def full_auto_complete(self, prefix: str, suffix: str) -> List[str]:
        """Words starting with `prefix` and ending with `suffix`, sorted ascending."""
        return [w for w in self.auto_complete(prefix) if w.endswith(suffix)]
