# trie_autocompleter/context/pipeline.py
# ingestion: source lines -> tokens -> normalized words -> Trie.insert

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Union

from .normalizer import normalize_word
from .tokenizer import simple_tokenize
from trie_autocompleter.utils.logger_utils import log


def iter_words(lines: Iterable[str]) -> Iterator[str]:
    """Lazy stream of lower-cased words, in source order."""
    for line in lines:
        for tok in simple_tokenize(line):
            yield normalize_word(tok)


def ingest_lines(trie, lines: Iterable[str]) -> int:
    """Insert every word of `lines` into `trie`. Returns the number inserted."""
    n = 0
    for word in iter_words(lines):
        trie.insert(word)
        n += 1
    return n


def ingest_file(trie, path: Union[str, Path], encoding: str = "utf-8") -> int:
    """
    Read a text file line by line into `trie`.
    Undecodable bytes are replaced rather than aborting the read.
    OSError (missing file, permissions) is left to the caller.
    """
    path = Path(path)
    with log.time_block(f"ingest {path.name}"):
        with path.open("r", encoding=encoding, errors="replace") as fh:
            n = ingest_lines(trie, fh)
    log.info(f"ingested {n} words ({len(trie)} distinct) from {path}")
    return n
