# trie_autocompleter/context/__init__.py
# text ingestion: tokenizing, normalizing and feeding words to a Trie

from .normalizer import normalize_word  # lower-cases a token
from .tokenizer import simple_tokenize  # whitespace split
from .pipeline import iter_words, ingest_lines, ingest_file

__all__ = [
    "normalize_word",
    "simple_tokenize",
    "iter_words",
    "ingest_lines",
    "ingest_file",
]
