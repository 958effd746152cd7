# trie_autocompleter/context/tokenizer.py
# whitespace tokenizer for source lines

from typing import List


def simple_tokenize(line: str) -> List[str]:
    """
    Split a line on runs of whitespace.
    Punctuation stays attached ("end;" is one token), empty tokens never appear.
    """
    if not line:
        return []
    return line.split()
