# trie_autocompleter/context/normalizer.py


def normalize_word(token: str) -> str:
    """Case-fold a token before it is stored or looked up. Nothing else is touched."""
    return token.lower()
