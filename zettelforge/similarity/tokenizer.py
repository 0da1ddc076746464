"""Text normalization and shingling used by the similarity scorers."""

import re

NON_WORD_PATTERN = re.compile(r"[^\w\s]")


def normalize(text: str) -> list[str]:
    """Split text into lowercase word tokens.

    Characters outside the word/space class are removed (so "trade-offs" becomes
    "tradeoffs") and runs of whitespace separate tokens.

    Args:
        text: Free text

    Returns:
        List of tokens in their original order
    """
    return NON_WORD_PATTERN.sub("", text.lower()).split()


def shingles(text: str, n: int = 2) -> set[str]:
    """Build the set of n-token shingles of a text.

    Texts with fewer than n tokens fall back to the set of single tokens, so short
    titles still produce comparable sets.

    Args:
        text: Free text
        n: Number of tokens per shingle

    Returns:
        Set of space-joined shingles, empty for empty or punctuation-only text
    """
    if n < 1:
        raise ValueError(f"Shingle size must be at least 1, got {n}")

    tokens = normalize(text)
    if len(tokens) < n:
        return set(tokens)
    return {" ".join(tokens[i : i + n]) for i in range(len(tokens) - n + 1)}


def keyword_set(text: str, min_length: int = 3) -> set[str]:
    """Tokens strictly longer than min_length, used as a cheap stopword filter."""
    return {token for token in normalize(text) if len(token) > min_length}
