"""Set-based similarity scores."""

from collections.abc import Iterable, Set


def jaccard(a: Set[str], b: Set[str]) -> float:
    """Jaccard index of two sets.

    Returns:
        Size of the intersection over size of the union, 0.0 if either set is empty
    """
    if not a or not b:
        return 0.0
    return len(a & b) / len(a | b)


def keyword_overlap(tokens: Iterable[str], query: Set[str]) -> int:
    """Count the tokens present in the query set, repeated tokens counted each time."""
    return sum(1 for token in tokens if token in query)
