"""Similarity module for duplicate detection and relevance ranking of notes."""

from zettelforge.similarity.duplicate_index import DuplicateIndex
from zettelforge.similarity.near_duplicates import NearDuplicateDetector
from zettelforge.similarity.relevance import RelevanceRetriever
from zettelforge.similarity.scorer import jaccard, keyword_overlap
from zettelforge.similarity.tokenizer import keyword_set, normalize, shingles

__all__ = [
    "DuplicateIndex",
    "NearDuplicateDetector",
    "RelevanceRetriever",
    "jaccard",
    "keyword_overlap",
    "keyword_set",
    "normalize",
    "shingles",
]
