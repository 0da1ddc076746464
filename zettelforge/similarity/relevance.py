"""Keyword relevance ranking of existing atomic notes."""

from typing import List

from loguru import logger

from zettelforge.domain.note import NoteRecord, RelevanceItem
from zettelforge.note_stores.base import NoteStore

from .scorer import keyword_overlap
from .tokenizer import keyword_set, normalize


class RelevanceRetriever:
    """Ranks atomic notes by how many of their title words and tags a text mentions."""

    def __init__(
        self,
        store: NoteStore,
        *,
        atomic_note_type: str = "atomic-note",
        title_weight: int = 2,
        tag_weight: int = 1,
        min_token_length: int = 3,
    ) -> None:
        self.store = store
        self.atomic_note_type = atomic_note_type
        self.title_weight = title_weight
        self.tag_weight = tag_weight
        self.min_token_length = min_token_length

    def rank_relevant(self, source_text: str, limit: int = 20) -> List[RelevanceItem]:
        """Rank atomic notes by keyword overlap with a source text.

        Only words longer than min_token_length are taken from the source text. Each
        title word found counts title_weight, each tag found counts tag_weight.

        Args:
            source_text: Text to find related notes for
            limit: Maximum number of notes returned

        Returns:
            Notes with a positive score, highest first
        """
        if limit < 0:
            raise ValueError(f"Limit must not be negative, got {limit}")

        query = keyword_set(source_text, self.min_token_length)
        if not query:
            return []

        items = []
        for note in self.store.list_notes():
            if note.note_type != self.atomic_note_type:
                continue
            score = self._score(note, query)
            if score > 0:
                items.append(RelevanceItem(note=note, score=score))

        items.sort(key=lambda item: item.score, reverse=True)
        logger.debug(f"Ranked {len(items)} relevant atomic notes")
        return items[:limit]

    def _score(self, note: NoteRecord, query: set[str]) -> int:
        title_hits = keyword_overlap(normalize(note.basename), query)
        tag_hits = keyword_overlap((tag.lower() for tag in note.tags), query)
        return title_hits * self.title_weight + tag_hits * self.tag_weight
