"""Similarity engine used by the candidate generation and review workflows."""

from typing import Iterable, List

from zettelforge.config import Settings
from zettelforge.domain.note import DuplicateCheck, NoteRecord, RelevanceItem, SimilarityMatch
from zettelforge.note_stores.base import NoteStore
from zettelforge.similarity import DuplicateIndex, NearDuplicateDetector, RelevanceRetriever


class SimilarityEngine:
    """Owns the duplicate index, near-duplicate detector and relevance retriever of a vault."""

    def __init__(
        self,
        store: NoteStore,
        *,
        permanent_scope: str,
        shingle_size: int = 2,
        similarity_threshold: float = 0.5,
        max_similar_results: int = 5,
        atomic_note_type: str = "atomic-note",
        title_weight: int = 2,
        tag_weight: int = 1,
        min_token_length: int = 3,
        relevance_limit: int = 20,
    ) -> None:
        """Initialize the engine with the services it composes.

        Args:
            store: Read-only note store
            permanent_scope: Folder holding the finalized notes
            shingle_size: Tokens per shingle for near-duplicate detection
            similarity_threshold: Default score a near-duplicate has to exceed
            max_similar_results: Maximum near-duplicates returned
            atomic_note_type: Note-type value of notes eligible for relevance ranking
            title_weight: Relevance points per title word found
            tag_weight: Relevance points per tag found
            min_token_length: Source words of this length or shorter are ignored
            relevance_limit: Default number of relevant notes returned
        """
        self.store = store
        self.relevance_limit = relevance_limit
        self.index = DuplicateIndex(store, permanent_scope)
        self.detector = NearDuplicateDetector(
            store,
            permanent_scope,
            shingle_size=shingle_size,
            threshold=similarity_threshold,
            max_results=max_similar_results,
        )
        self.retriever = RelevanceRetriever(
            store,
            atomic_note_type=atomic_note_type,
            title_weight=title_weight,
            tag_weight=tag_weight,
            min_token_length=min_token_length,
        )

    @classmethod
    def from_settings(cls, store: NoteStore, settings: Settings) -> "SimilarityEngine":
        """Create an engine configured from application settings."""
        return cls(
            store,
            permanent_scope=settings.permanent_folder,
            shingle_size=settings.shingle_size,
            similarity_threshold=settings.similarity_threshold,
            max_similar_results=settings.max_similar_results,
            atomic_note_type=settings.atomic_note_type,
            title_weight=settings.title_weight,
            tag_weight=settings.tag_weight,
            min_token_length=settings.relevance_min_token_length,
            relevance_limit=settings.relevance_limit,
        )

    def build_index(self) -> None:
        """Rebuild the title/alias index from the permanent folder."""
        self.index.build()

    def is_title_duplicate(self, title: str) -> DuplicateCheck:
        """Check whether a title or alias already exists in the permanent folder."""
        return self.index.is_title_duplicate(title)

    def find_similar(
        self,
        content: str,
        threshold: float | None = None,
        extra_candidates: Iterable[NoteRecord] = (),
        exclude_path: str | None = None,
    ) -> List[SimilarityMatch]:
        """Find likely duplicates of some content in the vault and the candidate batch."""
        return self.detector.find_similar(
            content,
            threshold=threshold,
            extra_candidates=extra_candidates,
            exclude_path=exclude_path,
        )

    def rank_relevant(self, source_text: str, limit: int | None = None) -> List[RelevanceItem]:
        """Rank existing atomic notes by relevance to a source text."""
        return self.retriever.rank_relevant(
            source_text, limit=self.relevance_limit if limit is None else limit
        )
