"""Near-duplicate detection against the permanent notes and the candidate batch."""

from typing import Iterable, List

from loguru import logger

from zettelforge.domain.note import NoteRecord, SimilarityMatch
from zettelforge.note_stores.base import NoteStore

from .scorer import jaccard
from .tokenizer import shingles


class NearDuplicateDetector:
    """Finds notes whose title or content overlaps strongly with new content.

    Every candidate is compared on its title. Content is only compared when it is
    cheap to get: records that already carry a body, and the caller's extra
    candidates, whose bodies are read on demand. Bodies of permanent notes are
    never read, which keeps a check bounded on large vaults at the cost of missing
    content duplicates whose titles differ.
    """

    def __init__(
        self,
        store: NoteStore,
        permanent_scope: str,
        *,
        shingle_size: int = 2,
        threshold: float = 0.5,
        max_results: int = 5,
    ) -> None:
        """Initialize the detector.

        Args:
            store: Note store to list permanent notes and read candidate bodies from
            permanent_scope: Folder holding the finalized notes
            shingle_size: Tokens per shingle
            threshold: Default score a match has to exceed
            max_results: Maximum number of matches returned
        """
        if max_results < 0:
            raise ValueError(f"Maximum number of results must not be negative, got {max_results}")

        self.store = store
        self.permanent_scope = permanent_scope
        self.shingle_size = shingle_size
        self.threshold = threshold
        self.max_results = max_results

    def find_similar(
        self,
        content: str,
        threshold: float | None = None,
        extra_candidates: Iterable[NoteRecord] = (),
        exclude_path: str | None = None,
    ) -> List[SimilarityMatch]:
        """Find notes that are likely duplicates of some content.

        Args:
            content: Text of the note being checked
            threshold: Score a match has to strictly exceed, defaults to the detector's
            extra_candidates: In-flight notes (e.g. the rest of the review batch)
            exclude_path: Path of the note being checked, so it does not match itself

        Returns:
            Matches sorted by descending score, at most max_results of them
        """
        threshold = self.threshold if threshold is None else threshold

        query = shingles(content, self.shingle_size)
        if not query:
            return []

        extra_paths = set()
        pool: dict[str, NoteRecord] = {}
        for note in self.store.list_notes(self.permanent_scope):
            pool[note.path] = note
        for note in extra_candidates:
            pool[note.path] = note
            extra_paths.add(note.path)
        pool.pop(exclude_path, None)

        matches = []
        for note in pool.values():
            match = self._score(note, query, fetch_body=note.path in extra_paths)
            if match.score > threshold:
                matches.append(match)

        matches.sort(key=lambda m: m.score, reverse=True)
        logger.debug(f"Found {len(matches)} notes above {threshold} among {len(pool)} candidates")
        return matches[: self.max_results]

    def _score(self, note: NoteRecord, query: set[str], *, fetch_body: bool) -> SimilarityMatch:
        """Score a single candidate, keeping whichever signal is strongest."""
        match = SimilarityMatch(
            note=note,
            score=jaccard(shingles(note.basename, self.shingle_size), query),
            reason="title",
        )

        body = note.body
        if body is None and fetch_body:
            body = self._read_body(note.path)
        if body is not None:
            content_score = jaccard(shingles(body, self.shingle_size), query)
            if content_score > match.score:
                match.score = content_score
                match.reason = "content"

        return match

    def _read_body(self, path: str) -> str | None:
        """Read a candidate body, treating any failure as unavailable content."""
        try:
            return self.store.read_body(path)
        except Exception as e:
            logger.warning(f"Content of {path} unavailable, comparing title only: {e}")
            return None
