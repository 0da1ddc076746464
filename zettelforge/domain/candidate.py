"""Atomic note candidates produced by the generation service."""

import re
from typing import Iterable, List, Literal

from pydantic import BaseModel, Field

from zettelforge.domain.note import NoteRecord

FILENAME_UNSAFE_PATTERN = r"[\\/:|#^\[\]]"


class AtomicCandidate(BaseModel):
    """A single idea extracted from a source note, awaiting review"""

    title: str = Field(..., description="Short, precise title capturing the idea")
    type: Literal["question", "claim", "evidence", "principle"] = Field(
        ..., description="Epistemic kind of the idea"
    )
    atomic_claim: str = Field(..., description="The core extracted idea")
    support_snippet: str = Field(
        "N/A", description="Verbatim quote from the source note, or N/A if there is none"
    )
    confidence: float | Literal["high", "medium", "low"] | None = None
    suggested_links: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)

    @property
    def filename(self) -> str:
        """File name the candidate gets in the inbox folder."""
        return re.sub(FILENAME_UNSAFE_PATTERN, "", self.title) + ".md"

    def render_body(self) -> str:
        """Markdown body written to the inbox note."""
        body = (
            f"# {self.title}\n\n"
            f"## {self.type.upper()}\n{self.atomic_claim}\n\n"
            f"## Support\n{self.support_snippet}\n"
        )
        if self.suggested_links:
            body += "\n## Suggested Links\n" + "\n".join(self.suggested_links) + "\n"
        return body

    def to_note_record(
        self,
        folder: str,
        *,
        filename: str | None = None,
        note_type_field: str = "note_type",
        atomic_note_type: str = "atomic-note",
    ) -> NoteRecord:
        """Build an in-flight note record with its body already materialized.

        Args:
            folder: Vault folder the candidate lives in (usually the inbox)
            filename: File name to use instead of the one derived from the title
            note_type_field: Front-matter field holding the note-type classifier
            atomic_note_type: Value written to the note-type field

        Returns:
            NoteRecord usable as an extra candidate for near-duplicate checks
        """
        filename = filename or self.filename
        path = f"{folder.rstrip('/')}/{filename}" if folder else filename
        return NoteRecord(
            path=path,
            basename=filename.removesuffix(".md"),
            tags=[tag.lower() for tag in self.tags],
            note_type=atomic_note_type,
            metadata={
                note_type_field: atomic_note_type,
                "note_category": self.type,
                "status": "inbox",
                "note_origin": "ai",
                "confidence": self.confidence,
                "tags": self.tags,
            },
            body=self.render_body(),
        )


def to_note_records(
    candidates: Iterable[AtomicCandidate],
    folder: str,
    *,
    note_type_field: str = "note_type",
    atomic_note_type: str = "atomic-note",
) -> List[NoteRecord]:
    """Build note records for a batch, giving every candidate its own path.

    Candidates whose file names collide get a " (1)", " (2)", ... suffix, the way
    the inbox names new notes.
    """
    records = []
    used: set[str] = set()
    for candidate in candidates:
        filename = candidate.filename
        stem = filename.removesuffix(".md")
        counter = 1
        while filename in used:
            filename = f"{stem} ({counter}).md"
            counter += 1
        used.add(filename)
        records.append(
            candidate.to_note_record(
                folder,
                filename=filename,
                note_type_field=note_type_field,
                atomic_note_type=atomic_note_type,
            )
        )
    return records
