"""Note domain models."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator


def string_list_before_validator(x: Any) -> list[str]:
    """Coerce a front-matter value into a list of strings.

    A single string becomes a one-item list, non-string list items are dropped
    and any other shape (number, mapping, null) becomes an empty list.
    """
    if isinstance(x, str):
        return [x]
    if isinstance(x, (list, tuple, set)):
        return [item for item in x if isinstance(item, str)]
    return []


StringList = Annotated[list[str], BeforeValidator(string_list_before_validator)]

OptionalString = Annotated[
    str | None, BeforeValidator(lambda x: x if isinstance(x, str) else None)
]


class NoteRecord(BaseModel):
    """Read-only projection of a note in the vault.

    Attributes:
        path: Vault-relative path, stable for the lifetime of the note
        basename: Note title (file name without extension)
        aliases: Alternate titles from front-matter
        tags: Keywords from front-matter
        note_type: Note-type classifier from front-matter, if any
        metadata: Raw front-matter mapping
        body: Markdown content without front-matter, None when not loaded
    """

    path: str
    basename: str
    aliases: StringList = []
    tags: StringList = []
    note_type: OptionalString = None
    metadata: dict = {}
    body: str | None = None


class SimilarityMatch(BaseModel):
    """A note that looks like a duplicate of the queried content."""

    note: NoteRecord
    score: float
    reason: Literal["title", "content"]


class RelevanceItem(BaseModel):
    """A note ranked by keyword overlap with some source text."""

    note: NoteRecord
    score: int


class DuplicateCheck(BaseModel):
    """Result of an exact title/alias lookup."""

    exists: bool
    original_name: str | None = None
