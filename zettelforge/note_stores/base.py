from typing import List, Protocol

from zettelforge.domain.note import NoteRecord


class NoteReadError(Exception):
    """Raised when a note or the vault listing cannot be read."""


class NoteStore(Protocol):
    """Read-only view of the vault used by the similarity engine."""

    def list_notes(self, scope: str | None = None) -> List[NoteRecord]:
        """List note metadata, optionally restricted to a folder.

        Bodies are not loaded.
        """
        ...

    def read_body(self, path: str) -> str:
        """Read the markdown content of a note, without front-matter.

        Raises:
            NoteReadError: If the note no longer exists or cannot be read
        """
        ...
