import logging
from pathlib import Path
from typing import List

import frontmatter
import yaml

from zettelforge.domain.note import NoteRecord
from zettelforge.note_stores.base import NoteReadError, NoteStore

logger = logging.getLogger(__name__)


class LocalNoteStore(NoteStore):
    """Note store reading markdown files with YAML front-matter from a vault folder."""

    def __init__(self, vault_path: str | Path, *, note_type_field: str = "note_type") -> None:
        """Initialize LocalNoteStore.

        Args:
            vault_path: Root folder of the vault
            note_type_field: Front-matter field holding the note-type classifier
        """
        self.vault_path = Path(vault_path)
        self.note_type_field = note_type_field

    def list_notes(self, scope: str | None = None) -> List[NoteRecord]:
        """List note metadata for every markdown file in the vault.

        Args:
            scope: Folder prefix relative to the vault root. A note is in scope when its
                   path equals the prefix or lies below it.

        Returns:
            Note records sorted by path, without bodies
        """
        if not self.vault_path.is_dir():
            raise NoteReadError(f"Vault folder {self.vault_path} does not exist")

        files = {
            file.relative_to(self.vault_path).as_posix(): file
            for file in self.vault_path.rglob("*.md")
        }

        notes = []
        for relative_path, file in sorted(files.items()):
            if scope and not self._in_scope(relative_path, scope):
                continue

            try:
                metadata = self._read_metadata(file)
            except OSError as e:
                logger.warning(f"Skipping unreadable note {relative_path}: {e}")
                continue

            notes.append(
                NoteRecord(
                    path=relative_path,
                    basename=file.stem,
                    aliases=metadata.get("aliases"),
                    tags=metadata.get("tags"),
                    note_type=metadata.get(self.note_type_field),
                    metadata=metadata,
                )
            )

        logger.debug(f"Listed {len(notes)} notes in scope {scope!r}")
        return notes

    def read_body(self, path: str) -> str:
        """Read the content of a note without its front-matter."""
        file = self.vault_path / path
        try:
            text = file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise NoteReadError(f"Could not read note {path}: {e}") from e

        try:
            return frontmatter.loads(text).content
        except (yaml.YAMLError, ValueError):
            logger.warning(f"Malformed front-matter in {path}, returning raw content")
            return text

    @staticmethod
    def _in_scope(path: str, scope: str) -> bool:
        prefix = scope.strip("/")
        if not prefix:
            return True
        return path == prefix or path.startswith(f"{prefix}/")

    @staticmethod
    def _read_metadata(file: Path) -> dict:
        """Parse the front-matter of a file, falling back to empty metadata."""
        text = file.read_text(encoding="utf-8", errors="replace")
        try:
            metadata = frontmatter.loads(text).metadata
        except (yaml.YAMLError, ValueError):
            logger.warning(f"Malformed front-matter in {file}, ignoring metadata")
            return {}
        return dict(metadata) if isinstance(metadata, dict) else {}
