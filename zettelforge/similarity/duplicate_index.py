"""Exact title and alias index over the permanent notes."""

from loguru import logger

from zettelforge.domain.note import DuplicateCheck
from zettelforge.note_stores.base import NoteStore


class DuplicateIndex:
    """Index of the titles and aliases of notes in the permanent folder.

    The index is empty until build() is called and never updates itself; callers
    rebuild it after the vault changes and must not query it while a build runs.
    """

    def __init__(self, store: NoteStore, permanent_scope: str) -> None:
        """Initialize an empty index.

        Args:
            store: Note store to read note metadata from
            permanent_scope: Folder holding the finalized notes
        """
        self.store = store
        self.permanent_scope = permanent_scope
        self.titles: set[str] = set()
        self.alias_map: dict[str, str] = {}
        self._built = False

    @property
    def is_built(self) -> bool:
        return self._built

    def build(self) -> None:
        """Discard the current contents and index every note in the permanent folder.

        On alias collisions the note listed last wins.
        """
        titles: set[str] = set()
        alias_map: dict[str, str] = {}

        for note in self.store.list_notes(self.permanent_scope):
            titles.add(note.basename.strip().lower())
            for alias in note.aliases:
                key = alias.strip().lower()
                previous = alias_map.get(key)
                if previous is not None and previous != note.basename:
                    logger.debug(
                        f"Alias '{alias}' of '{previous}' is reassigned to '{note.basename}'"
                    )
                alias_map[key] = note.basename

        self.titles = titles
        self.alias_map = alias_map
        self._built = True
        logger.info(
            f"Built duplicate index: {len(titles)} titles, {len(alias_map)} aliases "
            f"in '{self.permanent_scope}'"
        )

    def is_title_duplicate(self, title: str) -> DuplicateCheck:
        """Check a title against existing titles, then against aliases.

        The lookup is case-insensitive and exact, ignoring surrounding whitespace on both
        sides. A title hit reports the lowercased queried title as the original name, an
        alias hit reports the owning note.
        """
        key = title.strip().lower()
        if key in self.titles:
            return DuplicateCheck(exists=True, original_name=key)

        owner = self.alias_map.get(key)
        if owner is not None:
            return DuplicateCheck(exists=True, original_name=owner)

        return DuplicateCheck(exists=False)
