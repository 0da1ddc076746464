import tempfile
from pathlib import Path
from typing import Generator

import pytest

from zettelforge.domain.note import NoteRecord
from zettelforge.engine import SimilarityEngine
from tests.fakes import FakeNoteStore, make_note


@pytest.fixture
def permanent_notes() -> list[NoteRecord]:
    return [
        make_note(
            "Zettelkasten/Climate Feedback Loops.md",
            aliases=["Feedback Loops in Climate"],
            tags=["climate", "systems"],
            note_type="atomic-note",
        ),
        make_note(
            "Zettelkasten/Supply Chains.md",
            aliases="Logistics Networks",
            tags=["economics"],
            note_type="atomic-note",
        ),
        make_note(
            "Zettelkasten/Energy Storage Economics.md",
            tags=["energy", "storage"],
            note_type="atomic-note",
        ),
    ]


@pytest.fixture
def inbox_notes() -> list[NoteRecord]:
    return [
        make_note(
            "Inbox/Grid Batteries.md",
            tags=["energy"],
            note_type="atomic-note",
        ),
        make_note("Inbox/Meeting Notes.md"),
    ]


@pytest.fixture
def note_bodies() -> dict[str, str]:
    return {
        "Zettelkasten/Climate Feedback Loops.md": "Warming melts ice, which lowers albedo.",
        "Zettelkasten/Supply Chains.md": "Goods move through networks of suppliers.",
        "Zettelkasten/Energy Storage Economics.md": "Storage costs fall as batteries scale.",
        "Inbox/Grid Batteries.md": "Grid batteries smooth out renewable supply.",
        "Inbox/Meeting Notes.md": "Discussed the roadmap.",
    }


@pytest.fixture
def note_store(
    permanent_notes: list[NoteRecord],
    inbox_notes: list[NoteRecord],
    note_bodies: dict[str, str],
) -> FakeNoteStore:
    return FakeNoteStore(permanent_notes + inbox_notes, bodies=note_bodies)


@pytest.fixture
def engine(note_store: FakeNoteStore) -> SimilarityEngine:
    return SimilarityEngine(note_store, permanent_scope="Zettelkasten")


@pytest.fixture
def temp_vault() -> Generator[Path, None, None]:
    """Create a temporary vault directory used when testing the local note store."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)
