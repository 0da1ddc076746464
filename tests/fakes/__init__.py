from tests.fakes.fake_note_store import BrokenNoteStore, FakeNoteStore, make_note

__all__ = ["BrokenNoteStore", "FakeNoteStore", "make_note"]
