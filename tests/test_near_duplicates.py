"""Tests for near-duplicate detection."""

import pytest

from zettelforge.similarity.near_duplicates import NearDuplicateDetector
from tests.fakes import FakeNoteStore, make_note

WORDS = "alpha beta gamma delta epsilon zeta eta theta iota kappa".split()


@pytest.fixture
def detector(note_store: FakeNoteStore) -> NearDuplicateDetector:
    return NearDuplicateDetector(note_store, "Zettelkasten")


def test_batch_candidate_matches_on_content(detector: NearDuplicateDetector) -> None:
    """Test that a near-identical candidate body is found and an unrelated one is not."""
    candidate_a = make_note(
        "Inbox/Stress Yield Tradeoffs.md", body="The trade-offs between stress and yield"
    )
    candidate_b = make_note(
        "Inbox/Photosynthesis.md", body="Photosynthesis converts light into chemical energy"
    )

    matches = detector.find_similar(
        "Trade-offs between stress and yield", 0.5, [candidate_a, candidate_b]
    )

    assert len(matches) == 1
    assert matches[0].note.path == "Inbox/Stress Yield Tradeoffs.md"
    assert matches[0].reason == "content"
    assert matches[0].score == pytest.approx(0.8)


def test_permanent_note_matches_on_title_without_reading_body() -> None:
    """Test that permanent notes are compared on title only."""
    store = FakeNoteStore(
        [make_note("Zettelkasten/Stress and Yield.md")],
        bodies={"Zettelkasten/Stress and Yield.md": "Stress and yield"},
    )
    detector = NearDuplicateDetector(store, "Zettelkasten")

    matches = detector.find_similar("Stress and yield")

    assert len(matches) == 1
    assert matches[0].reason == "title"
    assert matches[0].score == 1.0
    assert store.read_paths == []


def test_permanent_content_duplicate_with_other_title_is_not_found() -> None:
    """Test that archive bodies are never read, even when they would match."""
    store = FakeNoteStore(
        [make_note("Zettelkasten/Material Limits.md")],
        bodies={"Zettelkasten/Material Limits.md": "Trade-offs between stress and yield"},
    )
    detector = NearDuplicateDetector(store, "Zettelkasten")

    assert detector.find_similar("Trade-offs between stress and yield") == []
    assert store.read_paths == []


def test_permanent_note_with_loaded_body_is_compared_on_content() -> None:
    store = FakeNoteStore(
        [make_note("Zettelkasten/Material Limits.md", body="Trade-offs between stress and yield")]
    )
    detector = NearDuplicateDetector(store, "Zettelkasten")

    matches = detector.find_similar("Trade-offs between stress and yield")

    assert [m.reason for m in matches] == ["content"]


def test_extra_candidate_body_is_read_from_store() -> None:
    """Test that batch candidates without a loaded body have it fetched."""
    store = FakeNoteStore(bodies={"Inbox/Idea.md": "alpha beta gamma delta"})
    detector = NearDuplicateDetector(store, "Zettelkasten")

    matches = detector.find_similar(
        "alpha beta gamma delta", extra_candidates=[make_note("Inbox/Idea.md")]
    )

    assert store.read_paths == ["Inbox/Idea.md"]
    assert matches[0].reason == "content"
    assert matches[0].score == 1.0


def test_failed_body_read_degrades_to_title() -> None:
    """Test that one unreadable candidate does not abort the check."""
    store = FakeNoteStore(
        bodies={"Inbox/Readable.md": "alpha beta gamma delta"},
        failing_paths={"Inbox/Alpha Beta Gamma Delta.md"},
    )
    detector = NearDuplicateDetector(store, "Zettelkasten")

    matches = detector.find_similar(
        "alpha beta gamma delta",
        extra_candidates=[
            make_note("Inbox/Alpha Beta Gamma Delta.md"),
            make_note("Inbox/Readable.md"),
        ],
    )

    assert {(m.note.path, m.reason) for m in matches} == {
        ("Inbox/Alpha Beta Gamma Delta.md", "title"),
        ("Inbox/Readable.md", "content"),
    }


def test_excluded_path_is_never_returned(detector: NearDuplicateDetector) -> None:
    candidate = make_note("Inbox/Self.md", body="alpha beta gamma")
    sibling = make_note("Inbox/Sibling.md", body="alpha beta gamma")

    matches = detector.find_similar(
        "alpha beta gamma", extra_candidates=[candidate, sibling], exclude_path="Inbox/Self.md"
    )

    assert [m.note.path for m in matches] == ["Inbox/Sibling.md"]


def test_threshold_is_strict(detector: NearDuplicateDetector) -> None:
    """Test that a score equal to the threshold is not a match."""
    candidate = make_note("Inbox/Other.md", body="alpha beta gamma delta epsilon")

    assert detector.find_similar("alpha beta gamma", 0.5, [candidate]) == []
    assert len(detector.find_similar("alpha beta gamma", 0.49, [candidate])) == 1


def test_results_are_capped_and_sorted(detector: NearDuplicateDetector) -> None:
    """Test that at most five matches come back, best first."""
    candidates = [
        make_note(f"Inbox/Candidate {size}.md", body=" ".join(WORDS[:size]))
        for size in range(4, 11)
    ]

    matches = detector.find_similar(" ".join(WORDS), 0.1, candidates)

    scores = [m.score for m in matches]
    assert len(matches) == 5
    assert all(a > b for a, b in zip(scores, scores[1:]))
    assert matches[0].note.path == "Inbox/Candidate 10.md"


def test_title_wins_ties(detector: NearDuplicateDetector) -> None:
    candidate = make_note("Inbox/Alpha Beta.md", body="alpha beta")

    matches = detector.find_similar("alpha beta", extra_candidates=[candidate])

    assert matches[0].reason == "title"
    assert matches[0].score == 1.0


def test_candidate_in_store_and_batch_is_scored_once() -> None:
    store = FakeNoteStore([make_note("Zettelkasten/Alpha Beta.md")])
    detector = NearDuplicateDetector(store, "Zettelkasten")

    matches = detector.find_similar(
        "alpha beta gamma",
        extra_candidates=[make_note("Zettelkasten/Alpha Beta.md", body="alpha beta gamma")],
    )

    assert len(matches) == 1
    assert matches[0].reason == "content"


@pytest.mark.parametrize("content", ["", "   ", "!!! ???"])
def test_degenerate_content_returns_nothing(content: str) -> None:
    store = FakeNoteStore([make_note("Zettelkasten/Anything.md")])
    detector = NearDuplicateDetector(store, "Zettelkasten")

    assert detector.find_similar(content, 0.0) == []


def test_negative_max_results_is_rejected(note_store: FakeNoteStore) -> None:
    with pytest.raises(ValueError):
        NearDuplicateDetector(note_store, "Zettelkasten", max_results=-1)
