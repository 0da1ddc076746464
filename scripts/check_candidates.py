"""CLI for checking generated atomic note candidates against a vault, or building the retrieval prompt for a source note"""

import argparse
import sys
from pathlib import Path

from loguru import logger
from pydantic import TypeAdapter

from zettelforge.config import settings
from zettelforge.domain.candidate import AtomicCandidate, to_note_records
from zettelforge.engine import SimilarityEngine
from zettelforge.note_stores.local import LocalNoteStore
from zettelforge.prompt import get_prompt


def load_candidates(path: Path) -> list[AtomicCandidate]:
    """Load a JSON array of candidates as returned by the generation service."""
    return TypeAdapter(list[AtomicCandidate]).validate_json(path.read_text(encoding="utf-8"))


def check_candidates(
    engine: SimilarityEngine, candidates: list[AtomicCandidate], threshold: float
) -> list[str]:
    """Report title duplicates and near-duplicates for each candidate in a batch.

    Args:
        engine: Engine with a built duplicate index
        candidates: The generated batch
        threshold: Score a near-duplicate has to exceed

    Returns:
        Report lines, one block per candidate
    """
    records = to_note_records(
        candidates,
        settings.inbox_folder,
        note_type_field=settings.note_type_field,
        atomic_note_type=settings.atomic_note_type,
    )

    lines = []
    for record in records:
        lines.append(f"{record.basename}")

        duplicate = engine.is_title_duplicate(record.basename)
        if duplicate.exists:
            lines.append(f"  title already exists as '{duplicate.original_name}'")

        matches = engine.find_similar(
            record.body or "",
            threshold=threshold,
            extra_candidates=records,
            exclude_path=record.path,
        )
        for match in matches:
            lines.append(f"  similar to {match.note.path} ({match.reason}, {match.score:.2f})")

        if not duplicate.exists and not matches:
            lines.append("  no duplicates found")

    return lines


def main(
    vault: str,
    candidates_file: str | None,
    source_file: str | None,
    threshold: float,
) -> None:
    store = LocalNoteStore(vault, note_type_field=settings.note_type_field)
    engine = SimilarityEngine.from_settings(store, settings)

    if source_file:
        source_text = Path(source_file).read_text(encoding="utf-8")
        print(get_prompt(source_text=source_text, engine=engine, limit=settings.relevance_limit))
        return

    if candidates_file:
        engine.build_index()
        candidates = load_candidates(Path(candidates_file))
        logger.info(f"Checking {len(candidates)} candidates against {vault}")
        print("\n".join(check_candidates(engine, candidates, threshold)))


if __name__ == "__main__":
    logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--vault",
        type=str,
        required=False,
        help="Vault folder containing markdown notes",
        default=settings.vault_path,
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--candidates", type=str, help="JSON file with generated atomic note candidates"
    )
    group.add_argument(
        "--source", type=str, help="Source note to build the retrieval prompt for"
    )
    parser.add_argument(
        "--threshold",
        type=float,
        required=False,
        help="Similarity score a near-duplicate has to exceed",
        default=settings.similarity_threshold,
    )

    args = parser.parse_args()

    main(
        vault=args.vault,
        candidates_file=args.candidates,
        source_file=args.source,
        threshold=args.threshold,
    )
