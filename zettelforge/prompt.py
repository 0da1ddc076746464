from typing import List

from zettelforge.domain.note import RelevanceItem
from zettelforge.engine import SimilarityEngine

PROMPT_TEMPLATE = """Extract atomic note candidates from the source note below.

Existing atomic notes in the vault. Link to them with [[Title]] where an idea is related,
and do not create a candidate for an idea one of them already covers:
{context}

Source note:
{source}
"""

NO_CONTEXT = "No existing notes found."


def get_context(relevant_notes: List[RelevanceItem]) -> str:
    if not relevant_notes:
        return NO_CONTEXT

    context = ""
    for item in relevant_notes:
        tags = ", ".join(item.note.tags) or "none"
        context += f"Title: {item.note.basename}\nPath: {item.note.path}\nTags: {tags}\n\n"
    return context


def get_prompt(
    *,
    source_text: str,
    engine: SimilarityEngine,
    limit: int,
) -> str:
    relevant_notes = engine.rank_relevant(source_text, limit=limit)
    context = get_context(relevant_notes=relevant_notes)
    prompt = PROMPT_TEMPLATE.format(source=source_text, context=context)
    return prompt
