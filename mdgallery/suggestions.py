"""Autocomplete options for the three query fields."""

import logging
from typing import Sequence

from mdgallery.models import Suggestions
from mdgallery.parser import parse_line
from mdgallery.store import DocumentStore

logger = logging.getLogger(__name__)


def _add_unique(target: list[str], seen: set[str], value: str) -> None:
    if value not in seen:
        seen.add(value)
        target.append(value)


async def collect_suggestions(store: DocumentStore, markers: Sequence[str]) -> Suggestions:
    """Scan marker-tagged documents for item ids, gallery names, and properties.

    Every tagged document counts as a gallery, even one without embeds.
    """
    result = Suggestions()
    seen_files: set[str] = set()
    seen_galleries: set[str] = set()
    seen_props: set[str] = set()

    for ref in store.list_documents():
        content = await store.read_content(ref)
        if not any(marker in content for marker in markers):
            continue

        _add_unique(result.galleries, seen_galleries, ref.canonical_name)

        for line in content.split("\n"):
            record = parse_line(line, ref.canonical_name)
            if record is None:
                continue
            _add_unique(result.filenames, seen_files, record.item_id)
            for prop in record.properties:
                _add_unique(result.properties, seen_props, prop)

    logger.debug("Suggestions: %d filenames, %d galleries, %d properties",
                 len(result.filenames), len(result.galleries), len(result.properties))
    return result
