"""Output formatters — text and JSON (NDJSON) for index entries and suggestions."""

import json
from typing import Callable

from mdgallery.models import IndexEntry, Suggestions


def format_text(entry: IndexEntry) -> str:
    """ITEM  [source, ...]  {prop, ...}"""
    sources = ", ".join(entry.sources)
    props = ", ".join(entry.properties)
    return f"{entry.item_id}  [{sources}]  {{{props}}}"


def format_json(entry: IndexEntry) -> str:
    """One JSON object per line, compatible with jq."""
    return json.dumps(entry.to_dict())


def get_formatter(output_format: str = "text") -> Callable[[IndexEntry], str]:
    if output_format == "json":
        return format_json
    return format_text


def format_suggestions_text(suggestions: Suggestions) -> str:
    lines = []
    for label, values in (
        ("Filenames", suggestions.filenames),
        ("Galleries", suggestions.galleries),
        ("Properties", suggestions.properties),
    ):
        lines.append(f"{label} ({len(values)}):")
        for value in values:
            lines.append(f"  - {value}")
    return "\n".join(lines)


def format_suggestions_json(suggestions: Suggestions) -> str:
    return json.dumps(suggestions.to_dict(), indent=2)
