"""Apply a three-field QueryFilter to a full index."""

from mdgallery.evaluator import evaluate_field
from mdgallery.models import FieldQuery, FullIndex, IndexEntry, QueryFilter


def matches(entry: IndexEntry, query: QueryFilter) -> bool:
    """ANDs the identifier, source, and property field evaluations."""
    checks: list[tuple[str | list[str], FieldQuery]] = [
        (entry.item_id, query.identifier),
        (entry.sources, query.source),
        (entry.properties, query.property),
    ]
    return all(evaluate_field(value, fq.terms, fq.mode) for value, fq in checks)


def filter_index(full_index: FullIndex, query: QueryFilter) -> FullIndex:
    """Return a new index holding copies of the matching entries, in index order."""
    return {
        item_id: IndexEntry(item_id=item_id, sources=list(entry.sources), properties=list(entry.properties))
        for item_id, entry in full_index.items()
        if matches(entry, query)
    }
