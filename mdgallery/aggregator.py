"""Fold parsed gallery lines into a per-item index."""

import logging
from typing import Iterable, Sequence

from mdgallery.models import FullIndex, IndexEntry, RawTextBlock, SourcePolicy
from mdgallery.parser import parse_line
from mdgallery.selector import select_blocks
from mdgallery.store import DocumentStore

logger = logging.getLogger(__name__)


def aggregate(blocks: Iterable[RawTextBlock]) -> FullIndex:
    """Parse every line of every block and merge records by item id.

    Items keep first-seen order across the block sequence; within an entry,
    sources and properties keep first-seen order and are never duplicated.
    """
    index: FullIndex = {}
    records = 0

    for block in blocks:
        for line in block.lines:
            record = parse_line(line, block.source_name)
            if record is None:
                continue
            records += 1

            entry = index.get(record.item_id)
            if entry is None:
                entry = IndexEntry(item_id=record.item_id)
                index[record.item_id] = entry

            entry.add_source(record.source_name)
            for prop in record.properties:
                entry.add_property(prop)

    logger.debug("Aggregated %d records into %d entries", records, len(index))
    return index


async def build_index(store: DocumentStore, policy: SourcePolicy, source_data: Sequence[str]) -> FullIndex:
    """Select blocks from the store and aggregate them. StoreError propagates."""
    blocks = await select_blocks(policy, source_data, store)
    return aggregate(blocks)
