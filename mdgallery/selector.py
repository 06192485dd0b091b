"""Choose which documents feed the aggregator.

Reads are issued sequentially so the block order (and therefore the index
order) follows the store's listing order. Any StoreError aborts the whole
selection; blocks collected before the failure are discarded.
"""

import logging
from typing import Sequence

from mdgallery.models import RawTextBlock, SourcePolicy
from mdgallery.store import DocumentStore

logger = logging.getLogger(__name__)


async def select_explicit(store: DocumentStore, names: Sequence[str]) -> list[RawTextBlock]:
    """One block per name that matches a document's canonical name; misses are skipped."""
    documents = store.list_documents()
    blocks = []

    for name in names:
        ref = next((d for d in documents if d.canonical_name == name), None)
        if ref is None:
            logger.debug("No document named %r, skipping", name)
            continue
        content = await store.read_content(ref)
        blocks.append(RawTextBlock.from_content(content, ref.canonical_name))

    return blocks


async def select_virtual(store: DocumentStore, markers: Sequence[str]) -> list[RawTextBlock]:
    """One block per document whose content contains any marker (case-sensitive substring)."""
    blocks = []

    for ref in store.list_documents():
        content = await store.read_content(ref)
        if any(marker in content for marker in markers):
            blocks.append(RawTextBlock.from_content(content, ref.canonical_name))

    return blocks


async def select_blocks(
    policy: SourcePolicy,
    source_data: Sequence[str],
    store: DocumentStore,
) -> list[RawTextBlock]:
    if policy is SourcePolicy.EXPLICIT:
        blocks = await select_explicit(store, source_data)
    else:
        blocks = await select_virtual(store, source_data)

    logger.info("Selected %d block(s) using %s policy (%d source value(s))",
                len(blocks), policy.value, len(source_data))
    return blocks
