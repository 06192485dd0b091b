"""Tests for mdgallery/selector.py"""

import pytest

from conftest import MemoryStore
from mdgallery.models import SourcePolicy
from mdgallery.selector import select_blocks
from mdgallery.store import DocumentNotFoundError, StoreError


# ── explicit policy ─────────────────────────────────────────────


@pytest.mark.asyncio
async def test_explicit_follows_name_order(memory_store):
    blocks = await select_blocks(SourcePolicy.EXPLICIT, ["B", "A"], memory_store)
    assert [b.source_name for b in blocks] == ["B", "A"]
    assert blocks[0].lines == ["<![[img1.png]]<red,large>>"]


@pytest.mark.asyncio
async def test_explicit_skips_unknown_names(memory_store):
    blocks = await select_blocks(SourcePolicy.EXPLICIT, ["A", "Nope", "B"], memory_store)
    assert [b.source_name for b in blocks] == ["A", "B"]
    assert "Nope" not in memory_store.reads


@pytest.mark.asyncio
async def test_explicit_lookup_is_exact(memory_store):
    blocks = await select_blocks(SourcePolicy.EXPLICIT, ["a", "A "], memory_store)
    assert blocks == []


@pytest.mark.asyncio
async def test_explicit_empty_names(memory_store):
    assert await select_blocks(SourcePolicy.EXPLICIT, [], memory_store) == []


# ── virtual policy ──────────────────────────────────────────────


@pytest.mark.asyncio
async def test_virtual_only_marked_documents(memory_store):
    blocks = await select_blocks(SourcePolicy.VIRTUAL, ["#mdGallery"], memory_store)
    assert [b.source_name for b in blocks] == ["Tagged"]
    assert blocks[0].lines == ["#mdGallery", "<![[img3.png]]<blue>>"]


@pytest.mark.asyncio
async def test_virtual_reads_every_document(memory_store):
    await select_blocks(SourcePolicy.VIRTUAL, ["#mdGallery"], memory_store)
    assert memory_store.reads == ["A", "B", "Notes", "Tagged"]


@pytest.mark.asyncio
async def test_virtual_any_marker_matches(memory_store):
    blocks = await select_blocks(SourcePolicy.VIRTUAL, ["#nothing", "plain text"], memory_store)
    assert [b.source_name for b in blocks] == ["Notes"]


@pytest.mark.asyncio
async def test_virtual_marker_is_case_sensitive(memory_store):
    blocks = await select_blocks(SourcePolicy.VIRTUAL, ["#MDGALLERY"], memory_store)
    assert blocks == []


@pytest.mark.asyncio
async def test_virtual_marker_is_not_regex():
    store = MemoryStore({"Dot": "a.b", "Other": "axb"})
    blocks = await select_blocks(SourcePolicy.VIRTUAL, ["a.b"], store)
    assert [b.source_name for b in blocks] == ["Dot"]


# ── store failures ──────────────────────────────────────────────


@pytest.mark.asyncio
async def test_read_failure_aborts_selection(memory_store):
    memory_store.vanished.add("Notes")
    with pytest.raises(DocumentNotFoundError):
        await select_blocks(SourcePolicy.VIRTUAL, ["#mdGallery"], memory_store)


@pytest.mark.asyncio
async def test_not_found_is_store_error(memory_store):
    memory_store.vanished.add("A")
    with pytest.raises(StoreError):
        await select_blocks(SourcePolicy.EXPLICIT, ["A"], memory_store)
