import os

import pytest

from mdgallery.store import DocumentNotFoundError, DocumentRef

VAULT_DIR = os.path.join(os.path.dirname(__file__), "fixtures", "vault")


class MemoryStore:
    """In-memory document store keyed by canonical name, listed in insertion order."""

    def __init__(self, documents: dict[str, str] | None = None):
        self.documents = dict(documents or {})
        self.reads: list[str] = []
        self.vanished: set[str] = set()

    def list_documents(self) -> list[DocumentRef]:
        return [DocumentRef(canonical_name=name, path=f"{name}.md") for name in self.documents]

    async def read_content(self, ref: DocumentRef) -> str:
        self.reads.append(ref.canonical_name)
        if ref.canonical_name in self.vanished:
            raise DocumentNotFoundError(f"Document not found: {ref.path}")
        return self.documents[ref.canonical_name]


@pytest.fixture
def memory_store():
    return MemoryStore({
        "A": "![[img1.png]]",
        "B": "<![[img1.png]]<red,large>>",
        "Notes": "plain text, no embeds\n![[img2.png]]",
        "Tagged": "#mdGallery\n<![[img3.png]]<blue>>",
    })


@pytest.fixture
def vault_dir():
    return VAULT_DIR
