"""Document store boundary — the only place gallery code touches storage."""

import asyncio
import logging
import os
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """A document store list/read call failed."""


class DocumentNotFoundError(StoreError):
    """A listed document no longer exists."""


@dataclass(frozen=True)
class DocumentRef:
    canonical_name: str   # basename without extension, e.g. "Cats" for "pets/Cats.md"
    path: str = ""


class DocumentStore(Protocol):
    def list_documents(self) -> list[DocumentRef]:
        ...

    async def read_content(self, ref: DocumentRef) -> str:
        ...


class VaultStore:
    """Directory tree of markdown notes, listed recursively in sorted path order."""

    def __init__(self, root: str, extension: str = ".md"):
        self._root = root
        self._extension = extension

    @property
    def root(self) -> str:
        return self._root

    def _walk(self):
        if not os.path.isdir(self._root):
            raise StoreError(f"Vault directory not found: {self._root}")
        for dirpath, dirnames, filenames in os.walk(self._root):
            dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
            for name in sorted(filenames):
                yield dirpath, name

    def list_documents(self) -> list[DocumentRef]:
        refs = []
        for dirpath, name in self._walk():
            stem, ext = os.path.splitext(name)
            if ext == self._extension:
                refs.append(DocumentRef(canonical_name=stem, path=os.path.join(dirpath, name)))
        logger.debug("Listed %d documents under %s", len(refs), self._root)
        return refs

    def _read(self, path: str) -> str:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    async def read_content(self, ref: DocumentRef) -> str:
        try:
            return await asyncio.to_thread(self._read, ref.path)
        except FileNotFoundError as e:
            logger.error("Document vanished before read: %s", ref.path)
            raise DocumentNotFoundError(f"Document not found: {ref.path}") from e
        except OSError as e:
            logger.error("Failed to read %s: %s", ref.path, e)
            raise StoreError(f"Failed to read {ref.path}: {e}") from e

    def file_names(self) -> set[str]:
        """Names (extension included) of every file in the vault, from a single walk."""
        return {name for _, name in self._walk()}

    def has_file(self, file_name: str) -> bool:
        """True if any file in the vault has exactly this name (extension included)."""
        return file_name in self.file_names()
