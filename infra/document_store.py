"""Document store interface and the in-memory implementation.

Repositories depend only on :class:`DocumentStore`; the production adapter
lives in :mod:`infra.resources`. This module is part of the infra layer and
must not import from application features.
"""
from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional, Protocol

import structlog

logger = structlog.get_logger("graphify.store")


class DocumentStore(Protocol):
    """Collection-scoped key/document access."""

    async def init(self) -> "DocumentStore":
        ...

    async def ping(self) -> None:
        ...

    async def find_one(
        self, collection: str, key: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        ...

    async def upsert(
        self,
        collection: str,
        key: Dict[str, Any],
        *,
        set_fields: Dict[str, Any],
        set_on_insert: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """Update-or-insert atomically; return True when a document was inserted."""
        ...

    async def delete_one(self, collection: str, key: Dict[str, Any]) -> int:
        ...

    async def shutdown(self) -> None:
        ...


def _matches(document: Dict[str, Any], key: Dict[str, Any]) -> bool:
    return all(document.get(field) == value for field, value in key.items())


class InMemoryDocumentStore:
    """Simple in-memory document store for development and tests.

    Documents are deep-copied on the way in and out so callers never share
    state with the store. Mutating sections contain no ``await`` and so run
    atomically on the event loop.
    """

    def __init__(self) -> None:
        self.collections: Dict[str, List[Dict[str, Any]]] = {}

    async def init(self) -> "InMemoryDocumentStore":
        logger.info("store.memory.ready")
        return self

    async def ping(self) -> None:
        return None

    async def find_one(
        self, collection: str, key: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        for document in self.collections.get(collection, []):
            if _matches(document, key):
                return copy.deepcopy(document)
        return None

    async def upsert(
        self,
        collection: str,
        key: Dict[str, Any],
        *,
        set_fields: Dict[str, Any],
        set_on_insert: Optional[Dict[str, Any]] = None,
    ) -> bool:
        documents = self.collections.setdefault(collection, [])
        existing = next((d for d in documents if _matches(d, key)), None)
        if existing is None:
            document = dict(key)
            document.update(copy.deepcopy(set_on_insert or {}))
            document.update(copy.deepcopy(set_fields))
            documents.append(document)
            return True
        # creation-only fields are left untouched on update
        existing.update(copy.deepcopy(set_fields))
        return False

    async def delete_one(self, collection: str, key: Dict[str, Any]) -> int:
        documents = self.collections.get(collection, [])
        for index, document in enumerate(documents):
            if _matches(document, key):
                del documents[index]
                return 1
        return 0

    def reset(self) -> None:
        """Clear all stored data (useful in tests)."""
        self.collections.clear()

    async def shutdown(self) -> None:
        return None
