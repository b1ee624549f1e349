"""
In-memory implementation of DocumentStore.

Used for local development (STORE_BACKEND=memory) and as the base of the
test fakes. Data lives for the lifetime of the process.
"""
import copy
import logging
import threading
import uuid
from typing import Any, Dict, List, Optional, Sequence

from application.ports import WriteOp

logger = logging.getLogger(__name__)


class InMemoryDocumentStore:
    """
    Dict-backed DocumentStore.

    Documents are deep-copied on the way in and out so callers can never
    mutate stored state by accident. Insertion order is the default query
    order.

    Usage:
        store = InMemoryDocumentStore()
        doc_id = store.add_auto_id("workout_logs", {"user_id": "u1"})
        store.get("workout_logs", doc_id)
    """

    def __init__(self):
        """Initialize with empty storage."""
        self._collections: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self._lock = threading.RLock()

    def reset(self) -> None:
        """Clear all collections."""
        with self._lock:
            self._collections.clear()

    def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            doc = self._collections.get(collection, {}).get(doc_id)
            if doc is None:
                return None
            return {**copy.deepcopy(doc), "id": doc_id}

    def query(
        self,
        collection: str,
        field: str,
        value: Any,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        results = []
        with self._lock:
            for doc_id, doc in self._collections.get(collection, {}).items():
                if limit is not None and len(results) >= limit:
                    break
                if field in doc and doc[field] == value:
                    results.append({**copy.deepcopy(doc), "id": doc_id})
        return results

    def put(self, collection: str, doc_id: str, doc: Dict[str, Any]) -> None:
        self._write(collection, doc_id, doc)

    def add_auto_id(self, collection: str, doc: Dict[str, Any]) -> str:
        with self._lock:
            doc_id = self.new_id(collection)
            self._write(collection, doc_id, doc)
        return doc_id

    def new_id(self, collection: str) -> str:
        with self._lock:
            existing = self._collections.get(collection, {})
            while True:
                doc_id = uuid.uuid4().hex
                if doc_id not in existing:
                    return doc_id

    def batch_write(self, ops: Sequence[WriteOp]) -> None:
        with self._lock:
            for op in ops:
                self._write(op.collection, op.doc_id, op.doc)
        logger.debug("Committed batch of %d writes", len(ops))

    def _write(self, collection: str, doc_id: str, doc: Dict[str, Any]) -> None:
        stored = {k: v for k, v in copy.deepcopy(doc).items() if k != "id"}
        with self._lock:
            self._collections.setdefault(collection, {})[doc_id] = stored

    def count(self, collection: str) -> int:
        """Number of documents in a collection."""
        with self._lock:
            return len(self._collections.get(collection, {}))
