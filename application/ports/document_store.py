"""
Document Store Interface (Port).

This module defines the narrow storage interface the seeding and log
ingestion logic is written against. Implementations live in
infrastructure/db (Supabase, in-memory).

The store addresses documents by collection name + key and enforces no
cross-document constraints. Returned documents always carry their key
under "id".
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence


@dataclass(frozen=True)
class WriteOp:
    """A single staged document write for batch_write()."""

    collection: str
    doc_id: str
    doc: Dict[str, Any] = field(default_factory=dict)


class DocumentStore(Protocol):
    """
    Abstract interface for a document-oriented store.

    Every method raises StoreUnavailable when the backing store cannot be
    reached. "Not found" is never an error: get() returns None and query()
    returns an empty list.
    """

    def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a document by key.

        Args:
            collection: Collection name (e.g., "exercises")
            doc_id: Document key

        Returns:
            Document dictionary including "id", or None if not found
        """
        ...

    def query(
        self,
        collection: str,
        field: str,
        value: Any,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Find documents whose field equals value.

        Args:
            collection: Collection name
            field: Field to filter on
            value: Value the field must equal
            limit: Maximum number of documents to return (None = no limit)

        Returns:
            List of matching documents, in store default order
        """
        ...

    def put(self, collection: str, doc_id: str, doc: Dict[str, Any]) -> None:
        """
        Create or overwrite the document stored under doc_id.

        Args:
            collection: Collection name
            doc_id: Document key chosen by the caller
            doc: Document fields (an "id" entry is ignored)
        """
        ...

    def add_auto_id(self, collection: str, doc: Dict[str, Any]) -> str:
        """
        Insert a document under a store-generated key.

        Args:
            collection: Collection name
            doc: Document fields

        Returns:
            The generated document key
        """
        ...

    def new_id(self, collection: str) -> str:
        """
        Allocate a fresh key without writing anything.

        Used to stage puts in a batch before committing it.

        Args:
            collection: Collection the key is meant for

        Returns:
            A key that is not in use in the collection
        """
        ...

    def batch_write(self, ops: Sequence[WriteOp]) -> None:
        """
        Commit staged puts in a single call.

        Args:
            ops: Writes to apply; an empty sequence is a no-op
        """
        ...
