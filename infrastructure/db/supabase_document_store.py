"""
Supabase implementation of DocumentStore.

Each collection maps to a Postgres table with a text primary key "id"
(default gen_random_uuid()::text) and one column per document field:

    exercises(id, name, body_part)
    workout_logs(id, user_id, workout_date, exercise_id, weight, repetitions, rm)
    "initializationFlags"(id, flag_name, initialized)

PostgREST and transport errors are raised as StoreUnavailable so the
application layer never sees client-library exceptions.
"""
import logging
import uuid
from collections import OrderedDict
from typing import Any, Dict, List, Optional, Sequence

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from application.exceptions import StoreUnavailable
from application.ports import WriteOp

logger = logging.getLogger(__name__)

STORE_ERRORS = (APIError, httpx.HTTPError)


class SupabaseDocumentStore:
    """
    Supabase implementation of the DocumentStore protocol.

    batch_write() issues one bulk upsert per collection. A single upsert
    statement is atomic in Postgres, so a batch touching one collection
    (the seeding case) becomes visible all at once.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        try:
            result = (
                self._client.table(collection)
                .select("*")
                .eq("id", doc_id)
                .limit(1)
                .execute()
            )
        except STORE_ERRORS as e:
            logger.exception("Error fetching %s/%s", collection, doc_id)
            raise StoreUnavailable(f"Failed to read {collection}/{doc_id}: {e}") from e

        if result.data:
            return result.data[0]
        return None

    def query(
        self,
        collection: str,
        field: str,
        value: Any,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        try:
            request = self._client.table(collection).select("*").eq(field, value)
            if limit is not None:
                request = request.limit(limit)
            result = request.execute()
        except STORE_ERRORS as e:
            logger.exception("Error querying %s where %s=%s", collection, field, value)
            raise StoreUnavailable(f"Failed to query {collection}: {e}") from e

        return result.data or []

    def put(self, collection: str, doc_id: str, doc: Dict[str, Any]) -> None:
        try:
            self._client.table(collection).upsert(_row(doc_id, doc)).execute()
        except STORE_ERRORS as e:
            logger.exception("Error writing %s/%s", collection, doc_id)
            raise StoreUnavailable(f"Failed to write {collection}/{doc_id}: {e}") from e

    def add_auto_id(self, collection: str, doc: Dict[str, Any]) -> str:
        row = {k: v for k, v in doc.items() if k != "id"}
        try:
            result = self._client.table(collection).insert(row).execute()
        except STORE_ERRORS as e:
            logger.exception("Error inserting into %s", collection)
            raise StoreUnavailable(f"Failed to insert into {collection}: {e}") from e

        if not result.data or not result.data[0].get("id"):
            raise StoreUnavailable(f"Insert into {collection} returned no id")
        return str(result.data[0]["id"])

    def new_id(self, collection: str) -> str:
        return str(uuid.uuid4())

    def batch_write(self, ops: Sequence[WriteOp]) -> None:
        if not ops:
            return

        rows_by_collection: "OrderedDict[str, List[Dict[str, Any]]]" = OrderedDict()
        for op in ops:
            rows_by_collection.setdefault(op.collection, []).append(_row(op.doc_id, op.doc))

        for collection, rows in rows_by_collection.items():
            try:
                self._client.table(collection).upsert(rows).execute()
            except STORE_ERRORS as e:
                logger.exception("Error committing batch of %d rows to %s", len(rows), collection)
                raise StoreUnavailable(f"Failed to commit batch to {collection}: {e}") from e
            logger.debug("Committed %d rows to %s", len(rows), collection)


def _row(doc_id: str, doc: Dict[str, Any]) -> Dict[str, Any]:
    """Flatten a document and its key into a table row."""
    return {**{k: v for k, v in doc.items() if k != "id"}, "id": doc_id}
