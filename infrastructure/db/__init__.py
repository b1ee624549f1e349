"""
Infrastructure Database Layer.

This package provides the DocumentStore adapters defined against
application.ports:
- SupabaseDocumentStore: one Postgres table per collection
- InMemoryDocumentStore: process-local dicts (development, tests)

Usage:
    from supabase import create_client
    from infrastructure.db import SupabaseDocumentStore

    client = create_client(SUPABASE_URL, SUPABASE_KEY)
    store = SupabaseDocumentStore(client)
"""

from infrastructure.db.memory_document_store import InMemoryDocumentStore
from infrastructure.db.supabase_document_store import SupabaseDocumentStore

__all__ = [
    "InMemoryDocumentStore",
    "SupabaseDocumentStore",
]
