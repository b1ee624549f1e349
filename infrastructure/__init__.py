"""
Infrastructure Layer for the LiftLog API.

This package contains concrete implementations of the DocumentStore port:
- db/: Supabase and in-memory document stores
"""

from infrastructure.db import InMemoryDocumentStore, SupabaseDocumentStore

__all__ = [
    "InMemoryDocumentStore",
    "SupabaseDocumentStore",
]
