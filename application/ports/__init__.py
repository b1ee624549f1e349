"""
Repository Interfaces (Ports) for the LiftLog API.

This package defines abstract interfaces that decouple the seeding and log
ingestion logic from the storage technology. Implementations are provided in
the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the application needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import DocumentStore

    class WorkoutLogRepository:
        def __init__(self, store: DocumentStore, ...):
            self._store = store
"""

from application.ports.document_store import DocumentStore, WriteOp

__all__ = [
    "DocumentStore",
    "WriteOp",
]
