"""
Exercise catalog seeding.

Ensures the fixed exercise catalog exists exactly once in the store no matter
how many times the service starts. Runs once during process bootstrap, before
the HTTP layer accepts traffic.

Consistency relies on two mechanisms, since the store offers no transactions:
- A persisted SeedFlag, written last, gives a fast path on later starts.
- A per-name existence check makes a re-run after a crash duplicate-free.

Within one process, concurrent calls are serialized: a caller waiting on
the lock re-reads the flag and takes the fast path once the first finishes.

Known gap: two instances starting at the same time may both observe
initialized=false and both seed. Each name is still checked before it is
staged, but exactly-once across instances needs an external single-writer
lock, which this module does not provide.
"""

import logging
from dataclasses import dataclass, field
from threading import Lock
from typing import List, Optional, Sequence, Tuple, Union

from pydantic import ValidationError

from application.constants import EXERCISES_COLLECTION, FLAGS_COLLECTION
from application.exceptions import ErrorKind, MalformedRecord, StoreUnavailable
from application.ports import DocumentStore, WriteOp
from application.repositories.documents import parse_document
from domain.models import EXERCISE_INIT_FLAG, BodyPart, Exercise, SeedFlag

logger = logging.getLogger(__name__)

# Serializes seeding within this process; callers after the first see the flag set.
_seed_lock = Lock()

CatalogItem = Tuple[str, Union[BodyPart, str]]


@dataclass
class SeedResult:
    """Result of SeedCoordinator.ensure_seeded()."""

    success: bool
    already_initialized: bool = False
    added: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    error_kind: Optional[ErrorKind] = None
    error: Optional[str] = None


class SeedCoordinator:
    """
    Idempotent loader for the exercise catalog.

    Algorithm:
    1. Read the SeedFlag. Missing: persist it with initialized=False.
       initialized=True: return. initialized=False or malformed: resume.
    2. For each catalog entry, look the name up; stage a put only if missing.
    3. Commit the staged puts in one batch.
    4. Persist the flag with initialized=True (always the last write).

    A store failure at any step aborts without setting the flag, so the next
    start resumes from step 1.

    Usage:
        >>> coordinator = SeedCoordinator(store)
        >>> result = coordinator.ensure_seeded(DEFAULT_EXERCISE_CATALOG)
        >>> result.success
        True
    """

    def __init__(self, store: DocumentStore) -> None:
        """
        Initialize the coordinator.

        Args:
            store: DocumentStore holding exercises and flags
        """
        self._store = store

    def ensure_seeded(self, catalog: Sequence[CatalogItem]) -> SeedResult:
        """
        Make sure every catalog entry exists exactly once, identified by name.

        Args:
            catalog: Ordered (name, body_part) pairs

        Returns:
            SeedResult describing what was written, or why it failed
        """
        try:
            exercises = [Exercise(name=name, body_part=body_part) for name, body_part in catalog]
        except ValidationError as e:
            logger.error("Refusing to seed an invalid exercise catalog: %s", e)
            return SeedResult(
                success=False,
                error_kind=ErrorKind.INVALID_INPUT,
                error=f"Invalid exercise catalog: {e.error_count()} error(s)",
            )

        with _seed_lock:
            return self._seed(exercises)

    def _seed(self, exercises: List[Exercise]) -> SeedResult:
        """Flag read, staging, batch commit and flag write. Caller holds _seed_lock."""
        try:
            flag = self._load_flag()
            if flag.initialized:
                logger.info("Initial exercise data already loaded; skipping seed")
                return SeedResult(success=True, already_initialized=True)

            logger.info("Loading initial exercise data (%d entries)...", len(exercises))
            ops, added, skipped = self._stage_missing(exercises)

            if ops:
                self._store.batch_write(ops)
                logger.info("Added %d initial exercises", len(ops))
            else:
                logger.info("No new exercises to add")

            flag.initialized = True
            self._store.put(FLAGS_COLLECTION, flag.id, flag.to_document())
            logger.info("Marked exercise data initialization as complete")
        except StoreUnavailable as e:
            logger.error("Exercise seeding aborted, will resume on next start: %s", e.message)
            return SeedResult(
                success=False,
                error_kind=ErrorKind.STORE_UNAVAILABLE,
                error=e.message,
            )

        return SeedResult(success=True, added=added, skipped=skipped)

    def _load_flag(self) -> SeedFlag:
        """Read the flag, creating it (initialized=False) when absent."""
        doc = self._store.get(FLAGS_COLLECTION, EXERCISE_INIT_FLAG)

        if doc is None:
            logger.info("Initialization flag not found; creating it")
            flag = SeedFlag()
            self._store.put(FLAGS_COLLECTION, flag.id, flag.to_document())
            return flag

        try:
            flag = parse_document(SeedFlag.from_document, FLAGS_COLLECTION, doc)
        except MalformedRecord as e:
            logger.warning(
                "Initialization flag exists but could not be parsed; assuming seed is needed: %s",
                e.message,
            )
            return SeedFlag()

        if not flag.initialized:
            logger.info("Initialization flag found but not marked as initialized; resuming")
        return flag

    def _stage_missing(
        self, exercises: List[Exercise]
    ) -> Tuple[List[WriteOp], List[str], List[str]]:
        """Stage a put for every exercise whose name is not stored yet."""
        ops: List[WriteOp] = []
        added: List[str] = []
        skipped: List[str] = []

        for exercise in exercises:
            if exercise.name in added:
                continue
            existing = self._store.query(EXERCISES_COLLECTION, "name", exercise.name, limit=1)
            if existing:
                logger.debug("Exercise already exists, skipping: %s", exercise.name)
                skipped.append(exercise.name)
                continue

            exercise_id = self._store.new_id(EXERCISES_COLLECTION)
            ops.append(WriteOp(EXERCISES_COLLECTION, exercise_id, exercise.to_document()))
            added.append(exercise.name)
            logger.debug("Adding exercise to batch: %s", exercise.name)

        return ops, added, skipped
