"""
WorkoutLogRepository: referential-integrity-checked log ingestion.

The store has no foreign keys, so every insert first confirms the referenced
exercise exists (read), and only then writes the log (write). Never
write-then-validate.
"""
import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Union

from pydantic import ValidationError

from application.constants import WORKOUT_LOGS_COLLECTION
from application.exceptions import ErrorKind, MalformedRecord, StoreUnavailable
from application.ports import DocumentStore
from application.repositories.documents import parse_document
from application.repositories.exercise_catalog import ExerciseCatalog
from domain.models import WorkoutLog
from domain.one_rep_max import estimate_1rm

logger = logging.getLogger(__name__)


@dataclass
class InsertWorkoutLogResult:
    """Result of WorkoutLogRepository.insert()."""

    success: bool
    workout_log: Optional[WorkoutLog] = None
    error_kind: Optional[ErrorKind] = None
    error: Optional[str] = None

    @classmethod
    def failed(cls, kind: ErrorKind, error: str) -> "InsertWorkoutLogResult":
        return cls(success=False, error_kind=kind, error=error)


class WorkoutLogRepository:
    """
    Persists and lists workout logs.

    Usage:
        >>> repo = WorkoutLogRepository(store, ExerciseCatalog(store))
        >>> result = repo.insert("user-1", date(2026, 10, 19), "abc123", 80.0, 5)
        >>> result.workout_log.id
        '9f1c...'
    """

    def __init__(self, store: DocumentStore, catalog: ExerciseCatalog):
        """
        Initialize the repository.

        Args:
            store: DocumentStore implementation (injected)
            catalog: ExerciseCatalog used for the reference check
        """
        self._store = store
        self._catalog = catalog

    def insert(
        self,
        user_id: str,
        workout_date: Union[date, str],
        exercise_id: str,
        weight: Optional[float] = None,
        repetitions: Optional[int] = None,
        rm: Optional[float] = None,
    ) -> InsertWorkoutLogResult:
        """
        Record a workout set for a user.

        When rm is not given but weight and repetitions are, an estimated
        1RM is stored instead.

        Args:
            user_id: Owner of the log
            workout_date: Day the set was performed
            exercise_id: ID of an existing exercise
            weight: Weight lifted
            repetitions: Repetitions completed
            rm: One-rep max, if already known

        Returns:
            InsertWorkoutLogResult holding the persisted log (with its
            store-assigned ID) or the error kind
        """
        if not exercise_id or not exercise_id.strip():
            return InsertWorkoutLogResult.failed(
                ErrorKind.INVALID_INPUT,
                "exercise_id is required and cannot be blank",
            )
        if not user_id or not user_id.strip():
            return InsertWorkoutLogResult.failed(
                ErrorKind.INVALID_INPUT,
                "user_id is required and cannot be blank",
            )

        if rm is None:
            rm = estimate_1rm(weight, repetitions)

        try:
            log = WorkoutLog(
                user_id=user_id,
                workout_date=workout_date,
                exercise_id=exercise_id,
                weight=weight,
                repetitions=repetitions,
                rm=rm,
            )
        except ValidationError as e:
            return InsertWorkoutLogResult.failed(
                ErrorKind.INVALID_INPUT,
                f"Invalid workout log: {e.error_count()} error(s)",
            )

        logger.info(
            "Inserting workout log for user_id=%s exercise_id=%s",
            user_id,
            exercise_id,
        )

        try:
            if not self._catalog.exists(exercise_id):
                logger.warning("Invalid exercise_id provided: %s", exercise_id)
                return InsertWorkoutLogResult.failed(
                    ErrorKind.REFERENTIAL_INTEGRITY_VIOLATION,
                    f"Invalid exercise_id: {exercise_id}",
                )

            log.id = self._store.add_auto_id(WORKOUT_LOGS_COLLECTION, log.to_document())
        except StoreUnavailable as e:
            logger.error("Error adding workout log for user_id=%s: %s", user_id, e.message)
            return InsertWorkoutLogResult.failed(ErrorKind.STORE_UNAVAILABLE, e.message)

        logger.info("Inserted workout log %s", log.id)
        return InsertWorkoutLogResult(success=True, workout_log=log)

    def list_by_user(self, user_id: str) -> List[WorkoutLog]:
        """
        List all workout logs of a user.

        No pagination and no ordering beyond the store default. Malformed
        documents are skipped with a warning.

        Args:
            user_id: Owner to filter on

        Returns:
            List of WorkoutLog (empty for unknown users)

        Raises:
            StoreUnavailable: If the store cannot be reached
        """
        docs = self._store.query(WORKOUT_LOGS_COLLECTION, "user_id", user_id)

        logs: List[WorkoutLog] = []
        for doc in docs:
            try:
                logs.append(parse_document(WorkoutLog.from_document, WORKOUT_LOGS_COLLECTION, doc))
            except MalformedRecord as e:
                logger.warning("Skipping malformed workout log: %s", e.message)

        logger.info("Found %d logs for user_id=%s", len(logs), user_id)
        return logs
