"""
Application-layer exceptions.

These exceptions are shared across the application and infrastructure layers.
Use cases translate them into typed results; the API layer is the only place
that maps them to HTTP status codes.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Error categories surfaced in use case results."""

    INVALID_INPUT = "invalid_input"
    REFERENTIAL_INTEGRITY_VIOLATION = "referential_integrity_violation"
    STORE_UNAVAILABLE = "store_unavailable"
    MALFORMED_RECORD = "malformed_record"


class LiftLogError(Exception):
    """Base class for all application errors."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(LiftLogError):
    """A required field is missing or blank."""

    kind = ErrorKind.INVALID_INPUT


class ReferentialIntegrityViolation(LiftLogError):
    """A record references a document that does not exist."""

    kind = ErrorKind.REFERENTIAL_INTEGRITY_VIOLATION


class StoreUnavailable(LiftLogError):
    """Communication with the backing store failed or timed out.

    Transient: callers may retry the whole operation.
    """

    kind = ErrorKind.STORE_UNAVAILABLE


class MalformedRecord(LiftLogError):
    """A stored document could not be parsed into its entity shape."""

    kind = ErrorKind.MALFORMED_RECORD

    def __init__(self, message: str, collection: str = "", doc_id: str = ""):
        super().__init__(message)
        self.collection = collection
        self.doc_id = doc_id
