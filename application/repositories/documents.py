"""
Helpers for turning stored documents into domain models.
"""
from typing import Any, Callable, Dict, TypeVar

from pydantic import ValidationError

from application.exceptions import MalformedRecord

T = TypeVar("T")


def parse_document(
    parse: Callable[[Dict[str, Any]], T],
    collection: str,
    doc: Dict[str, Any],
) -> T:
    """
    Parse a stored document, raising MalformedRecord on shape errors.

    Args:
        parse: Model constructor (e.g., Exercise.from_document)
        collection: Collection the document came from (for diagnostics)
        doc: Raw document including "id"

    Returns:
        The parsed model
    """
    try:
        return parse(doc)
    except ValidationError as e:
        doc_id = str(doc.get("id", ""))
        raise MalformedRecord(
            f"Document {collection}/{doc_id} does not match its schema: "
            f"{e.error_count()} error(s)",
            collection=collection,
            doc_id=doc_id,
        ) from e
