"""
Soft-delete aware filter documents.

Builds document-store filters from the field-presence contract: live records
have no deleted_at key, soft-deleted records have one. Query execution is
left to the storage driver.
"""

from typing import Any

from recordmeta.core.identifiers import parse_object_id
from recordmeta.lifecycle.document import DELETED_AT, id_field


def active_filter(**criteria: Any) -> dict[str, Any]:
    """
    Filter selecting records that are not soft-deleted.

    Args:
        **criteria: Additional field conditions, e.g. age={"$gt": 30}

    Returns:
        Filter document
    """
    return {**criteria, DELETED_AT: {"$exists": False}}


def deleted_filter(**criteria: Any) -> dict[str, Any]:
    """Filter selecting soft-deleted records."""
    return {**criteria, DELETED_AT: {"$exists": True}}


def id_filter(record_id: Any, include_deleted: bool = False) -> dict[str, Any]:
    """
    Filter matching a single record by id.

    Args:
        record_id: ObjectId or its hex/bytes form
        include_deleted: Also match the record when soft-deleted

    Raises:
        InvalidRecordIdError: If record_id is not a valid ObjectId
    """
    criteria = {id_field(): parse_object_id(record_id)}
    if include_deleted:
        return criteria
    return active_filter(**criteria)


def is_deleted_document(document: dict[str, Any]) -> bool:
    """Check the soft-delete marker on a serialized document (same test as $exists)."""
    return DELETED_AT in document


def is_active_document(document: dict[str, Any]) -> bool:
    return not is_deleted_document(document)
