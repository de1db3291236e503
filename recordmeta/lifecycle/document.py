"""
Document codec for lifecycle metadata.

Stored layout:
- _id: ObjectId, omitted while unassigned so storage may assign it
- created_at: always written
- updated_at / deleted_at: written only when present, never as null

Readers rely on the absence of deleted_at to select live records.

Two output modes:
- "python": BSON-ready values (ObjectId, datetime) for the storage driver
- "json": hex id and ISO-8601 strings for JSON transport
"""

from datetime import datetime, timezone
from typing import Any, Literal

import structlog
from pydantic import TypeAdapter, ValidationError

from recordmeta.config.settings import get_settings
from recordmeta.core.clock import ZERO_TIME, BaseClock
from recordmeta.core.exceptions import DocumentDecodeError
from recordmeta.core.identifiers import NIL_OBJECT_ID, is_nil_object_id, parse_object_id
from recordmeta.lifecycle.metadata import LifecycleMetadata

logger = structlog.get_logger(__name__)

CREATED_AT = "created_at"
UPDATED_AT = "updated_at"
DELETED_AT = "deleted_at"

TIMESTAMP_FIELDS = (CREATED_AT, UPDATED_AT, DELETED_AT)

DocumentMode = Literal["python", "json"]

_timestamp_adapter: TypeAdapter[datetime] = TypeAdapter(datetime)


def id_field() -> str:
    """Document key holding the record identifier."""
    return get_settings().lifecycle.id_field


def metadata_fields() -> tuple[str, ...]:
    """All document keys owned by lifecycle metadata."""
    return (id_field(), *TIMESTAMP_FIELDS)


def metadata_to_document(
    meta: LifecycleMetadata,
    mode: DocumentMode = "python",
) -> dict[str, Any]:
    """
    Serialize lifecycle metadata to a document.

    Args:
        meta: Metadata record
        mode: "python" for driver values, "json" for JSON-safe values

    Returns:
        Document dict with absent fields omitted
    """
    values = meta.model_dump(mode=mode)
    document: dict[str, Any] = {}

    if not is_nil_object_id(meta.id):
        document[id_field()] = values["id"]

    document[CREATED_AT] = values[CREATED_AT]

    for field in (UPDATED_AT, DELETED_AT):
        if values[field] is not None:
            document[field] = values[field]

    return document


def _decode_timestamp(field: str, value: Any) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = _timestamp_adapter.validate_python(value)
        except ValidationError as e:
            logger.warning("Rejected timestamp", field=field, value=value)
            raise DocumentDecodeError(field, value, f"Invalid ISO-8601 timestamp in '{field}': {value!r}") from e
    else:
        logger.warning("Rejected timestamp", field=field, value_type=type(value).__name__)
        raise DocumentDecodeError(field, value)

    # BSON datetimes decode naive unless the codec is tz_aware; they are UTC.
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def metadata_from_document(
    document: dict[str, Any],
    clock: BaseClock | None = None,
) -> LifecycleMetadata:
    """
    Rebuild lifecycle metadata from a stored document.

    Args:
        document: Stored document (extra keys are ignored)
        clock: Time source for subsequent lifecycle operations

    Returns:
        LifecycleMetadata populated from the document

    Raises:
        InvalidRecordIdError: If the id value is not an ObjectId
        DocumentDecodeError: If a timestamp value cannot be decoded
    """
    raw_id = document.get(id_field())
    record_id = NIL_OBJECT_ID if raw_id is None else parse_object_id(raw_id)

    raw_created = document.get(CREATED_AT)
    created_at = ZERO_TIME if raw_created is None else _decode_timestamp(CREATED_AT, raw_created)

    optional: dict[str, datetime | None] = {}
    for field in (UPDATED_AT, DELETED_AT):
        raw = document.get(field)
        optional[field] = None if raw is None else _decode_timestamp(field, raw)

    return LifecycleMetadata(
        clock=clock,
        id=record_id,
        created_at=created_at,
        updated_at=optional[UPDATED_AT],
        deleted_at=optional[DELETED_AT],
    )


def split_document(document: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """
    Separate lifecycle keys from entity keys in a flat document.

    Returns:
        (metadata part, remaining entity fields)
    """
    owned = set(metadata_fields())
    meta_part = {k: v for k, v in document.items() if k in owned}
    rest = {k: v for k, v in document.items() if k not in owned}
    return meta_part, rest
