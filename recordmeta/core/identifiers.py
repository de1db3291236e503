"""
ObjectId helpers.

Record identifiers are 12-byte BSON ObjectIds (4-byte timestamp, 5-byte
per-process random value, 3-byte counter), rendered as 24 hex characters.
"""

from typing import Annotated, Any

import structlog
from bson import ObjectId
from bson.errors import InvalidId
from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from recordmeta.core.exceptions import InvalidRecordIdError

logger = structlog.get_logger(__name__)

NIL_OBJECT_ID = ObjectId(b"\x00" * 12)
NIL_HEX = str(NIL_OBJECT_ID)


def new_object_id() -> ObjectId:
    """Generate a fresh ObjectId."""
    return ObjectId()


def is_nil_object_id(oid: ObjectId | None) -> bool:
    """Check whether an ObjectId is missing or the all-zero value."""
    return oid is None or oid == NIL_OBJECT_ID


def parse_object_id(value: Any) -> ObjectId:
    """
    Convert an externally supplied value to an ObjectId.

    Args:
        value: ObjectId, 24-character hex string or 12 raw bytes

    Returns:
        The parsed ObjectId

    Raises:
        InvalidRecordIdError: If the value is not a valid ObjectId
    """
    if isinstance(value, ObjectId):
        return value

    if not isinstance(value, (str, bytes)):
        logger.warning("Rejected record id", value_type=type(value).__name__)
        raise InvalidRecordIdError(value, reason=f"unsupported type {type(value).__name__}")

    if isinstance(value, str):
        value = value.strip()

    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        logger.warning("Rejected record id", value=value, error=str(e))
        raise InvalidRecordIdError(value, reason=str(e)) from e


# ObjectId field type: accepts the forms parse_object_id does, dumps as hex in JSON mode.
PydanticObjectId = Annotated[
    ObjectId,
    PlainValidator(parse_object_id),
    PlainSerializer(str, return_type=str, when_used="json"),
    WithJsonSchema({"type": "string", "pattern": "^[0-9a-f]{24}$"}),
]
