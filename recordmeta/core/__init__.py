"""
Core Infrastructure Module.

Provides foundational pieces shared by the lifecycle package:
- Clocks (system and manually driven)
- ObjectId generation and parsing
- Exception hierarchy
"""

from recordmeta.core.clock import (
    ZERO_TIME,
    BaseClock,
    FrozenClock,
    SystemClock,
    get_default_clock,
    is_zero_time,
)
from recordmeta.core.exceptions import (
    DocumentDecodeError,
    InvalidRecordIdError,
    RecordMetaError,
)
from recordmeta.core.identifiers import (
    NIL_HEX,
    NIL_OBJECT_ID,
    PydanticObjectId,
    is_nil_object_id,
    new_object_id,
    parse_object_id,
)

__all__ = [
    # Clocks
    "ZERO_TIME",
    "BaseClock",
    "FrozenClock",
    "SystemClock",
    "get_default_clock",
    "is_zero_time",
    # Exceptions
    "DocumentDecodeError",
    "InvalidRecordIdError",
    "RecordMetaError",
    # Identifiers
    "NIL_HEX",
    "NIL_OBJECT_ID",
    "PydanticObjectId",
    "is_nil_object_id",
    "new_object_id",
    "parse_object_id",
]
