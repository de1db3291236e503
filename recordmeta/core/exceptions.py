"""
Exception types raised by recordmeta helpers.

Lifecycle record operations never raise. These errors come from the
helpers that reconstruct records from externally supplied values.
"""

from typing import Any


class RecordMetaError(Exception):
    """Base class for recordmeta errors."""

    pass


class InvalidRecordIdError(RecordMetaError, ValueError):
    """Raised when a value cannot be converted to an ObjectId."""

    def __init__(self, value: Any, reason: str | None = None):
        self.value = value
        self.reason = reason
        message = f"Invalid record id: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class DocumentDecodeError(RecordMetaError, ValueError):
    """Raised when a stored document field has an unusable value."""

    def __init__(self, field: str, value: Any, message: str | None = None):
        self.field = field
        self.value = value
        super().__init__(message or f"Cannot decode field '{field}' from {value!r}")
