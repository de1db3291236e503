"""
Record Lifecycle Management.

Provides data lifecycle features:
- Identity assignment (ObjectId)
- Timestamp tracking (created_at, updated_at, deleted_at)
- Soft-delete marker and filters
- Entity base type with flat document serialization
"""

from recordmeta.lifecycle.document import (
    CREATED_AT,
    DELETED_AT,
    UPDATED_AT,
    id_field,
    metadata_fields,
    metadata_from_document,
    metadata_to_document,
    split_document,
)
from recordmeta.lifecycle.entity import Entity
from recordmeta.lifecycle.filters import (
    active_filter,
    deleted_filter,
    id_filter,
    is_active_document,
    is_deleted_document,
)
from recordmeta.lifecycle.metadata import LifecycleMetadata

__all__ = [
    # Record
    "LifecycleMetadata",
    "Entity",
    # Documents
    "CREATED_AT",
    "UPDATED_AT",
    "DELETED_AT",
    "id_field",
    "metadata_fields",
    "metadata_from_document",
    "metadata_to_document",
    "split_document",
    # Filters
    "active_filter",
    "deleted_filter",
    "id_filter",
    "is_active_document",
    "is_deleted_document",
]
