"""
Lifecycle Metadata Record.

Identity and audit timestamps shared by every stored entity:
- id: ObjectId assigned when insert metadata is applied
- created_at: set together with id
- updated_at: refreshed by every update, absent until the first one
- deleted_at: soft-delete marker, absent until deleted

Timestamps come from an injectable clock. None of the operations validate
call order or raise.
"""

from datetime import datetime
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from recordmeta.core.clock import ZERO_TIME, BaseClock, get_default_clock
from recordmeta.core.identifiers import (
    NIL_OBJECT_ID,
    PydanticObjectId,
    is_nil_object_id,
    new_object_id,
)

logger = structlog.get_logger(__name__)


class LifecycleMetadata(BaseModel):
    """
    Identity and audit timestamps for a stored record.

    Usage:
        ```python
        meta = LifecycleMetadata()
        meta.apply_insert_metadata()   # before the first insert
        meta.apply_update_metadata()   # before each update
        meta.apply_delete_metadata()   # soft delete

        meta.get_id()       # "65a1f0c2e4b0a1b2c3d4e5f6"
        meta.is_deleted()   # True
        ```
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    id: PydanticObjectId = Field(default=NIL_OBJECT_ID, description="Record identifier")
    created_at: datetime = Field(default=ZERO_TIME, description="When the record was created")
    updated_at: datetime | None = Field(default=None, description="When the record was last updated")
    deleted_at: datetime | None = Field(default=None, description="When the record was soft-deleted")

    _clock: BaseClock = PrivateAttr(default_factory=get_default_clock)

    def __init__(self, clock: BaseClock | None = None, **data: Any) -> None:
        super().__init__(**data)
        if clock is not None:
            self._clock = clock

    @property
    def clock(self) -> BaseClock:
        """Time source used by the apply_* operations."""
        return self._clock

    def bind_clock(self, clock: BaseClock) -> None:
        """Replace the time source."""
        self._clock = clock

    def __eq__(self, other: object) -> bool:
        # Value equality over the stored fields; the bound clock is not part of the value.
        if not isinstance(other, LifecycleMetadata):
            return NotImplemented
        return (
            self.id == other.id
            and self.created_at == other.created_at
            and self.updated_at == other.updated_at
            and self.deleted_at == other.deleted_at
        )

    # =========================================================================
    # Lifecycle transitions
    # =========================================================================

    def apply_insert_metadata(self) -> None:
        """
        Assign a new id and creation time.

        Every call generates a fresh id and timestamp, so call it once per
        logical record creation.
        """
        self.id = new_object_id()
        self.created_at = self._clock.now()
        logger.debug("Applied insert metadata", record_id=str(self.id))

    def apply_update_metadata(self) -> None:
        """Set updated_at to the current time."""
        self.updated_at = self._clock.now()
        logger.debug("Applied update metadata", record_id=str(self.id))

    def apply_delete_metadata(self) -> None:
        """Mark the record soft-deleted. Repeated calls refresh deleted_at."""
        self.deleted_at = self._clock.now()
        logger.debug("Applied delete metadata", record_id=str(self.id))

    # =========================================================================
    # Accessors
    # =========================================================================

    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def has_id(self) -> bool:
        """Check whether insert metadata has assigned an id."""
        return not is_nil_object_id(self.id)

    def get_id(self) -> str:
        """Return the id as 24 hex characters (all zeros when unassigned)."""
        return str(self.id)

    def get_created_at(self) -> datetime:
        return self.created_at

    def get_updated_at(self) -> datetime | None:
        return self.updated_at

    def get_deleted_at(self) -> datetime | None:
        return self.deleted_at
