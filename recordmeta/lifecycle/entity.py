"""
Entity base type.

Domain models subclass Entity and add their own fields. The lifecycle
metadata lives in the `meta` field and is flattened into the top level of
the stored document.
"""

from datetime import datetime
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, Field

from recordmeta.core.clock import BaseClock
from recordmeta.lifecycle.document import (
    DocumentMode,
    metadata_to_document,
    metadata_from_document,
    split_document,
)
from recordmeta.lifecycle.metadata import LifecycleMetadata

E = TypeVar("E", bound="Entity")


class Entity(BaseModel):
    """
    Base class for stored domain entities.

    Usage:
        ```python
        class User(Entity):
            name: str
            email: str
            age: int = 0

        user = User(name="John Doe", email="john@example.com", age=30)
        user.apply_insert_metadata()
        collection.insert_one(user.to_document())

        user.age = 31
        user.apply_update_metadata()
        ```

    `clock` is a reserved constructor keyword: subclasses may not declare a
    field with that name.
    """

    RESERVED_FIELDS: ClassVar[frozenset[str]] = frozenset({"clock"})

    meta: LifecycleMetadata = Field(
        default_factory=LifecycleMetadata,
        description="Identity and audit timestamps",
    )

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        clashes = cls.RESERVED_FIELDS & set(cls.model_fields)
        if clashes:
            raise TypeError(
                f"{cls.__name__} declares reserved field name(s): {', '.join(sorted(clashes))}"
            )

    def __init__(self, clock: BaseClock | None = None, **data: Any) -> None:
        super().__init__(**data)
        if clock is not None:
            self.meta.bind_clock(clock)

    # =========================================================================
    # Delegated lifecycle operations
    # =========================================================================

    def apply_insert_metadata(self) -> None:
        self.meta.apply_insert_metadata()

    def apply_update_metadata(self) -> None:
        self.meta.apply_update_metadata()

    def apply_delete_metadata(self) -> None:
        self.meta.apply_delete_metadata()

    def is_deleted(self) -> bool:
        return self.meta.is_deleted()

    def has_id(self) -> bool:
        return self.meta.has_id()

    def get_id(self) -> str:
        return self.meta.get_id()

    def get_created_at(self) -> datetime:
        return self.meta.get_created_at()

    def get_updated_at(self) -> datetime | None:
        return self.meta.get_updated_at()

    def get_deleted_at(self) -> datetime | None:
        return self.meta.get_deleted_at()

    @property
    def id(self) -> str:
        return self.meta.get_id()

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_document(self, mode: DocumentMode = "python") -> dict[str, Any]:
        """
        Serialize to a flat storage document.

        Metadata keys come first, followed by the entity's own fields.
        """
        document = metadata_to_document(self.meta, mode=mode)
        document.update(self.model_dump(mode=mode, exclude={"meta"}))
        return document

    @classmethod
    def from_document(
        cls: type[E],
        document: dict[str, Any],
        clock: BaseClock | None = None,
    ) -> E:
        """
        Rebuild an entity from a flat storage document.

        Args:
            document: Stored document
            clock: Time source for later lifecycle operations

        Raises:
            InvalidRecordIdError: If the stored id is malformed
            DocumentDecodeError: If a stored timestamp is malformed
        """
        meta_part, fields = split_document(document)
        meta = metadata_from_document(meta_part, clock=clock)
        return cls(meta=meta, **fields)
