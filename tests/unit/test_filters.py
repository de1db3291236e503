"""
Unit Tests for soft-delete filters.
"""

import pytest
from bson import ObjectId

from recordmeta.core.exceptions import InvalidRecordIdError
from recordmeta.lifecycle.filters import (
    active_filter,
    deleted_filter,
    id_filter,
    is_active_document,
    is_deleted_document,
)


class TestFilterDocuments:
    """Test cases for filter builders."""

    def test_active_filter(self) -> None:
        assert active_filter() == {"deleted_at": {"$exists": False}}

    def test_deleted_filter(self) -> None:
        assert deleted_filter() == {"deleted_at": {"$exists": True}}

    def test_active_filter_with_criteria(self) -> None:
        """Test combining the active constraint with other conditions."""
        flt = active_filter(age={"$gt": 30}, is_active=True)

        assert flt == {
            "age": {"$gt": 30},
            "is_active": True,
            "deleted_at": {"$exists": False},
        }

    def test_criteria_cannot_override_marker(self) -> None:
        """Test that the soft-delete constraint wins over caller criteria."""
        flt = active_filter(deleted_at={"$exists": True})

        assert flt["deleted_at"] == {"$exists": False}

    def test_id_filter_excludes_deleted(self) -> None:
        """Test that id lookups skip soft-deleted records by default."""
        flt = id_filter("507f1f77bcf86cd799439011")

        assert flt == {
            "_id": ObjectId("507f1f77bcf86cd799439011"),
            "deleted_at": {"$exists": False},
        }

    def test_id_filter_include_deleted(self) -> None:
        """Test that include_deleted drops the soft-delete constraint."""
        oid = ObjectId()

        assert id_filter(oid, include_deleted=True) == {"_id": oid}

    def test_id_filter_invalid(self) -> None:
        """Test that a malformed id is rejected before querying."""
        with pytest.raises(InvalidRecordIdError):
            id_filter("bogus")


class TestDocumentPredicates:
    """Test cases for document presence checks."""

    def test_live_entity_document(self, user) -> None:
        """Test that a serialized live entity counts as active."""
        user.apply_insert_metadata()
        user.apply_update_metadata()
        document = user.to_document()

        assert is_active_document(document)
        assert not is_deleted_document(document)

    def test_deleted_entity_document(self, user) -> None:
        """Test that a serialized soft-deleted entity counts as deleted."""
        user.apply_insert_metadata()
        user.apply_delete_metadata()
        document = user.to_document()

        assert is_deleted_document(document)
        assert not is_active_document(document)

    def test_select_live_records(self, user, product) -> None:
        """Test filtering a batch of documents like FindAll / FindDeleted."""
        user.apply_insert_metadata()
        product.apply_insert_metadata()
        product.apply_delete_metadata()
        documents = [user.to_document(), product.to_document()]

        live = [d for d in documents if is_active_document(d)]
        deleted = [d for d in documents if is_deleted_document(d)]

        assert [d["name"] for d in live] == ["John Doe"]
        assert [d["name"] for d in deleted] == ["Gaming Laptop"]
