"""
Tests for the Store class.
"""

import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from txkv import Store


class TestStoreBasicOperations:
    """Test basic store operations."""

    def test_store_initialization(self):
        """Test store starts empty."""
        store = Store()
        assert len(store) == 0
        assert store.to_dict() == {}

    def test_set_and_get_basic(self):
        """Test basic set and get operations."""
        store = Store()
        store.set("key1", "value1")
        assert store.get("key1") == "value1"
        assert "key1" in store

    def test_get_nonexistent_key_returns_none(self):
        """Test that getting a missing key reports not found."""
        store = Store()
        assert store.get("nonexistent") is None
        assert "nonexistent" not in store

    def test_overwrite_existing_key(self):
        """Test overwriting an existing key."""
        store = Store()
        store.set("key", "value1")
        store.set("key", "value2")
        assert store.get("key") == "value2"
        assert len(store) == 1

    def test_delete_existing_key(self):
        """Test deleting an existing key."""
        store = Store()
        store.set("key", "value")
        assert store.delete("key") is True
        assert store.get("key") is None

    def test_delete_nonexistent_key(self):
        """Test deleting a missing key reports it was absent."""
        store = Store()
        assert store.delete("nonexistent") is False

    def test_from_dict(self):
        store = Store.from_dict({"a": "1", "b": "2"})
        assert sorted(store) == ["a", "b"]
        assert dict(store.items()) == {"a": "1", "b": "2"}


class TestStoreCopy:
    """Test that copies share no state with their source."""

    def test_copy_has_same_contents(self):
        store = Store.from_dict({"a": "1", "b": "2"})
        clone = store.copy()
        assert clone == store
        assert clone is not store

    def test_mutating_copy_leaves_source_untouched(self):
        """Test writes and deletes on the copy are invisible in the source."""
        store = Store.from_dict({"a": "1", "b": "2"})
        clone = store.copy()

        clone.set("a", "changed")
        clone.set("c", "3")
        clone.delete("b")

        assert store.to_dict() == {"a": "1", "b": "2"}

    def test_mutating_source_leaves_copy_untouched(self):
        store = Store.from_dict({"a": "1"})
        clone = store.copy()

        store.set("a", "changed")
        store.delete("a")

        assert clone.get("a") == "1"

    def test_to_dict_is_a_copy(self):
        store = Store.from_dict({"a": "1"})
        data = store.to_dict()
        data["a"] = "changed"
        assert store.get("a") == "1"

    def test_equality_with_other_types(self):
        assert Store() != {}


if __name__ == "__main__":
    pytest.main([__file__])
