"""
Store class: the key-value mapping owned by one transaction depth.
"""

from typing import Dict, Iterator, Mapping, Optional, Tuple


class Store:
    """
    A mutable mapping from string keys to string values.

    Each transaction depth owns its own Store. A nested transaction works on
    a copy() of its parent's Store, so nothing it does is visible upstream
    until the copy replaces the parent on commit.

    Example usage:
        store = Store()
        store.set("a", "50")
        child = store.copy()
        child.set("a", "60")
        store.get("a")   # "50"
    """

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    @classmethod
    def from_dict(cls, data: Mapping[str, str]) -> "Store":
        """Create a store seeded with the given key-value pairs."""
        store = cls()
        store._data.update(data)
        return store

    def get(self, key: str) -> Optional[str]:
        """
        Look up a key.

        Args:
            key: The key to retrieve

        Returns:
            The value associated with the key, or None if it is absent
        """
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        """Insert or overwrite a key."""
        self._data[key] = value

    def delete(self, key: str) -> bool:
        """
        Remove a key if present.

        Returns:
            True if the key was present, False otherwise
        """
        if key not in self._data:
            return False
        del self._data[key]
        return True

    def copy(self) -> "Store":
        """
        Return an independent copy of this store.

        Values are immutable strings, so copying the dict is enough for the
        copy and the source never to observe each other's mutations.
        """
        clone = Store()
        clone._data = self._data.copy()
        return clone

    def items(self) -> Iterator[Tuple[str, str]]:
        return iter(self._data.items())

    def to_dict(self) -> Dict[str, str]:
        """Get a copy of the data (for testing purposes)."""
        return self._data.copy()

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Store):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Store({self._data!r})"
