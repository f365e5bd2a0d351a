"""Thread-safe registry of named items.

valchain keeps two kinds of tables in registries: the predicate table of each
wrapper class (predicate name to ``PredicateSpec``) and the variant table
(variant name to wrapper class). Both are filled while classes are being
defined and are only read afterwards, but registration is still guarded by a
lock so that extensions registering wrapper classes from another thread see
a consistent table.

Example:
    ```python
    from valchain.registry import Registry

    registry = Registry[int]("limits")
    registry.register("max_items", 100)
    registry.get("max_items")
    # 100
    registry.get("missing")
    # raises NotFoundError
    ```
"""

import threading
from typing import Dict, Generic, List, TypeVar

from valchain.exceptions import NotFoundError, OperationError

T = TypeVar("T")


class Registry(Generic[T]):
    """Registry for managing named items.

    Attributes:
        name: Name of the registry (for error messages)

    Args:
        name: Name for this registry instance
    """

    def __init__(self, name: str):
        self._name = name
        self._items: Dict[str, T] = {}
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        """Get registry name."""
        return self._name

    def register(self, key: str, item: T, allow_overwrite: bool = False) -> None:
        """Register an item by key.

        Args:
            key: Unique identifier for the item
            item: Item to register
            allow_overwrite: Whether to allow overwriting existing items

        Raises:
            OperationError: If item already exists and allow_overwrite is False
        """
        with self._lock:
            if not allow_overwrite and key in self._items:
                raise OperationError(
                    f"Item '{key}' already registered in {self._name}",
                    context={"key": key, "registry": self._name},
                )
            self._items[key] = item

    def get(self, key: str) -> T:
        """Get an item by key.

        Raises:
            NotFoundError: If item not found
        """
        with self._lock:
            if key not in self._items:
                raise NotFoundError(
                    f"Item not found: {key}",
                    context={
                        "key": key,
                        "registry": self._name,
                        "available_keys": list(self._items.keys()),
                    },
                )
            return self._items[key]

    def has(self, key: str) -> bool:
        """Check if item exists."""
        with self._lock:
            return key in self._items

    def list_items(self) -> List[T]:
        """List all registered items in registration order."""
        with self._lock:
            return list(self._items.values())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r}, {len(self._items)} items)"


__all__ = ["Registry"]
