"""Tests for the registry."""

from threading import Thread

import pytest

from valchain.exceptions import NotFoundError, OperationError
from valchain.registry import Registry


class TestRegistry:
    """Test basic Registry functionality."""

    def test_create_registry(self):
        """Test creating a registry."""
        registry = Registry[str]("test_registry")
        assert registry.name == "test_registry"
        assert registry.list_items() == []

    def test_register_item(self):
        """Test registering an item."""
        registry = Registry[str]("test")
        registry.register("key1", "value1")

        assert registry.has("key1")
        assert registry.get("key1") == "value1"

    def test_register_duplicate_raises_error(self):
        """Test that registering duplicate key raises error."""
        registry = Registry[str]("test")
        registry.register("key1", "value1")

        with pytest.raises(OperationError) as exc_info:
            registry.register("key1", "value2")

        assert "already registered" in str(exc_info.value)

    def test_register_duplicate_with_overwrite(self):
        """Test overwriting an existing key."""
        registry = Registry[str]("test")
        registry.register("key1", "value1")
        registry.register("key1", "value2", allow_overwrite=True)

        assert registry.get("key1") == "value2"

    def test_get_missing_raises_not_found(self):
        """Test that a missing key raises NotFoundError listing the available keys."""
        registry = Registry[str]("test")
        registry.register("present", "value")

        assert not registry.has("absent")
        with pytest.raises(NotFoundError) as exc_info:
            registry.get("absent")

        assert exc_info.value.context["available_keys"] == ["present"]

    def test_list_items_preserves_order(self):
        """Test items keep registration order."""
        registry = Registry[int]("test")
        for index, key in enumerate(["c", "a", "b"]):
            registry.register(key, index)

        assert registry.list_items() == [0, 1, 2]

    def test_repr(self):
        """Test the repr names the registry and its size."""
        registry = Registry[int]("limits")
        registry.register("max_items", 100)
        assert repr(registry) == "Registry('limits', 1 items)"

    def test_concurrent_registration(self):
        """Test registering from several threads."""
        registry = Registry[int]("test")

        def register_range(start):
            for i in range(start, start + 100):
                registry.register(f"key{i}", i)

        threads = [Thread(target=register_range, args=(n * 100,)) for n in range(5)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(registry.list_items()) == 500
