from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


def _normalize_key(key: str) -> str:
    return str(key).strip().lower()


class Registry(Generic[T]):
    """Name -> implementation table, filled at import time by decorators.

    Keys are matched case-insensitively so configuration files may spell
    ``value_format = "Double"``.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._items: dict[str, T] = {}

    @property
    def name(self) -> str:
        return self._name

    def register(self, key: str | None = None) -> Callable[[T], T]:
        def decorator(item: T) -> T:
            item_key = key or getattr(item, "__name__", None)
            if not item_key:
                raise ValueError(f"{self._name}: registry key is required")
            self.add(item_key, item)
            return item

        return decorator

    def add(self, key: str, item: T) -> None:
        normalized = _normalize_key(key)
        if normalized in self._items:
            raise ValueError(f"{self._name}: '{normalized}' is already registered")
        self._items[normalized] = item

    def get(self, key: str) -> T:
        item = self._items.get(_normalize_key(key))
        if item is None:
            available = ", ".join(self.list()) or "(empty)"
            raise KeyError(f"{self._name}: '{key}' is not registered. available={available}")
        return item

    def list(self) -> list[str]:
        return sorted(self._items)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and _normalize_key(key) in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self.list())

    def __len__(self) -> int:
        return len(self._items)
