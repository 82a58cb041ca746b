from __future__ import annotations

import logging
from typing import Generic, Iterator, List, Protocol, TypeVar

logger = logging.getLogger(__name__)


class Displayable(Protocol):
    def display(self) -> str: ...


T = TypeVar("T", bound=Displayable)


class InventoryIndexError(IndexError):
    pass


class InventoryList(Generic[T]):
    """
    Ordered list of displayable elements, addressed by position.

    ``get`` and ``set`` with a bad index raise, ``remove`` with a bad index does nothing.
    Negative indices are always out of range.
    """

    def __init__(self) -> None:
        self._items: List[T] = []

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._items)

    def add(self, item: T) -> None:
        self._items.append(item)

    def remove(self, index: int) -> None:
        if not self._in_range(index):
            logger.debug(f"remove ignored: index={index} size={len(self._items)}")
            return
        del self._items[index]

    def get(self, index: int) -> T:
        if not self._in_range(index):
            raise InventoryIndexError("Invalid index")
        return self._items[index]

    def set(self, index: int, item: T) -> None:
        if not self._in_range(index):
            raise InventoryIndexError("Invalid index")
        self._items[index] = item

    def size(self) -> int:
        return len(self._items)

    def display_all(self) -> str:
        return "\n".join(item.display() for item in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)
