"""Products and the per-user browsing history kept as a FIFO queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class Product:
    """A catalogue product."""

    product_id: int
    quality: int  # scale of 1 to 5
    price: int
    brand: str
    category: str


class History:
    """Products a user has looked at, oldest first."""

    def __init__(self) -> None:
        self._items: deque[Product] = deque()

    def enqueue(self, product: Product) -> None:
        """Add a product at the back of the history."""
        self._items.append(product)

    def dequeue(self) -> Product | None:
        """Remove and return the oldest product; return None when empty."""
        if self.is_empty():
            return None
        return self._items.popleft()

    def is_empty(self) -> bool:
        """Tell whether the history holds no products."""
        return not self._items

    def front(self) -> Product | None:
        """Return the oldest product without removing it, or None when empty."""
        return self._items[0] if self._items else None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"History({list(self._items)!r})"