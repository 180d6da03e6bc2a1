"""
Shopping cart store.

The cart is a list of CartItem lines plus an "open" flag for the cart panel.
A CartStore is created per owner (a request's session, a test) with the
storage it should persist to; every mutation is written straight back.

Usage:
    cart = CartStore(SessionCartStorage(request.session))
    cart.add_item("modern-black-8x10", "Modern Black Frame", "8×10", 2499)
    cart.subtotal()
"""

import logging
import time
from collections.abc import Callable
from typing import Any, Protocol

from pydantic import ValidationError

from framing_schemas import SHIPPING, CartItem

logger = logging.getLogger(__name__)

SESSION_KEY = "model-home-art-cart"

# Per-line ceiling, matching what the cart API accepts in one request
MAX_LINE_QUANTITY = 99


class CartStorage(Protocol):
    """Where a cart's state lives between requests."""

    def load(self) -> dict[str, Any]: ...

    def save(self, state: dict[str, Any]) -> None: ...


class MemoryCartStorage:
    """Keeps cart state in a plain dict (tests, scripts)."""

    def __init__(self, state: dict[str, Any] | None = None) -> None:
        self.state: dict[str, Any] = state if state is not None else {}

    def load(self) -> dict[str, Any]:
        return self.state

    def save(self, state: dict[str, Any]) -> None:
        self.state.clear()
        self.state.update(state)


class SessionCartStorage:
    """Keeps cart state in the Django session, so it survives page reloads."""

    def __init__(self, session: Any, key: str = SESSION_KEY) -> None:
        self.session = session
        self.key = key

    def load(self) -> dict[str, Any]:
        return self.session.get(self.key) or {}

    def save(self, state: dict[str, Any]) -> None:
        self.session[self.key] = state
        self.session.modified = True


def _now_ms() -> int:
    return int(time.time() * 1000)


class CartStore:
    """Cart operations over a CartStorage backend."""

    def __init__(
        self, storage: CartStorage, clock: Callable[[], int] = _now_ms
    ) -> None:
        self.storage = storage
        self._clock = clock
        self.items: list[CartItem] = []
        self.is_open = False
        self._restore(storage.load())

    def _restore(self, state: dict[str, Any]) -> None:
        try:
            self.items = [CartItem.model_validate(i) for i in state.get("items", [])]
        except ValidationError as e:
            logger.warning("Discarding unreadable cart state: %s", e)
            self.items = []
        self.is_open = bool(state.get("isOpen", False))

    def _persist(self) -> None:
        self.storage.save(self.to_state())

    def to_state(self) -> dict[str, Any]:
        return {
            "items": [item.model_dump(by_alias=True) for item in self.items],
            "isOpen": self.is_open,
        }

    def get(self, item_id: str) -> CartItem | None:
        return next((item for item in self.items if item.id == item_id), None)

    def add_item(
        self,
        product_id: str,
        name: str,
        size: str,
        price: int,
        quantity: int = 1,
        image: str | None = None,
    ) -> CartItem:
        """
        Add a product/size to the cart and open the cart panel.

        Adding a product/size that is already in the cart increases that
        line's quantity instead of creating a second line. A line never holds
        more than MAX_LINE_QUANTITY.

        Raises:
            pydantic.ValidationError: Negative price or quantity below 1
        """
        existing = next(
            (
                item
                for item in self.items
                if item.product_id == product_id and item.size == size
            ),
            None,
        )
        if existing is not None:
            if quantity < 1:
                raise ValueError("Quantity must be at least 1")
            existing.quantity = min(existing.quantity + quantity, MAX_LINE_QUANTITY)
            line = existing
        else:
            line = CartItem(
                id=f"{product_id}-{size}-{self._clock()}",
                product_id=product_id,
                name=name,
                size=size,
                price=price,
                quantity=quantity,
                image=image,
            )
            self.items.append(line)

        self.is_open = True
        self._persist()
        return line

    def remove_item(self, item_id: str) -> None:
        """Remove a line. Unknown ids are ignored."""
        self.items = [item for item in self.items if item.id != item_id]
        self._persist()

    def update_quantity(self, item_id: str, quantity: int) -> None:
        """Set a line's quantity; zero or less removes the line."""
        if quantity <= 0:
            self.remove_item(item_id)
            return
        for item in self.items:
            if item.id == item_id:
                item.quantity = min(quantity, MAX_LINE_QUANTITY)
        self._persist()

    def clear(self) -> None:
        self.items = []
        self._persist()

    def open(self) -> None:
        self.is_open = True
        self._persist()

    def close(self) -> None:
        self.is_open = False
        self._persist()

    def toggle(self) -> None:
        self.is_open = not self.is_open
        self._persist()

    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    def subtotal(self) -> int:
        """Sum of price x quantity, in cents."""
        return sum(item.line_total for item in self.items)

    def shipping(self) -> int:
        return SHIPPING.cost_for(self.subtotal())

    def total(self) -> int:
        return self.subtotal() + self.shipping()
