"""
Tests for the cart store.
"""

import pytest
from pydantic import ValidationError

from apps.web.shop.cart import (
    MAX_LINE_QUANTITY,
    SESSION_KEY,
    CartStore,
    MemoryCartStorage,
    SessionCartStorage,
)


class FakeSession(dict):
    modified = False


class FakeClock:
    def __init__(self, start: int = 1_700_000_000_000) -> None:
        self.now = start

    def __call__(self) -> int:
        self.now += 1
        return self.now


@pytest.fixture
def storage() -> MemoryCartStorage:
    return MemoryCartStorage()


@pytest.fixture
def cart(storage: MemoryCartStorage) -> CartStore:
    return CartStore(storage, clock=FakeClock())


class TestAddItem:
    def test_new_line(self, cart: CartStore) -> None:
        line = cart.add_item("modern-black", "Modern Black Frame", "8×10", 2499)

        assert line.id == "modern-black-8×10-1700000000001"
        assert line.quantity == 1
        assert cart.items == [line]

    def test_same_product_and_size_merges(self, cart: CartStore) -> None:
        cart.add_item("modern-black", "Modern Black Frame", "8×10", 2499, quantity=2)
        cart.add_item("modern-black", "Modern Black Frame", "8×10", 2499, quantity=3)

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 5

    def test_merge_stops_at_line_ceiling(self, cart: CartStore) -> None:
        cart.add_item("modern-black", "Modern Black Frame", "8×10", 2499, quantity=60)
        cart.add_item("modern-black", "Modern Black Frame", "8×10", 2499, quantity=60)

        assert cart.items[0].quantity == MAX_LINE_QUANTITY

    def test_different_size_is_a_new_line(self, cart: CartStore) -> None:
        cart.add_item("modern-black", "Modern Black Frame", "8×10", 2499)
        cart.add_item("modern-black", "Modern Black Frame", "11×14", 2499)

        assert [item.size for item in cart.items] == ["8×10", "11×14"]

    def test_opens_the_cart(self, cart: CartStore) -> None:
        cart.close()

        cart.add_item("floating", "Floating Frame", "12×12", 3799)

        assert cart.is_open is True

    def test_rejects_zero_quantity(self, cart: CartStore) -> None:
        with pytest.raises(ValidationError):
            cart.add_item("floating", "Floating Frame", "12×12", 3799, quantity=0)

    def test_rejects_negative_price(self, cart: CartStore) -> None:
        with pytest.raises(ValidationError):
            cart.add_item("floating", "Floating Frame", "12×12", -1)


class TestUpdateAndRemove:
    def test_update_quantity(self, cart: CartStore) -> None:
        line = cart.add_item("floating", "Floating Frame", "12×12", 3799)

        cart.update_quantity(line.id, 4)

        assert cart.items[0].quantity == 4

    def test_zero_quantity_removes(self, cart: CartStore) -> None:
        line = cart.add_item("floating", "Floating Frame", "12×12", 3799)

        cart.update_quantity(line.id, 0)

        assert cart.items == []

    def test_remove_unknown_id_is_a_no_op(self, cart: CartStore) -> None:
        cart.add_item("floating", "Floating Frame", "12×12", 3799)

        cart.remove_item("missing")

        assert len(cart.items) == 1

    def test_clear(self, cart: CartStore) -> None:
        cart.add_item("floating", "Floating Frame", "12×12", 3799)
        cart.add_item("shadow-box", "Shadow Box", "8×8", 4299)

        cart.clear()

        assert cart.items == []
        assert cart.item_count() == 0


class TestTotals:
    def test_item_count_and_subtotal(self, cart: CartStore) -> None:
        cart.add_item("modern-black", "Modern Black Frame", "8×10", 2499, quantity=2)
        cart.add_item("gold-ornate", "Gold Ornate Frame", "5×7", 3999)

        assert cart.item_count() == 3
        assert cart.subtotal() == 2 * 2499 + 3999

    def test_empty_cart(self, cart: CartStore) -> None:
        assert cart.subtotal() == 0
        assert cart.shipping() == 0
        assert cart.total() == 0

    def test_flat_rate_under_threshold(self, cart: CartStore) -> None:
        cart.add_item("modern-black", "Modern Black Frame", "8×10", 2499)

        assert cart.shipping() == 999
        assert cart.total() == 2499 + 999

    def test_free_shipping_at_threshold(self, cart: CartStore) -> None:
        cart.add_item("gallery-set", "Gallery Wall Set", "Set of 5", 15000)

        assert cart.shipping() == 0


class TestPanel:
    def test_open_close_toggle(self, cart: CartStore) -> None:
        cart.open()
        assert cart.is_open is True
        cart.close()
        assert cart.is_open is False
        cart.toggle()
        assert cart.is_open is True


class TestPersistence:
    def test_every_mutation_is_saved(self, storage: MemoryCartStorage) -> None:
        cart = CartStore(storage)
        line = cart.add_item("floating", "Floating Frame", "12×12", 3799)

        assert storage.state["items"][0]["productId"] == "floating"
        assert storage.state["isOpen"] is True

        cart.update_quantity(line.id, 2)
        assert storage.state["items"][0]["quantity"] == 2

    def test_restores_from_storage(self, storage: MemoryCartStorage) -> None:
        CartStore(storage).add_item("floating", "Floating Frame", "12×12", 3799)

        restored = CartStore(storage)

        assert restored.items[0].name == "Floating Frame"
        assert restored.is_open is True

    def test_unreadable_state_is_discarded(self) -> None:
        storage = MemoryCartStorage({"items": [{"id": "x", "quantity": -3}]})

        cart = CartStore(storage)

        assert cart.items == []

    def test_session_storage(self) -> None:
        session = FakeSession()
        cart = CartStore(SessionCartStorage(session))
        cart.add_item("floating", "Floating Frame", "12×12", 3799)

        assert session[SESSION_KEY]["items"][0]["size"] == "12×12"
        assert session.modified is True

    def test_shared_empty_dict_sees_saved_state(self) -> None:
        state: dict = {}
        cart = CartStore(MemoryCartStorage(state))

        cart.add_item("floating", "Floating Frame", "12×12", 3799)

        assert state["items"][0]["productId"] == "floating"
        assert state["isOpen"] is True
