"""
Tests for shop API views (catalog and session cart).
"""

import json

from django.test import Client as DjangoTestClient
from django.urls import reverse

import pytest

from .factories import CollectionFactory, ProductFactory


@pytest.fixture
def http_client() -> DjangoTestClient:
    return DjangoTestClient()


@pytest.mark.django_db
class TestCatalog:
    """Tests for the read-only catalog endpoints."""

    def test_collection_list(self, http_client: DjangoTestClient) -> None:
        modern = CollectionFactory(slug="modern", display_order=1, featured=True)
        CollectionFactory(slug="floating", display_order=2)
        ProductFactory.create_batch(2, collection=modern)

        response = http_client.get(reverse("shop:collection_list"))

        assert response.status_code == 200
        collections = response.json()["collections"]
        assert [c["slug"] for c in collections] == ["modern", "floating"]
        assert collections[0]["productCount"] == 2

    def test_featured_collections(self, http_client: DjangoTestClient) -> None:
        CollectionFactory(slug="modern", featured=True)
        CollectionFactory(slug="floating", featured=False)

        response = http_client.get(
            reverse("shop:collection_list"), {"featured": "1"}
        )

        assert [c["slug"] for c in response.json()["collections"]] == ["modern"]

    def test_collection_detail(self, http_client: DjangoTestClient) -> None:
        collection = CollectionFactory(slug="classic")
        ProductFactory(collection=collection, slug="walnut", name="Walnut")

        response = http_client.get(
            reverse("shop:collection_detail", args=["classic"])
        )

        body = response.json()
        assert body["collection"]["slug"] == "classic"
        assert body["products"][0]["slug"] == "walnut"
        assert body["products"][0]["collectionSlug"] == "classic"

    def test_unknown_collection(self, http_client: DjangoTestClient) -> None:
        response = http_client.get(reverse("shop:collection_detail", args=["nope"]))

        assert response.status_code == 404

    def test_product_detail(self, http_client: DjangoTestClient) -> None:
        ProductFactory(slug="shadow-box", price=4299, sizes=["8×8"])

        response = http_client.get(reverse("shop:product_detail", args=["shadow-box"]))

        body = response.json()
        assert body["price"] == 4299
        assert body["sizes"] == ["8×8"]
        assert body["inStock"] is True

    def test_featured_products(self, http_client: DjangoTestClient) -> None:
        ProductFactory(slug="a", featured=True)
        ProductFactory(slug="b", featured=False)

        response = http_client.get(reverse("shop:product_list"), {"featured": "1"})

        assert [p["slug"] for p in response.json()["products"]] == ["a"]


@pytest.mark.django_db
class TestCart:
    """Tests for the session-backed cart endpoints."""

    def _add(self, http_client: DjangoTestClient, **body) -> dict:
        response = http_client.post(
            reverse("shop:cart_items"),
            data=json.dumps(body),
            content_type="application/json",
        )
        return {"status": response.status_code, **response.json()}

    def test_empty_cart(self, http_client: DjangoTestClient) -> None:
        body = http_client.get(reverse("shop:cart")).json()

        assert body["items"] == []
        assert body["itemCount"] == 0
        assert body["shipping"] == 0
        assert body["freeShippingThreshold"] == 15000

    def test_add_uses_catalog_price(self, http_client: DjangoTestClient) -> None:
        ProductFactory(slug="walnut", price=3499, sizes=["8×10"])

        body = self._add(
            http_client, productId="walnut", size="8×10", quantity=2, price=1
        )

        assert body["status"] == 201
        assert body["items"][0]["price"] == 3499
        assert body["subtotal"] == 6998
        assert body["shipping"] == 999
        assert body["total"] == 6998 + 999
        assert body["isOpen"] is True

    def test_cart_survives_between_requests(
        self, http_client: DjangoTestClient
    ) -> None:
        ProductFactory(slug="walnut", sizes=["8×10"])
        self._add(http_client, productId="walnut", size="8×10")
        self._add(http_client, productId="walnut", size="8×10")

        body = http_client.get(reverse("shop:cart")).json()

        assert len(body["items"]) == 1
        assert body["itemCount"] == 2

    def test_unknown_product(self, http_client: DjangoTestClient) -> None:
        body = self._add(http_client, productId="ghost", size="8×10")

        assert body["status"] == 404

    def test_size_not_offered(self, http_client: DjangoTestClient) -> None:
        ProductFactory(slug="walnut", sizes=["8×10"])

        body = self._add(http_client, productId="walnut", size="40×60")

        assert body["status"] == 400

    def test_out_of_stock(self, http_client: DjangoTestClient) -> None:
        ProductFactory(slug="walnut", in_stock=False)

        body = self._add(http_client, productId="walnut", size="8×10")

        assert body["status"] == 400

    def test_invalid_quantity(self, http_client: DjangoTestClient) -> None:
        ProductFactory(slug="walnut")

        body = self._add(http_client, productId="walnut", size="8×10", quantity=0)

        assert body["status"] == 400
        assert body["error"] == "validation_error"

    @pytest.mark.parametrize("raw", [b"{not json", b"\xff\xfe{"])
    def test_malformed_body(self, http_client: DjangoTestClient, raw: bytes) -> None:
        """Unparsable or undecodable bodies are a 400, never a server error."""
        response = http_client.post(
            reverse("shop:cart_items"), data=raw, content_type="application/json"
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid JSON in request body"

    def test_malformed_patch_body(self, http_client: DjangoTestClient) -> None:
        ProductFactory(slug="walnut", sizes=["8×10"])
        item_id = self._add(http_client, productId="walnut", size="8×10")["items"][0][
            "id"
        ]

        response = http_client.patch(
            reverse("shop:cart_item", args=[item_id]),
            data=b"\xff\xfe{",
            content_type="application/json",
        )

        assert response.status_code == 400

    def test_update_and_remove_line(self, http_client: DjangoTestClient) -> None:
        ProductFactory(slug="walnut", sizes=["8×10"])
        item_id = self._add(http_client, productId="walnut", size="8×10")["items"][0][
            "id"
        ]
        url = reverse("shop:cart_item", args=[item_id])

        updated = http_client.patch(
            url, data=json.dumps({"quantity": 3}), content_type="application/json"
        ).json()
        assert updated["itemCount"] == 3

        removed = http_client.delete(url).json()
        assert removed["items"] == []

    def test_patch_zero_removes(self, http_client: DjangoTestClient) -> None:
        ProductFactory(slug="walnut", sizes=["8×10"])
        item_id = self._add(http_client, productId="walnut", size="8×10")["items"][0][
            "id"
        ]

        body = http_client.patch(
            reverse("shop:cart_item", args=[item_id]),
            data=json.dumps({"quantity": 0}),
            content_type="application/json",
        ).json()

        assert body["items"] == []

    def test_unknown_line(self, http_client: DjangoTestClient) -> None:
        response = http_client.delete(reverse("shop:cart_item", args=["nope"]))

        assert response.status_code == 404

    def test_clear(self, http_client: DjangoTestClient) -> None:
        ProductFactory(slug="walnut", sizes=["8×10"])
        self._add(http_client, productId="walnut", size="8×10")

        body = http_client.delete(reverse("shop:cart")).json()

        assert body["items"] == []

    def test_panel_actions(self, http_client: DjangoTestClient) -> None:
        closed = http_client.post(reverse("shop:cart_panel", args=["close"])).json()
        toggled = http_client.post(reverse("shop:cart_panel", args=["toggle"])).json()

        assert closed["isOpen"] is False
        assert toggled["isOpen"] is True
