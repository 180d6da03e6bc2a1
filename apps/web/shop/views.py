"""
Shop API views - catalog reads and the session cart.

Catalog endpoints are public and cacheable. Cart endpoints act on a cart
stored in the caller's session.
"""

import json
import logging
from collections.abc import Callable
from typing import TypeVar

from django.db.models import Count
from django.http import Http404, HttpRequest, JsonResponse
from django.views.decorators.cache import cache_control
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from apps.web.core.decorators import api_endpoint, json_response
from framing_schemas import SHIPPING

from .cart import CartStore, SessionCartStorage
from .models import Collection, Product
from .serializers import (
    AddCartItemRequest,
    CartResponse,
    CollectionDetailResponse,
    CollectionListResponse,
    CollectionSchema,
    ProductListResponse,
    ProductSchema,
    UpdateQuantityRequest,
)

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT", bound=BaseModel)


def _serialize_product(product: Product) -> ProductSchema:
    return ProductSchema(
        id=product.pk,
        slug=product.slug,
        name=product.name,
        description=product.description,
        price=product.price,
        images=product.images,
        sizes=product.sizes,
        materials=product.materials,
        in_stock=product.in_stock,
        featured=product.featured,
        collection_slug=product.collection.slug if product.collection else None,
    )


def _serialize_collection(collection: Collection) -> CollectionSchema:
    return CollectionSchema(
        id=collection.pk,
        slug=collection.slug,
        name=collection.name,
        description=collection.description,
        image_url=collection.image_url,
        featured=collection.featured,
        product_count=getattr(collection, "product_count", 0),
    )


# =============================================================================
# Catalog
# =============================================================================


@api_endpoint
@require_GET
@cache_control(max_age=300, public=True)
def collection_list(request: HttpRequest) -> JsonResponse:
    """
    GET /api/shop/collections/?featured=1

    Collections in display order, with product counts.
    """
    collections = Collection.objects.annotate(product_count=Count("products"))
    if request.GET.get("featured"):
        collections = collections.filter(featured=True)

    response = CollectionListResponse(
        collections=[_serialize_collection(c) for c in collections]
    )
    return json_response(response.to_response())


@api_endpoint
@require_GET
@cache_control(max_age=300, public=True)
def collection_detail(_request: HttpRequest, slug: str) -> JsonResponse:
    """
    GET /api/shop/collections/{slug}/

    One collection and its products.
    """
    try:
        collection = Collection.objects.annotate(
            product_count=Count("products")
        ).get(slug=slug)
    except Collection.DoesNotExist as exc:
        raise Http404(f"Collection '{slug}' not found") from exc

    products = collection.products.select_related("collection")
    response = CollectionDetailResponse(
        collection=_serialize_collection(collection),
        products=[_serialize_product(p) for p in products],
    )
    return json_response(response.to_response())


@api_endpoint
@require_GET
@cache_control(max_age=300, public=True)
def product_list(request: HttpRequest) -> JsonResponse:
    """
    GET /api/shop/products/?featured=1&collection=modern
    """
    products = Product.objects.select_related("collection")
    if request.GET.get("featured"):
        products = products.filter(featured=True)
    collection = request.GET.get("collection")
    if collection:
        products = products.filter(collection__slug=collection)

    response = ProductListResponse(products=[_serialize_product(p) for p in products])
    return json_response(response.to_response())


@api_endpoint
@require_GET
@cache_control(max_age=300, public=True)
def product_detail(_request: HttpRequest, slug: str) -> JsonResponse:
    """
    GET /api/shop/products/{slug}/
    """
    try:
        product = Product.objects.select_related("collection").get(slug=slug)
    except Product.DoesNotExist as exc:
        raise Http404(f"Product '{slug}' not found") from exc

    return json_response(_serialize_product(product).to_response())


# =============================================================================
# Cart
# =============================================================================


def _cart_for(request: HttpRequest) -> CartStore:
    return CartStore(SessionCartStorage(request.session))


def _cart_response(cart: CartStore, status: int = 200) -> JsonResponse:
    response = CartResponse(
        items=cart.items,
        is_open=cart.is_open,
        item_count=cart.item_count(),
        subtotal=cart.subtotal(),
        shipping=cart.shipping(),
        total=cart.total(),
        free_shipping_threshold=SHIPPING.free_threshold,
    )
    return json_response(response.to_response(), status=status)


def _validation_error(e: PydanticValidationError) -> JsonResponse:
    return json_response(
        {
            "error": "validation_error",
            "details": [
                {
                    "field": ".".join(str(loc) for loc in err["loc"]),
                    "message": err["msg"],
                }
                for err in e.errors()
            ],
        },
        status=400,
    )


def _parse_body(
    request: HttpRequest, schema: type[RequestT]
) -> RequestT | JsonResponse:
    try:
        body = json.loads(request.body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError):
        return json_response({"error": "Invalid JSON in request body"}, status=400)
    try:
        return schema.model_validate(body)
    except PydanticValidationError as e:
        return _validation_error(e)


@csrf_exempt
@api_endpoint
@require_http_methods(["GET", "DELETE"])
def cart(request: HttpRequest) -> JsonResponse:
    """
    GET    /api/cart/ - current cart with totals
    DELETE /api/cart/ - empty the cart
    """
    store = _cart_for(request)
    if request.method == "DELETE":
        store.clear()
    return _cart_response(store)


@csrf_exempt
@api_endpoint
@require_http_methods(["POST"])
def cart_items(request: HttpRequest) -> JsonResponse:
    """
    POST /api/cart/items/

    Request body: AddCartItemRequest (productId is the product slug)
    Response: CartResponse (201), error (400/404)
    """
    payload = _parse_body(request, AddCartItemRequest)
    if isinstance(payload, JsonResponse):
        return payload

    try:
        product = Product.objects.get(slug=payload.product_id)
    except Product.DoesNotExist:
        return json_response({"error": "Product not found"}, status=404)

    if not product.in_stock:
        return json_response({"error": f"'{product.name}' is out of stock"}, status=400)
    if product.sizes and not product.offers_size(payload.size):
        return json_response(
            {"error": f"'{product.name}' is not available in {payload.size}"},
            status=400,
        )

    store = _cart_for(request)
    store.add_item(
        product_id=product.slug,
        name=product.name,
        size=payload.size,
        price=product.price,
        quantity=payload.quantity,
        image=product.primary_image,
    )
    logger.info(
        "Added %s (%s) x%d to cart", product.slug, payload.size, payload.quantity
    )
    return _cart_response(store, status=201)


@csrf_exempt
@api_endpoint
@require_http_methods(["PATCH", "DELETE"])
def cart_item(request: HttpRequest, item_id: str) -> JsonResponse:
    """
    PATCH  /api/cart/items/{id}/ - set quantity (0 removes)
    DELETE /api/cart/items/{id}/ - remove the line
    """
    store = _cart_for(request)
    if store.get(item_id) is None:
        return json_response({"error": "Cart item not found"}, status=404)

    if request.method == "DELETE":
        store.remove_item(item_id)
        return _cart_response(store)

    payload = _parse_body(request, UpdateQuantityRequest)
    if isinstance(payload, JsonResponse):
        return payload

    store.update_quantity(item_id, payload.quantity)
    return _cart_response(store)


@csrf_exempt
@api_endpoint
@require_http_methods(["POST"])
def cart_panel(request: HttpRequest, action: str) -> JsonResponse:
    """
    POST /api/cart/open/ | /api/cart/close/ | /api/cart/toggle/
    """
    store = _cart_for(request)
    actions: dict[str, Callable[[], None]] = {
        "open": store.open,
        "close": store.close,
        "toggle": store.toggle,
    }
    actions[action]()
    return _cart_response(store)
