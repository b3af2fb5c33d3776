"""
Reports Service Module

Read-only views computed over clients, orders, order details and products:
name search, price filters and statistics, the client with the most orders,
date filters, order contents and the cross-table "who bought what" reports.

Every report that legitimately matches nothing raises EmptyResultError (404),
the same status as a missing entity. Reports keyed by an id check the id first
so a missing entity and an empty result can be told apart by their message.
Grouping, sums and averages are left to the store.
"""

import datetime
import logging
from typing import List, Optional

from tortoise.expressions import Q
from tortoise.functions import Avg, Count, Sum

from ...common.exceptions import EmptyResultError, NotFoundError, ValidationError
from ..clients.models import Client
from ..clients.schemas import ClientResponse
from ..clients.service import clients
from ..orders.models import Order, OrderDetail
from ..orders.schemas import OrderResponse, as_naive_utc
from ..orders.service import orders
from ..products.models import Product
from ..products.schemas import ProductResponse
from ..products.service import products

from .schemas import (
    AveragePriceResponse, ClientOrdersCount, ClientProductQuantity,
    OrderClientSummary, OrderLineItem, OrderTotalQuantityResponse,
    OrderWithItems, ProductBuyerQuantity
)

logger = logging.getLogger(__name__)

DEFAULT_MIN_PRICE = 20.0


# --- Clients ---

async def search_clients_by_name(prefix: Optional[str]) -> List[ClientResponse]:
    """
    Finds clients whose name starts with `prefix`, ignoring case.

    Raises:
        ValidationError: `prefix` is missing, empty or only whitespace.
        EmptyResultError: no client name matches.
    """
    if prefix is None or not prefix.strip():
        raise ValidationError("A name to filter by is required.")

    matches = await Client.filter(name__istartswith=prefix).order_by("id")
    logger.debug(f"Name prefix '{prefix}' matched {len(matches)} clients")
    if not matches:
        raise EmptyResultError(f"No clients found with a name starting with '{prefix}'.")
    return [ClientResponse.model_validate(c) for c in matches]


async def client_with_most_orders() -> ClientOrdersCount:
    """
    Returns the client with the highest number of orders, lowest id on ties.

    A leading client with zero orders means no orders exist at all, which is
    reported as an empty result rather than as a client with count 0.
    """
    top = (
        await Client.annotate(orders_count=Count("orders"))
        .order_by("-orders_count", "id")
        .first()
    )
    if top is None:
        raise EmptyResultError("No clients registered.")
    if top.orders_count == 0:
        raise EmptyResultError("No orders registered.")

    logger.debug(f"Client {top.id} leads with {top.orders_count} orders")
    return ClientOrdersCount(id=top.id, name=top.name, email=top.email, orders_count=top.orders_count)


def _products_bought_by(client_id: int):
    return OrderDetail.filter(order__client_id=client_id)


async def _ensure_client_exists(client_id: int) -> None:
    if not await clients.exists(client_id):
        raise NotFoundError(f"Client {client_id} not found.")


async def products_sold_to_client(client_id: int) -> List[str]:
    """Distinct names of every product the client bought, alphabetically."""
    await _ensure_client_exists(client_id)
    names = await (
        _products_bought_by(client_id)
        .group_by("product__name")
        .order_by("product__name")
        .values_list("product__name", flat=True)
    )
    if not names:
        raise EmptyResultError(f"Client {client_id} has not bought any products.")
    return list(names)


async def products_sold_to_client_with_quantity(client_id: int) -> List[ClientProductQuantity]:
    """
    Products the client bought with the quantity summed over all their orders.

    Sorted by descending total quantity, then product name.
    """
    await _ensure_client_exists(client_id)
    rows = await (
        _products_bought_by(client_id)
        .annotate(total_quantity=Sum("quantity"))
        .group_by("product_id", "product__name")
        .order_by("-total_quantity", "product__name")
        .values("product_id", "total_quantity", product_name="product__name")
    )
    if not rows:
        raise EmptyResultError(f"Client {client_id} has not bought any products.")
    return [ClientProductQuantity(**row) for row in rows]


# --- Orders ---

def _parse_order_date(value: Optional[str]) -> datetime.datetime:
    if value is None or not value.strip():
        raise ValidationError("A valid date in the format YYYY-MM-DD is required.")
    try:
        parsed = datetime.datetime.fromisoformat(value.strip())
    except ValueError:
        raise ValidationError(f"'{value}' is not a valid date in the format YYYY-MM-DD.")
    return as_naive_utc(parsed)


async def orders_after_date(date: Optional[str]) -> List[OrderResponse]:
    """
    Orders placed strictly after `date`.

    `date` is a YYYY-MM-DD string (midnight of that day) or a full ISO-8601
    timestamp.
    """
    after = _parse_order_date(date)
    found = await Order.filter(order_date__gt=after).order_by("order_date", "id")
    if not found:
        raise EmptyResultError(f"No orders after {after:%Y-%m-%d}.")
    return [OrderResponse.model_validate(o) for o in found]


async def _ensure_order_exists(order_id: int) -> None:
    if not await orders.exists(order_id):
        raise NotFoundError(f"Order {order_id} not found.")


async def order_products(order_id: int) -> List[OrderLineItem]:
    await _ensure_order_exists(order_id)
    rows = await OrderDetail.filter(order_id=order_id).order_by("id").values(
        "product_id", "quantity", product_name="product__name"
    )
    if not rows:
        raise EmptyResultError(f"Order {order_id} has no products.")
    return [OrderLineItem(**row) for row in rows]


async def order_total_quantity(order_id: int) -> OrderTotalQuantityResponse:
    """Sum of the quantities of the order's line items, 0 for an order without items."""
    await _ensure_order_exists(order_id)
    quantities = await OrderDetail.filter(order_id=order_id).values_list("quantity", flat=True)
    return OrderTotalQuantityResponse(order_id=order_id, total_quantity=sum(quantities))


async def all_orders_with_items() -> List[OrderWithItems]:
    """
    Every order with its client summary and line items.

    An empty store yields an empty list, never a not-found.
    """
    all_orders = await Order.all().order_by("id").prefetch_related("client", "details__product")
    result = []
    for order in all_orders:
        items = [
            OrderLineItem(product_id=detail.product_id, product_name=detail.product.name, quantity=detail.quantity)
            for detail in sorted(order.details, key=lambda d: d.id)
        ]
        result.append(
            OrderWithItems(
                id=order.id,
                order_date=order.order_date,
                client=OrderClientSummary(
                    client_id=order.client.id, name=order.client.name, email=order.client.email
                ),
                items=items,
            )
        )
    return result


# --- Products ---

async def products_above_price(min_price: float = DEFAULT_MIN_PRICE) -> List[ProductResponse]:
    """Products priced strictly above `min_price`."""
    found = await Product.filter(price__gt=min_price).order_by("id")
    if not found:
        raise EmptyResultError(f"No products priced above {min_price}.")
    return [ProductResponse.model_validate(p) for p in found]


async def most_expensive_product() -> ProductResponse:
    """The product with the highest price; the lowest id wins a tie."""
    product = await Product.all().order_by("-price", "id").first()
    if product is None:
        raise EmptyResultError("No products registered.")
    return ProductResponse.model_validate(product)


async def average_price_report() -> AveragePriceResponse:
    """Product count and mean price, both computed by the store in one query."""
    (stats,) = await Product.annotate(product_count=Count("id"), average_price=Avg("price")).values(
        "product_count", "average_price"
    )
    # AVG over no rows is NULL
    average_price = stats["average_price"] or 0.0
    logger.debug(f"Average price over {stats['product_count']} products: {average_price}")
    return AveragePriceResponse(product_count=stats["product_count"], average_price=average_price)


async def products_without_description() -> List[ProductResponse]:
    """Products whose description is missing or empty; both count as no description."""
    found = await Product.filter(Q(description__isnull=True) | Q(description="")).order_by("id")
    if not found:
        raise EmptyResultError("Every product has a description.")
    return [ProductResponse.model_validate(p) for p in found]


async def _ensure_product_exists(product_id: int) -> None:
    if not await products.exists(product_id):
        raise NotFoundError(f"Product {product_id} not found.")


BUYER_FIELDS = ("order__client__id", "order__client__name", "order__client__email")


async def buyers_of_product(product_id: int) -> List[ClientResponse]:
    """Distinct clients who bought the product, by ascending client id."""
    await _ensure_product_exists(product_id)
    rows = await (
        OrderDetail.filter(product_id=product_id)
        .group_by(*BUYER_FIELDS)
        .order_by("order__client__id")
        .values(client_id="order__client__id", name="order__client__name", email="order__client__email")
    )
    if not rows:
        raise EmptyResultError(f"Product {product_id} has no buyers.")
    return [ClientResponse(id=row["client_id"], name=row["name"], email=row["email"]) for row in rows]


async def buyers_of_product_with_quantity(product_id: int) -> List[ProductBuyerQuantity]:
    """Distinct buyers with their total quantity, largest first, then by client id."""
    await _ensure_product_exists(product_id)
    rows = await (
        OrderDetail.filter(product_id=product_id)
        .annotate(total_quantity=Sum("quantity"))
        .group_by(*BUYER_FIELDS)
        .order_by("-total_quantity", "order__client__id")
        .values(
            "total_quantity",
            client_id="order__client__id",
            name="order__client__name",
            email="order__client__email",
        )
    )
    if not rows:
        raise EmptyResultError(f"Product {product_id} has no buyers.")
    logger.debug(f"Product {product_id} has {len(rows)} distinct buyers")
    return [
        ProductBuyerQuantity(
            id=row["client_id"], name=row["name"], email=row["email"], total_quantity=row["total_quantity"]
        )
        for row in rows
    ]
