"""Report endpoints mounted next to the entity routes they read from.

The routers share their prefixes with the clients, orders and products
routers and are included before them, so fixed segments like `/search` or
`/most-orders` are matched before `/{id}`. Each handler delegates to the
report service.
"""
from fastapi import APIRouter, Query
from typing import List, Optional

from ..clients.schemas import ClientResponse
from ..orders.schemas import OrderResponse
from ..products.schemas import ProductResponse
from .schemas import (
    AveragePriceResponse, ClientOrdersCount, ClientProductQuantity,
    OrderLineItem, OrderTotalQuantityResponse, OrderWithItems, ProductBuyerQuantity
)
from . import service as report_service

NOT_FOUND = {404: {"description": "Entity not found or report is empty"}}
BAD_REQUEST = {400: {"description": "Missing or invalid query parameter"}}

clients_router = APIRouter(prefix="/clients", tags=["Clients", "Reports"], responses=NOT_FOUND)
orders_router = APIRouter(prefix="/orders", tags=["Orders", "Reports"], responses=NOT_FOUND)
products_router = APIRouter(prefix="/products", tags=["Products", "Reports"], responses=NOT_FOUND)


# --- Clients ---

@clients_router.get("/search", response_model=List[ClientResponse], responses=BAD_REQUEST)
async def search_clients(
    name: Optional[str] = Query(None, description="Case-insensitive name prefix")
):
    return await report_service.search_clients_by_name(name)


@clients_router.get("/most-orders", response_model=ClientOrdersCount)
async def get_client_with_most_orders():
    return await report_service.client_with_most_orders()


@clients_router.get("/{client_id}/products-sold", response_model=List[str])
async def get_products_sold_to_client(client_id: int):
    return await report_service.products_sold_to_client(client_id)


@clients_router.get("/{client_id}/products-sold-with-qty", response_model=List[ClientProductQuantity])
async def get_products_sold_to_client_with_quantity(client_id: int):
    return await report_service.products_sold_to_client_with_quantity(client_id)


# --- Orders ---

@orders_router.get("/with-items", response_model=List[OrderWithItems])
async def get_all_orders_with_items():
    return await report_service.all_orders_with_items()


@orders_router.get("/after-date", response_model=List[OrderResponse], responses=BAD_REQUEST)
async def get_orders_after_date(
    date: Optional[str] = Query(None, description="Only orders placed after this date (YYYY-MM-DD)")
):
    return await report_service.orders_after_date(date)


@orders_router.get("/{order_id}/products", response_model=List[OrderLineItem])
async def get_order_products(order_id: int):
    return await report_service.order_products(order_id)


@orders_router.get("/{order_id}/total-quantity", response_model=OrderTotalQuantityResponse)
async def get_order_total_quantity(order_id: int):
    return await report_service.order_total_quantity(order_id)


# --- Products ---

@products_router.get("/price-greater-than", response_model=List[ProductResponse], responses=BAD_REQUEST)
async def get_products_price_greater_than(
    min_price: float = Query(
        report_service.DEFAULT_MIN_PRICE, alias="minPrice", description="Exclusive lower price bound"
    )
):
    return await report_service.products_above_price(min_price)


@products_router.get("/most-expensive", response_model=ProductResponse)
async def get_most_expensive_product():
    return await report_service.most_expensive_product()


@products_router.get("/average-price", response_model=AveragePriceResponse)
async def get_average_price():
    return await report_service.average_price_report()


@products_router.get("/without-description", response_model=List[ProductResponse])
async def get_products_without_description():
    return await report_service.products_without_description()


@products_router.get("/{product_id}/buyers", response_model=List[ClientResponse])
async def get_buyers_for_product(product_id: int):
    return await report_service.buyers_of_product(product_id)


@products_router.get("/{product_id}/buyers-with-qty", response_model=List[ProductBuyerQuantity])
async def get_buyers_for_product_with_quantity(product_id: int):
    return await report_service.buyers_of_product_with_quantity(product_id)
