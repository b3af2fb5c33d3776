"""Response schemas for the derived views over clients, orders and products.

Plain entity lists (clients matching a name, products above a price, orders
after a date, ...) reuse the response schemas of their own feature. The
schemas below cover the views that aggregate or join across tables:

1. Client with the most orders
2. Products sold to a client, with summed quantities
3. Line items of an order and their total quantity
4. Orders enriched with client summary and line items
5. Product count and average price
6. Buyers of a product, with summed quantities
"""
from pydantic import BaseModel, Field, field_validator
from typing import List
import datetime

from ..clients.schemas import ClientResponse
from ..orders.schemas import as_naive_utc


# 1. Client with the most orders
class ClientOrdersCount(ClientResponse):
    orders_count: int


# 2. Products sold to a client
class ClientProductQuantity(BaseModel):
    product_id: int
    product_name: str
    total_quantity: int


# 3. Order line items
class OrderLineItem(BaseModel):
    product_id: int
    product_name: str
    quantity: int


class OrderTotalQuantityResponse(BaseModel):
    order_id: int
    total_quantity: int


# 4. Orders with items
class OrderClientSummary(BaseModel):
    client_id: int
    name: str
    email: str


class OrderWithItems(BaseModel):
    id: int
    order_date: datetime.datetime
    client: OrderClientSummary
    items: List[OrderLineItem]

    @field_validator("order_date")
    @classmethod
    def strip_timezone(cls, value: datetime.datetime) -> datetime.datetime:
        return as_naive_utc(value)


# 5. Price statistics
class AveragePriceResponse(BaseModel):
    product_count: int
    average_price: float = Field(..., description="0 when there are no products")


# 6. Buyers of a product
class ProductBuyerQuantity(ClientResponse):
    total_quantity: int
