import datetime
from typing import Optional, Sequence

import pytest_asyncio

from orderdesk.features.clients.models import Client
from orderdesk.features.orders.models import Order, OrderDetail
from orderdesk.features.products.models import Product


@pytest_asyncio.fixture
async def client_factory():
    """A factory to create clients."""

    async def _factory(name: str = "Test Client", email: Optional[str] = None) -> Client:
        if email is None:
            email = f"{name.lower().replace(' ', '.')}@example.com"
        return await Client.create(name=name, email=email)

    return _factory


@pytest_asyncio.fixture
async def product_factory():
    """A factory to create products."""

    async def _factory(
        name: str = "Test Product",
        price: float = 10.0,
        description: Optional[str] = "A test product",
    ) -> Product:
        return await Product.create(name=name, price=price, description=description)

    return _factory


@pytest_asyncio.fixture
async def order_factory():
    """A factory to create an order with its line items, given as (product, quantity) pairs."""

    async def _factory(
        client: Client,
        order_date: datetime.datetime = datetime.datetime(2025, 5, 1, 12, 0),
        items: Sequence[tuple[Product, int]] = (),
    ) -> Order:
        order = await Order.create(client=client, order_date=order_date)
        for product, quantity in items:
            await OrderDetail.create(order=order, product=product, quantity=quantity)
        return order

    return _factory
