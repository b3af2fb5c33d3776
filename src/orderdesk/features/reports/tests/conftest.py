import datetime
from types import SimpleNamespace

import pytest_asyncio


@pytest_asyncio.fixture
async def sales(client_factory, product_factory, order_factory):
    """
    A small store shared by the report tests.

    Ana has two orders, Bruno one, Andres an order without items and Carla
    none. Mouse is bought by Ana twice and by Bruno once.
    """
    ana = await client_factory("Ana Garcia")
    andres = await client_factory("Andres Molina")
    bruno = await client_factory("Bruno Diaz")
    carla = await client_factory("Carla Ruiz")

    laptop = await product_factory("Laptop", price=1200.00, description="14 inch ultrabook")
    mouse = await product_factory("Mouse", price=20.00, description="Wireless mouse")
    cable = await product_factory("Cable", price=20.01, description=None)
    stand = await product_factory("Stand", price=15.00, description="")

    o1 = await order_factory(ana, datetime.datetime(2025, 5, 1, 10, 0), items=[(mouse, 2), (laptop, 1)])
    o2 = await order_factory(ana, datetime.datetime(2025, 5, 10, 9, 30), items=[(mouse, 3), (cable, 1)])
    o3 = await order_factory(bruno, datetime.datetime(2025, 5, 20, 18, 0), items=[(mouse, 1)])
    o4 = await order_factory(andres, datetime.datetime(2025, 6, 1, 8, 0))

    return SimpleNamespace(
        ana=ana, andres=andres, bruno=bruno, carla=carla,
        laptop=laptop, mouse=mouse, cable=cable, stand=stand,
        o1=o1, o2=o2, o3=o3, o4=o4,
    )
