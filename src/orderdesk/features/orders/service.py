from typing import List

from ...common.exceptions import ValidationError
from ...common.repository import Repository
from ..clients.models import Client
from .models import Order, OrderDetail
from .schemas import OrderCreate, OrderResponse, OrderUpdate

orders = Repository(Order, label="Order", cascades_to=[(OrderDetail, "order_id")])


def _to_order_response(order: Order) -> OrderResponse:
    return OrderResponse.model_validate(order)


async def _ensure_client_exists(client_id: int) -> None:
    if not await Client.filter(id=client_id).exists():
        raise ValidationError(f"Client {client_id} does not exist.")


async def list_orders() -> List[OrderResponse]:
    return [_to_order_response(o) for o in await orders.list()]


async def get_order(order_id: int) -> OrderResponse:
    return _to_order_response(await orders.get(order_id))


async def create_order(order_in: OrderCreate) -> OrderResponse:
    await _ensure_client_exists(order_in.client_id)
    order = await orders.insert(**order_in.model_dump())
    return _to_order_response(order)


async def replace_order(order_id: int, order_in: OrderUpdate) -> None:
    if order_in.id != order_id:
        raise ValidationError(f"Path id {order_id} does not match body id {order_in.id}.")
    await _ensure_client_exists(order_in.client_id)
    await orders.replace(order_id, **order_in.model_dump(exclude={"id"}))


async def delete_order(order_id: int) -> None:
    """Deletes an order together with all of its line items."""
    await orders.delete(order_id)
