from typing import List

from ...common.exceptions import ValidationError
from ...common.repository import Repository
from ..orders.models import Order, OrderDetail
from ..products.models import Product
from .schemas import OrderDetailBase, OrderDetailCreate, OrderDetailResponse, OrderDetailUpdate

order_details = Repository(OrderDetail, label="Order detail")


def _to_order_detail_response(detail: OrderDetail) -> OrderDetailResponse:
    return OrderDetailResponse.model_validate(detail)


async def _ensure_references_exist(detail_in: OrderDetailBase) -> None:
    if not await Order.filter(id=detail_in.order_id).exists():
        raise ValidationError(f"Order {detail_in.order_id} does not exist.")
    if not await Product.filter(id=detail_in.product_id).exists():
        raise ValidationError(f"Product {detail_in.product_id} does not exist.")


async def list_order_details() -> List[OrderDetailResponse]:
    return [_to_order_detail_response(d) for d in await order_details.list()]


async def get_order_detail(detail_id: int) -> OrderDetailResponse:
    return _to_order_detail_response(await order_details.get(detail_id))


async def create_order_detail(detail_in: OrderDetailCreate) -> OrderDetailResponse:
    await _ensure_references_exist(detail_in)
    detail = await order_details.insert(**detail_in.model_dump())
    return _to_order_detail_response(detail)


async def replace_order_detail(detail_id: int, detail_in: OrderDetailUpdate) -> None:
    if detail_in.id != detail_id:
        raise ValidationError(f"Path id {detail_id} does not match body id {detail_in.id}.")
    await _ensure_references_exist(detail_in)
    await order_details.replace(detail_id, **detail_in.model_dump(exclude={"id"}))


async def delete_order_detail(detail_id: int) -> None:
    await order_details.delete(detail_id)
