from fastapi import APIRouter, Request, Response, status
from typing import List

from .schemas import OrderCreate, OrderResponse, OrderUpdate
from . import service

router = APIRouter(
    prefix="/orders",
    tags=["Orders"],
)


@router.get("", response_model=List[OrderResponse])
async def list_orders():
    return await service.list_orders()


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: int):
    return await service.get_order(order_id)


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(order_in: OrderCreate, request: Request, response: Response):
    order = await service.create_order(order_in)
    response.headers["Location"] = str(request.url_for("get_order", order_id=order.id))
    return order


@router.put("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def replace_order(order_id: int, order_in: OrderUpdate):
    await service.replace_order(order_id, order_in)
    return None


# Line items of the order are removed with it
@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(order_id: int):
    await service.delete_order(order_id)
    return None
