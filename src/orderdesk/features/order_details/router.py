"""API routes for the line items of orders."""
from fastapi import APIRouter, Request, Response, status
from typing import List

from .schemas import OrderDetailCreate, OrderDetailResponse, OrderDetailUpdate
from . import service

router = APIRouter(
    prefix="/order-details",
    tags=["Order Details"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[OrderDetailResponse], summary="List all order line items")
async def list_order_details():
    return await service.list_order_details()


@router.get("/{detail_id}", response_model=OrderDetailResponse, summary="Get a specific line item")
async def get_order_detail(detail_id: int):
    return await service.get_order_detail(detail_id)


@router.post(
    "",
    response_model=OrderDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a line item to an order",
)
async def create_order_detail(detail_in: OrderDetailCreate, request: Request, response: Response):
    detail = await service.create_order_detail(detail_in)
    response.headers["Location"] = str(request.url_for("get_order_detail", detail_id=detail.id))
    return detail


@router.put("/{detail_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Replace a line item")
async def replace_order_detail(detail_id: int, detail_in: OrderDetailUpdate):
    await service.replace_order_detail(detail_id, detail_in)
    return None


@router.delete("/{detail_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a line item")
async def delete_order_detail(detail_id: int):
    await service.delete_order_detail(detail_id)
    return None
