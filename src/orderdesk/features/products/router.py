"""API routes for managing the product catalogue."""
from fastapi import APIRouter, Request, Response, status
from typing import List

from .schemas import ProductCreate, ProductResponse, ProductUpdate
from . import service

router = APIRouter(
    prefix="/products",
    tags=["Products"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[ProductResponse], summary="List all products")
async def list_products():
    return await service.list_products()


@router.get("/{product_id}", response_model=ProductResponse, summary="Get a specific product")
async def get_product(product_id: int):
    return await service.get_product(product_id)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
)
async def create_product(product_in: ProductCreate, request: Request, response: Response):
    product = await service.create_product(product_in)
    response.headers["Location"] = str(request.url_for("get_product", product_id=product.id))
    return product


@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Replace a product")
async def replace_product(product_id: int, product_in: ProductUpdate):
    await service.replace_product(product_id, product_in)
    return None


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a product that was never ordered",
    responses={409: {"description": "Product is still part of an order"}},
)
async def delete_product(product_id: int):
    await service.delete_product(product_id)
    return None
