from typing import List

from ...common.exceptions import ValidationError
from ...common.repository import Repository
from ..orders.models import OrderDetail
from .models import Product
from .schemas import ProductCreate, ProductResponse, ProductUpdate

products = Repository(Product, label="Product", restricted_by=[(OrderDetail, "product_id")])


def _to_product_response(product: Product) -> ProductResponse:
    """Converts a Product model instance to a ProductResponse schema."""
    return ProductResponse.model_validate(product)


async def list_products() -> List[ProductResponse]:
    return [_to_product_response(p) for p in await products.list()]


async def get_product(product_id: int) -> ProductResponse:
    return _to_product_response(await products.get(product_id))


async def create_product(product_in: ProductCreate) -> ProductResponse:
    product = await products.insert(**product_in.model_dump())
    return _to_product_response(product)


async def replace_product(product_id: int, product_in: ProductUpdate) -> None:
    if product_in.id != product_id:
        raise ValidationError(f"Path id {product_id} does not match body id {product_in.id}.")
    await products.replace(product_id, **product_in.model_dump(exclude={"id"}))


async def delete_product(product_id: int) -> None:
    """Deletes a product. Refused while any order line item still references it."""
    await products.delete(product_id)
