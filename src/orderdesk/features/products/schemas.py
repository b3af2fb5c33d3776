from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional


class ProductBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, description="Name of the product")
    description: Optional[str] = Field(None, max_length=100, description="Optional product description")
    price: float = Field(..., description="Unit price, rounded to two fractional digits")

    @field_validator("price")
    @classmethod
    def round_price(cls, value: float) -> float:
        return round(value, 2)


class ProductCreate(ProductBase):
    pass


class ProductUpdate(ProductBase):
    id: int = Field(..., description="Must match the id in the request path")


class ProductResponse(ProductBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
