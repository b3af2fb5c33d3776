from pydantic import BaseModel, ConfigDict, Field


class OrderDetailBase(BaseModel):
    order_id: int = Field(..., description="Id of the order this line item belongs to")
    product_id: int = Field(..., description="Id of the ordered product")
    quantity: int = Field(..., gt=0, description="Quantity of the product")


class OrderDetailCreate(OrderDetailBase):
    pass


class OrderDetailUpdate(OrderDetailBase):
    id: int = Field(..., description="Must match the id in the request path")


class OrderDetailResponse(OrderDetailBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
