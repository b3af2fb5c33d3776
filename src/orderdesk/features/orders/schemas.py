from pydantic import BaseModel, ConfigDict, Field, field_validator
import datetime


def as_naive_utc(value: datetime.datetime) -> datetime.datetime:
    """Order dates are stored without a time zone; aware values are converted to UTC first."""
    if value.tzinfo is not None:
        value = value.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return value


class OrderBase(BaseModel):
    client_id: int = Field(..., description="Id of the client placing the order")
    order_date: datetime.datetime = Field(..., description="Order timestamp (no time zone)")

    @field_validator("order_date")
    @classmethod
    def strip_timezone(cls, value: datetime.datetime) -> datetime.datetime:
        return as_naive_utc(value)


class OrderCreate(OrderBase):
    pass


class OrderUpdate(OrderBase):
    id: int = Field(..., description="Must match the id in the request path")


class OrderResponse(OrderBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
