from pydantic import BaseModel, ConfigDict, Field


class ClientBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, description="Full name of the client")
    # Stored and returned exactly as given
    email: str = Field(..., min_length=1, max_length=100, description="Contact email of the client")


class ClientCreate(ClientBase):
    pass


class ClientUpdate(ClientBase):
    id: int = Field(..., description="Must match the id in the request path")


class ClientResponse(ClientBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
