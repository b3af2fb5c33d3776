from typing import List

from ...common.exceptions import ValidationError
from ...common.repository import Repository
from ..orders.models import Order
from .models import Client
from .schemas import ClientCreate, ClientResponse, ClientUpdate

clients = Repository(Client, label="Client", restricted_by=[(Order, "client_id")])


def _to_client_response(client: Client) -> ClientResponse:
    return ClientResponse.model_validate(client)


async def list_clients() -> List[ClientResponse]:
    return [_to_client_response(c) for c in await clients.list()]


async def get_client(client_id: int) -> ClientResponse:
    return _to_client_response(await clients.get(client_id))


async def create_client(client_in: ClientCreate) -> ClientResponse:
    client = await clients.insert(**client_in.model_dump())
    return _to_client_response(client)


async def replace_client(client_id: int, client_in: ClientUpdate) -> None:
    """
    Overwrites name and email of an existing client.

    Raises:
        ValidationError: the body id differs from the path id.
        NotFoundError: no client with that id.
    """
    if client_in.id != client_id:
        raise ValidationError(f"Path id {client_id} does not match body id {client_in.id}.")
    await clients.replace(client_id, **client_in.model_dump(exclude={"id"}))


async def delete_client(client_id: int) -> None:
    """Deletes a client. Refused while any order still references it."""
    await clients.delete(client_id)
