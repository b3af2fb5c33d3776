"""API routes for creating, reading, replacing and deleting clients."""
from fastapi import APIRouter, Request, Response, status
from typing import List

from .schemas import ClientCreate, ClientResponse, ClientUpdate
from . import service

router = APIRouter(
    prefix="/clients",
    tags=["Clients"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[ClientResponse], summary="List all clients")
async def list_clients():
    return await service.list_clients()


@router.get("/{client_id}", response_model=ClientResponse, summary="Get a specific client")
async def get_client(client_id: int):
    return await service.get_client(client_id)


@router.post(
    "",
    response_model=ClientResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new client",
)
async def create_client(client_in: ClientCreate, request: Request, response: Response):
    client = await service.create_client(client_in)
    response.headers["Location"] = str(request.url_for("get_client", client_id=client.id))
    return client


@router.put(
    "/{client_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace a client",
)
async def replace_client(client_id: int, client_in: ClientUpdate):
    await service.replace_client(client_id, client_in)
    return None


@router.delete(
    "/{client_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a client without orders",
    responses={409: {"description": "Client still has orders"}},
)
async def delete_client(client_id: int):
    await service.delete_client(client_id)
    return None
