"""
Customer registry endpoints.
"""

import logging
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Query, status

from gspro.api.dependencies import CurrentActiveUser, DatabaseSession, http_error
from gspro.core.errors import DomainError
from gspro.repositories.client import ClientRepository
from gspro.schemas.client import ClientCreateRequest, ClientResponse, ClientUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["clients"])


def get_client_repository(db: DatabaseSession) -> ClientRepository:
    return ClientRepository(db)


ClientRepo = Annotated[ClientRepository, Depends(get_client_repository)]


@router.get("/clients", response_model=List[ClientResponse], summary="List clients")
async def list_clients(
    repo: ClientRepo,
    current_user: CurrentActiveUser,
    search: Optional[str] = Query(default=None, max_length=100),
) -> List[ClientResponse]:
    """Clients ordered by name; ``search`` matches name, document or e-mail."""
    return [ClientResponse.model_validate(c) for c in await repo.list_clients(search)]


@router.post(
    "/clients",
    response_model=ClientResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a client",
)
async def create_client(
    request: ClientCreateRequest,
    repo: ClientRepo,
    current_user: CurrentActiveUser,
) -> ClientResponse:
    try:
        client = await repo.create_client(**request.model_dump())
    except DomainError as exc:
        raise http_error(exc)
    logger.info("Client created", extra={"client_id": client.id})
    return ClientResponse.model_validate(client)


@router.get("/clients/{client_id}", response_model=ClientResponse, summary="Get client by ID")
async def get_client(
    client_id: str,
    repo: ClientRepo,
    current_user: CurrentActiveUser,
) -> ClientResponse:
    try:
        return ClientResponse.model_validate(await repo.get_or_raise(client_id))
    except DomainError as exc:
        raise http_error(exc)


@router.patch("/clients/{client_id}", response_model=ClientResponse, summary="Update a client")
async def update_client(
    client_id: str,
    request: ClientUpdateRequest,
    repo: ClientRepo,
    current_user: CurrentActiveUser,
) -> ClientResponse:
    try:
        client = await repo.get_or_raise(client_id)
        client = await repo.update_client(client, request.model_dump(exclude_unset=True))
    except DomainError as exc:
        raise http_error(exc)
    return ClientResponse.model_validate(client)


@router.delete(
    "/clients/{client_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a client",
    description="Past sales keep their totals; their client reference is cleared.",
)
async def delete_client(
    client_id: str,
    repo: ClientRepo,
    current_user: CurrentActiveUser,
) -> None:
    try:
        await repo.delete(await repo.get_or_raise(client_id))
    except DomainError as exc:
        raise http_error(exc)
