"""
Registry (cadastros) endpoints for categories, locations, carriers,
sellers and suppliers.
"""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Query, status

from gspro.api.dependencies import CurrentActiveUser, DatabaseSession, http_error
from gspro.core.errors import DomainError
from gspro.models.registry import RegistryEntry
from gspro.repositories.registry import RegistryRepository
from gspro.schemas.registry import (
    RegistryEntryCreateRequest,
    RegistryEntryResponse,
    RegistryEntryUpdateRequest,
    RegistryKind,
)

router = APIRouter(tags=["registry"])


def get_registry_repository(db: DatabaseSession) -> RegistryRepository:
    return RegistryRepository(db)


RegistryRepo = Annotated[RegistryRepository, Depends(get_registry_repository)]


def _fields_for(kind: str, data: dict) -> dict:
    # Commission only applies to sellers
    if kind != "vendedores":
        data.pop("commission_pct", None)
    return data


@router.get("/registry/{kind}", response_model=List[RegistryEntryResponse], summary="List registry entries")
async def list_entries(
    kind: RegistryKind,
    repo: RegistryRepo,
    current_user: CurrentActiveUser,
    search: Optional[str] = Query(default=None, max_length=100),
) -> List[RegistryEntryResponse]:
    entries = await repo.list_entries(kind, search)
    return [RegistryEntryResponse.model_validate(e) for e in entries]


@router.post(
    "/registry/{kind}",
    response_model=RegistryEntryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a registry entry",
)
async def create_entry(
    kind: RegistryKind,
    request: RegistryEntryCreateRequest,
    repo: RegistryRepo,
    current_user: CurrentActiveUser,
) -> RegistryEntryResponse:
    entry = await repo.add(RegistryEntry(kind=kind, **_fields_for(kind, request.model_dump())))
    return RegistryEntryResponse.model_validate(entry)


@router.get("/registry/{kind}/{entry_id}", response_model=RegistryEntryResponse, summary="Get a registry entry")
async def get_entry(
    kind: RegistryKind,
    entry_id: str,
    repo: RegistryRepo,
    current_user: CurrentActiveUser,
) -> RegistryEntryResponse:
    try:
        return RegistryEntryResponse.model_validate(await repo.get_of_kind(kind, entry_id))
    except DomainError as exc:
        raise http_error(exc)


@router.patch("/registry/{kind}/{entry_id}", response_model=RegistryEntryResponse, summary="Update a registry entry")
async def update_entry(
    kind: RegistryKind,
    entry_id: str,
    request: RegistryEntryUpdateRequest,
    repo: RegistryRepo,
    current_user: CurrentActiveUser,
) -> RegistryEntryResponse:
    try:
        entry = await repo.get_of_kind(kind, entry_id)
        entry = await repo.update(entry, _fields_for(kind, request.model_dump(exclude_unset=True)))
    except DomainError as exc:
        raise http_error(exc)
    return RegistryEntryResponse.model_validate(entry)


@router.delete(
    "/registry/{kind}/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a registry entry",
)
async def delete_entry(
    kind: RegistryKind,
    entry_id: str,
    repo: RegistryRepo,
    current_user: CurrentActiveUser,
) -> None:
    try:
        await repo.delete(await repo.get_of_kind(kind, entry_id))
    except DomainError as exc:
        raise http_error(exc)
