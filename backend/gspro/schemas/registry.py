"""
Pydantic schemas for generic registry entries (cadastros).
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from gspro.schemas.common import PartialUpdate


RegistryKind = Literal["categorias", "localizacoes", "transportadoras", "vendedores", "fornecedores"]


class RegistryEntryBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Nome completo / razão social")
    document: Optional[str] = Field(default=None, max_length=32, description="CPF/CNPJ")
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=32)
    address: Optional[str] = Field(default=None, max_length=500)
    commission_pct: Optional[float] = Field(
        default=None,
        ge=0,
        le=100,
        description="Seller commission percentage (vendedores only)",
    )


class RegistryEntryCreateRequest(RegistryEntryBase):
    pass


class RegistryEntryUpdateRequest(PartialUpdate):
    non_nullable = ("name",)

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    document: Optional[str] = Field(default=None, max_length=32)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=32)
    address: Optional[str] = Field(default=None, max_length=500)
    commission_pct: Optional[float] = Field(default=None, ge=0, le=100)


class RegistryEntryResponse(RegistryEntryBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    kind: RegistryKind
    created_at: str
