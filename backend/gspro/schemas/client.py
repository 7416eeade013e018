"""
Pydantic schemas for the customer registry.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from gspro.schemas.common import PartialUpdate


class ClientBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Full name or company name")
    document: Optional[str] = Field(default=None, max_length=32, description="CPF/CNPJ")
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=32)
    address: Optional[str] = Field(default=None, max_length=500)


class ClientCreateRequest(ClientBase):
    pass


class ClientUpdateRequest(PartialUpdate):
    non_nullable = ("name",)

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    document: Optional[str] = Field(default=None, max_length=32)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=32)
    address: Optional[str] = Field(default=None, max_length=500)


class ClientResponse(ClientBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: str
