"""
Pydantic schemas for transactions and finance reports.
"""

from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from gspro.schemas.common import PartialUpdate


TransactionKind = Literal["entrada", "saida"]
TransactionStatus = Literal["pago", "pendente"]


class TransactionBase(BaseModel):
    description: str = Field(..., min_length=1, max_length=255)
    amount: float = Field(..., ge=0, description="Positive amount; kind carries the direction")
    kind: TransactionKind
    category: Optional[str] = Field(default=None, max_length=100)
    payment_method: Optional[str] = Field(default=None, max_length=50, description="PIX, Boleto, Dinheiro...")
    status: TransactionStatus = "pago"
    occurred_on: date
    due_on: Optional[date] = None


class TransactionCreateRequest(TransactionBase):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "description": "Pagamento Aluguel Depósito",
                "amount": 1800.0,
                "kind": "saida",
                "category": "Aluguel",
                "payment_method": "Boleto",
                "status": "pago",
                "occurred_on": "2026-01-25",
            }
        }
    )


class TransactionUpdateRequest(PartialUpdate):
    non_nullable = ("description", "amount", "kind", "status", "occurred_on")

    description: Optional[str] = Field(default=None, min_length=1, max_length=255)
    amount: Optional[float] = Field(default=None, ge=0)
    kind: Optional[TransactionKind] = None
    category: Optional[str] = Field(default=None, max_length=100)
    payment_method: Optional[str] = Field(default=None, max_length=50)
    status: Optional[TransactionStatus] = None
    occurred_on: Optional[date] = None
    due_on: Optional[date] = None


class TransactionResponse(TransactionBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    sale_id: Optional[str] = None
    signed_amount: float


class FinanceSummaryResponse(BaseModel):
    income: float
    expenses: float
    balance: float
    pending_payables: float
    pending_receivables: float


class BillResponse(BaseModel):
    id: str
    description: str
    amount: float
    due_on: Optional[date] = None
    due_on_display: Optional[str] = None
    status: Literal["pendente", "urgente"]
    overdue: bool
    days_until_due: Optional[int] = None


class BillListResponse(BaseModel):
    bills: List[BillResponse]
    total: float
