"""
Finance endpoints: transactions, summary cards and bills to pay.
"""

import logging
from datetime import date
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Query, status

from gspro.api.dependencies import CurrentActiveUser, DatabaseSession, http_error
from gspro.core.config import settings
from gspro.core.errors import ConflictError, DomainError
from gspro.models.transaction import Transaction
from gspro.repositories.transaction import TransactionRepository
from gspro.schemas.finance import (
    BillListResponse,
    BillResponse,
    FinanceSummaryResponse,
    TransactionCreateRequest,
    TransactionKind,
    TransactionResponse,
    TransactionStatus,
    TransactionUpdateRequest,
)
from gspro.services.finance import classify_bills, summarize_transactions
from gspro.services.formatting import format_date_br

logger = logging.getLogger(__name__)

router = APIRouter(tags=["finance"])


def get_transaction_repository(db: DatabaseSession) -> TransactionRepository:
    return TransactionRepository(db)


TransactionRepo = Annotated[TransactionRepository, Depends(get_transaction_repository)]


@router.get("/transactions", response_model=List[TransactionResponse], summary="List transactions")
async def list_transactions(
    repo: TransactionRepo,
    current_user: CurrentActiveUser,
    kind: Optional[TransactionKind] = None,
    tx_status: Optional[TransactionStatus] = Query(default=None, alias="status"),
    since: Optional[date] = None,
) -> List[TransactionResponse]:
    transactions = await repo.list_transactions(kind=kind, status=tx_status, since=since)
    return [TransactionResponse.model_validate(tx) for tx in transactions]


@router.post(
    "/transactions",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record a transaction",
)
async def create_transaction(
    request: TransactionCreateRequest,
    repo: TransactionRepo,
    current_user: CurrentActiveUser,
) -> TransactionResponse:
    tx = await repo.add(Transaction(**request.model_dump()))
    logger.info("Transaction recorded", extra={"transaction_id": tx.id, "kind": tx.kind, "amount": tx.amount})
    return TransactionResponse.model_validate(tx)


@router.get(
    "/finance/summary",
    response_model=FinanceSummaryResponse,
    summary="Finance summary",
    description="Paid income, paid expenses, balance, and pending amounts in each direction.",
)
async def finance_summary(
    repo: TransactionRepo,
    current_user: CurrentActiveUser,
    since: Optional[date] = None,
) -> FinanceSummaryResponse:
    summary = summarize_transactions(await repo.list_transactions(since=since))
    return FinanceSummaryResponse(**summary.__dict__)


@router.get(
    "/finance/bills",
    response_model=BillListResponse,
    summary="Bills to pay",
    description="Pending expenses by due date, flagged urgent when due within a few days.",
)
async def list_bills(
    repo: TransactionRepo,
    current_user: CurrentActiveUser,
) -> BillListResponse:
    bills = classify_bills(
        await repo.list_pending_bills(),
        today=date.today(),
        urgent_days=settings.bill_urgent_days,
    )
    return BillListResponse(
        bills=[
            BillResponse(
                id=bill.transaction.id,
                description=bill.transaction.description,
                amount=bill.transaction.amount,
                due_on=bill.transaction.due_on,
                due_on_display=format_date_br(bill.transaction.due_on) if bill.transaction.due_on else None,
                status=bill.status,
                overdue=bill.overdue,
                days_until_due=bill.days_until_due,
            )
            for bill in bills
        ],
        total=round(sum(bill.transaction.amount for bill in bills), 2),
    )


@router.get("/transactions/{transaction_id}", response_model=TransactionResponse, summary="Get transaction")
async def get_transaction(
    transaction_id: str,
    repo: TransactionRepo,
    current_user: CurrentActiveUser,
) -> TransactionResponse:
    try:
        return TransactionResponse.model_validate(await repo.get_or_raise(transaction_id))
    except DomainError as exc:
        raise http_error(exc)


@router.patch("/transactions/{transaction_id}", response_model=TransactionResponse, summary="Update transaction")
async def update_transaction(
    transaction_id: str,
    request: TransactionUpdateRequest,
    repo: TransactionRepo,
    current_user: CurrentActiveUser,
) -> TransactionResponse:
    try:
        tx = await repo.get_or_raise(transaction_id)
        tx = await repo.update(tx, request.model_dump(exclude_unset=True))
    except DomainError as exc:
        raise http_error(exc)
    return TransactionResponse.model_validate(tx)


@router.post(
    "/transactions/{transaction_id}/pay",
    response_model=TransactionResponse,
    summary="Mark a pending transaction as paid",
)
async def pay_transaction(
    transaction_id: str,
    repo: TransactionRepo,
    current_user: CurrentActiveUser,
) -> TransactionResponse:
    """
    Raises:
        HTTPException 404: If the transaction does not exist
        HTTPException 409: If it is already paid
    """
    try:
        tx = await repo.get_or_raise(transaction_id)
        if tx.status == "pago":
            raise ConflictError(f"Transação já paga: {transaction_id}")
        tx = await repo.update(tx, {"status": "pago"})
    except DomainError as exc:
        raise http_error(exc)
    logger.info("Transaction paid", extra={"transaction_id": tx.id, "amount": tx.amount})
    return TransactionResponse.model_validate(tx)


@router.delete(
    "/transactions/{transaction_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a transaction",
)
async def delete_transaction(
    transaction_id: str,
    repo: TransactionRepo,
    current_user: CurrentActiveUser,
) -> None:
    try:
        await repo.delete(await repo.get_or_raise(transaction_id))
    except DomainError as exc:
        raise http_error(exc)
