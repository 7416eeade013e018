"""
Transaction repository for the ``transacoes`` table.
"""

from datetime import date
from typing import Optional

from sqlalchemy import select

from gspro.models.transaction import Transaction
from gspro.repositories.base import BaseRepository


class TransactionRepository(BaseRepository[Transaction]):
    """Data access for financial movements."""

    model = Transaction
    entity_name = "Transaction"

    async def list_transactions(
        self,
        kind: Optional[str] = None,
        status: Optional[str] = None,
        since: Optional[date] = None,
    ) -> list[Transaction]:
        """List movements, most recent competence date first."""
        stmt = select(Transaction)
        if kind:
            stmt = stmt.where(Transaction.kind == kind)
        if status:
            stmt = stmt.where(Transaction.status == status)
        if since is not None:
            stmt = stmt.where(Transaction.occurred_on >= since)
        stmt = stmt.order_by(Transaction.occurred_on.desc(), Transaction.created_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_pending_bills(self) -> list[Transaction]:
        """Pending outgoing movements, earliest due date first."""
        stmt = (
            select(Transaction)
            .where(Transaction.kind == "saida", Transaction.status == "pendente")
            .order_by(Transaction.due_on.is_(None), Transaction.due_on, Transaction.occurred_on)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
