"""
Finance aggregation: ledger totals and bills to pay.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable

from gspro.models.transaction import Transaction


@dataclass
class FinanceSummary:
    income: float
    expenses: float
    balance: float
    pending_payables: float
    pending_receivables: float


@dataclass
class Bill:
    transaction: Transaction
    status: str
    overdue: bool
    days_until_due: int | None


def summarize_transactions(transactions: Iterable[Transaction]) -> FinanceSummary:
    """
    Totals for the finance header cards.

    Income, expenses and balance only count paid movements; pending rows
    are reported separately.
    """
    income = expenses = payables = receivables = 0.0

    for tx in transactions:
        if tx.status == "pago":
            if tx.kind == "entrada":
                income += tx.amount
            else:
                expenses += tx.amount
        elif tx.kind == "saida":
            payables += tx.amount
        else:
            receivables += tx.amount

    return FinanceSummary(
        income=round(income, 2),
        expenses=round(expenses, 2),
        balance=round(income - expenses, 2),
        pending_payables=round(payables, 2),
        pending_receivables=round(receivables, 2),
    )


def classify_bills(
    bills: Iterable[Transaction],
    today: date,
    urgent_days: int,
) -> list[Bill]:
    """
    Flag pending bills as ``urgente`` when overdue or due within
    ``urgent_days`` of ``today``; everything else stays ``pendente``.

    Input order is preserved.
    """
    horizon = today + timedelta(days=urgent_days)
    classified = []
    for tx in bills:
        if tx.due_on is None:
            classified.append(Bill(transaction=tx, status="pendente", overdue=False, days_until_due=None))
            continue
        classified.append(
            Bill(
                transaction=tx,
                status="urgente" if tx.due_on <= horizon else "pendente",
                overdue=tx.due_on < today,
                days_until_due=(tx.due_on - today).days,
            )
        )
    return classified
