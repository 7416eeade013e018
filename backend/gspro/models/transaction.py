"""
Financial movement model (``transacoes``).
"""

from sqlalchemy import Column, Date, Float, ForeignKey, String, CheckConstraint, Index

from gspro.models.base import Base, UUIDMixin, TimestampMixin, ModelMixin


class Transaction(Base, UUIDMixin, TimestampMixin, ModelMixin):
    """
    Money coming in (``entrada``) or going out (``saida``).

    Amounts are always stored positive; ``kind`` carries the direction.
    Pending outgoing rows with a ``due_on`` date are the bills to pay.

    Attributes:
        description: What the movement refers to
        amount: Positive amount
        kind: ``entrada`` or ``saida``
        category: Expense/income category (e.g. "Aluguel", "Vendas")
        payment_method: How it was paid (PIX, Boleto, Transferência...)
        status: ``pago`` or ``pendente``
        occurred_on: Competence date
        due_on: Due date for pending bills
        sale_id: Sale that generated the movement, if any
    """

    __tablename__ = "transacoes"

    description = Column(String(255), nullable=False)
    amount = Column(Float, nullable=False)
    kind = Column(String(10), nullable=False)
    category = Column(String(100), nullable=True)
    payment_method = Column(String(50), nullable=True)
    status = Column(String(10), nullable=False, default="pago")
    occurred_on = Column(Date, nullable=False)
    due_on = Column(Date, nullable=True)
    sale_id = Column(
        String,
        ForeignKey("vendas.id", ondelete="SET NULL"),
        nullable=True,
    )

    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_transacoes_amount"),
        CheckConstraint("kind IN ('entrada', 'saida')", name="ck_transacoes_kind"),
        CheckConstraint("status IN ('pago', 'pendente')", name="ck_transacoes_status"),
        Index("idx_transacoes_occurred_on", "occurred_on"),
    )

    @property
    def signed_amount(self) -> float:
        return self.amount if self.kind == "entrada" else -self.amount
