"""
Sale header (``vendas``) and line items (``itens_venda``).
"""

from sqlalchemy import Column, DateTime, Float, ForeignKey, String, CheckConstraint, Index
from sqlalchemy.orm import relationship

from gspro.models.base import Base, UUIDMixin, TimestampMixin, ModelMixin, utc_now


PAYMENT_METHODS = ("dinheiro", "cartao", "pix")


class Sale(Base, UUIDMixin, TimestampMixin, ModelMixin):
    """
    A finalized sale.

    Attributes:
        client_id: Optional buyer (walk-in sales have none)
        seller_id: User who registered the sale
        total: Sum of line totals at the time of sale
        payment_method: ``dinheiro``, ``cartao`` or ``pix``
        status: ``concluida`` or ``cancelada``
        sold_at: When the sale was finalized (UTC)
    """

    __tablename__ = "vendas"

    client_id = Column(
        String,
        ForeignKey("clientes.id", ondelete="SET NULL"),
        nullable=True,
    )
    seller_id = Column(
        String,
        ForeignKey("usuarios.id", ondelete="SET NULL"),
        nullable=True,
    )
    total = Column(Float, nullable=False, default=0.0)
    payment_method = Column(String(10), nullable=False)
    status = Column(String(10), nullable=False, default="concluida")
    sold_at = Column(DateTime, nullable=False, default=utc_now)

    client = relationship("Client", back_populates="sales", lazy="selectin")
    seller = relationship("User", lazy="selectin")
    items = relationship(
        "SaleItem",
        back_populates="sale",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    __table_args__ = (
        CheckConstraint("payment_method IN ('dinheiro', 'cartao', 'pix')", name="ck_vendas_payment"),
        CheckConstraint("status IN ('concluida', 'cancelada')", name="ck_vendas_status"),
        Index("idx_vendas_sold_at", "sold_at"),
    )


class SaleItem(Base, UUIDMixin, TimestampMixin, ModelMixin):
    """
    One product line of a sale, priced at the moment of sale.
    """

    __tablename__ = "itens_venda"

    sale_id = Column(
        String,
        ForeignKey("vendas.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    product_id = Column(
        String,
        ForeignKey("produtos.id"),
        nullable=False,
    )
    quantity = Column(Float, nullable=False)
    unit_price = Column(Float, nullable=False)

    sale = relationship("Sale", back_populates="items")
    product = relationship("Product", back_populates="sale_items", lazy="selectin")

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_itens_venda_quantity"),
    )

    @property
    def line_total(self) -> float:
        return round(self.quantity * self.unit_price, 2)
