"""
Product model: scrap material (``sucata``) and spare parts (``peca``).
"""

from sqlalchemy import Column, Float, String, CheckConstraint, Index
from sqlalchemy.orm import relationship

from gspro.models.base import Base, UUIDMixin, TimestampMixin, ModelMixin


class Product(Base, UUIDMixin, TimestampMixin, ModelMixin):
    """
    Inventory item stored in ``produtos``.

    Scrap is usually sold by weight (``kg``), parts by unit (``un``).

    Attributes:
        name: Product name shown in the catalogue and on labels
        sku: Optional unique stock-keeping code (e.g. "SUC-AL-001")
        kind: ``sucata`` or ``peca``
        category: Free-form category (e.g. "Sucatas", "Peças")
        unit: ``kg`` or ``un``
        quantity: Quantity on hand, in ``unit``
        price: Sale price per unit
        cost: Average purchase price per unit (used for stock value)
        min_stock: Alert threshold; see services.inventory.stock_status
        location: Where the item is kept (e.g. "Box 04")
    """

    __tablename__ = "produtos"

    name = Column(String(255), nullable=False)
    sku = Column(String(64), nullable=True, unique=True)
    kind = Column(String(10), nullable=False, default="peca")
    category = Column(String(100), nullable=True)
    unit = Column(String(5), nullable=False, default="un")
    quantity = Column(Float, nullable=False, default=0.0)
    price = Column(Float, nullable=False, default=0.0)
    cost = Column(Float, nullable=False, default=0.0)
    min_stock = Column(Float, nullable=False, default=0.0)
    location = Column(String(100), nullable=True)

    sale_items = relationship("SaleItem", back_populates="product")

    __table_args__ = (
        CheckConstraint("kind IN ('sucata', 'peca')", name="ck_produtos_kind"),
        CheckConstraint("unit IN ('kg', 'un')", name="ck_produtos_unit"),
        CheckConstraint("price >= 0", name="ck_produtos_price"),
        CheckConstraint("cost >= 0", name="ck_produtos_cost"),
        Index("idx_produtos_name", "name"),
    )
