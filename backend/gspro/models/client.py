"""
Client model: the customer registry.
"""

from sqlalchemy import Column, String, Index
from sqlalchemy.orm import relationship

from gspro.models.base import Base, UUIDMixin, TimestampMixin, ModelMixin


class Client(Base, UUIDMixin, TimestampMixin, ModelMixin):
    """
    Customer stored in ``clientes``.

    Attributes:
        name: Full name or company name
        document: CPF/CNPJ, unique when present
        email: Contact e-mail
        phone: Phone / WhatsApp
        address: Full postal address
    """

    __tablename__ = "clientes"

    name = Column(String(255), nullable=False)
    document = Column(String(32), nullable=True, unique=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(32), nullable=True)
    address = Column(String(500), nullable=True)

    sales = relationship("Sale", back_populates="client")

    __table_args__ = (
        Index("idx_clientes_name", "name"),
    )
