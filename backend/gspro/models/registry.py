"""
Generic registry entries (``cadastros``).

Holds the supporting records that have no table of their own: part
categories, storage locations, carriers, sellers and suppliers.
"""

from sqlalchemy import Column, Float, String, CheckConstraint, Index

from gspro.models.base import Base, UUIDMixin, TimestampMixin, ModelMixin


class RegistryEntry(Base, UUIDMixin, TimestampMixin, ModelMixin):
    """
    One registry record; ``kind`` selects which list it belongs to.

    ``commission_pct`` is only used for ``vendedores``.
    """

    __tablename__ = "cadastros"

    kind = Column(String(20), nullable=False)
    name = Column(String(255), nullable=False)
    document = Column(String(32), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(32), nullable=True)
    address = Column(String(500), nullable=True)
    commission_pct = Column(Float, nullable=True)

    __table_args__ = (
        CheckConstraint(
            "kind IN ('categorias', 'localizacoes', 'transportadoras', 'vendedores', 'fornecedores')",
            name="ck_cadastros_kind",
        ),
        Index("idx_cadastros_kind_name", "kind", "name"),
    )
