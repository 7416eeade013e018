"""
SQLAlchemy ORM models for Gestão Sucata Pro.

Import models from this module to ensure they're registered with SQLAlchemy.
"""

from gspro.models.base import Base, TimestampMixin, UUIDMixin, ModelMixin
from gspro.models.user import User
from gspro.models.product import Product
from gspro.models.client import Client
from gspro.models.sale import Sale, SaleItem
from gspro.models.transaction import Transaction
from gspro.models.registry import RegistryEntry

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    "ModelMixin",
    # Models
    "User",
    "Product",
    "Client",
    "Sale",
    "SaleItem",
    "Transaction",
    "RegistryEntry",
]
