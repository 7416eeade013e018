"""
Domain exceptions raised by repositories and services.

Routers translate these into HTTP responses; services never import FastAPI.
"""


class DomainError(Exception):
    """Base class for business rule violations."""


class NotFoundError(DomainError):
    """A referenced record does not exist."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: {entity_id}")


class ConflictError(DomainError):
    """The write would violate a uniqueness or state rule."""


class CheckoutError(DomainError):
    """The cart cannot be turned into a sale as submitted."""


class InsufficientStockError(ConflictError):
    """A sale or adjustment would take product stock below zero."""

    def __init__(self, product_id: str, product_name: str, available: float, requested: float):
        self.product_id = product_id
        self.product_name = product_name
        self.available = available
        self.requested = requested
        super().__init__(
            f"Estoque insuficiente para {product_name}: "
            f"disponível {available:g}, solicitado {requested:g}"
        )
