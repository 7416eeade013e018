"""
Client repository for the ``clientes`` table.
"""

from typing import Optional

from sqlalchemy import func, or_, select

from gspro.core.errors import ConflictError
from gspro.models.client import Client
from gspro.repositories.base import BaseRepository


class ClientRepository(BaseRepository[Client]):
    """Data access for the customer registry."""

    model = Client
    entity_name = "Client"

    async def document_exists(self, document: str, exclude_id: Optional[str] = None) -> bool:
        stmt = select(Client.id).where(Client.document == document)
        if exclude_id is not None:
            stmt = stmt.where(Client.id != exclude_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def create_client(self, **fields) -> Client:
        """
        Create a client.

        Raises:
            ConflictError: If another client already has the same CPF/CNPJ
        """
        document = fields.get("document")
        if document and await self.document_exists(document):
            raise ConflictError(f"Documento já cadastrado: {document}")
        return await self.add(Client(**fields))

    async def update_client(self, client: Client, changes: dict) -> Client:
        document = changes.get("document")
        if document and await self.document_exists(document, exclude_id=client.id):
            raise ConflictError(f"Documento já cadastrado: {document}")
        return await self.update(client, changes)

    async def list_clients(self, search: Optional[str] = None) -> list[Client]:
        """List clients by name, optionally filtered by name, document or e-mail."""
        stmt = select(Client)
        if search:
            pattern = f"%{search.strip().lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(Client.name).like(pattern),
                    func.lower(func.coalesce(Client.document, "")).like(pattern),
                    func.lower(func.coalesce(Client.email, "")).like(pattern),
                )
            )
        stmt = stmt.order_by(Client.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
