"""
Registry repository for the ``cadastros`` table.
"""

from typing import Optional

from sqlalchemy import func, or_, select

from gspro.core.errors import NotFoundError
from gspro.models.registry import RegistryEntry
from gspro.repositories.base import BaseRepository


class RegistryRepository(BaseRepository[RegistryEntry]):
    """Data access for categories, locations, carriers, sellers and suppliers."""

    model = RegistryEntry
    entity_name = "Registry entry"

    async def get_of_kind(self, kind: str, entry_id: str) -> RegistryEntry:
        """
        Fetch an entry, checking it belongs to ``kind``.

        Raises:
            NotFoundError: If missing or registered under another kind
        """
        entry = await self.get(entry_id)
        if entry is None or entry.kind != kind:
            raise NotFoundError(self.entity_name, entry_id)
        return entry

    async def list_entries(self, kind: str, search: Optional[str] = None) -> list[RegistryEntry]:
        stmt = select(RegistryEntry).where(RegistryEntry.kind == kind)
        if search:
            pattern = f"%{search.strip().lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(RegistryEntry.name).like(pattern),
                    func.lower(func.coalesce(RegistryEntry.document, "")).like(pattern),
                )
            )
        stmt = stmt.order_by(RegistryEntry.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
