"""
Sale repository for ``vendas`` and ``itens_venda``.
"""

from datetime import datetime
from typing import Iterable, Optional

from sqlalchemy import select

from gspro.models.sale import Sale, SaleItem
from gspro.repositories.base import BaseRepository


class SaleRepository(BaseRepository[Sale]):
    """
    Data access for sales.

    Sale relationships (client, seller, items, item products) are loaded
    with ``selectin`` so results are safe to serialize outside the session.
    """

    model = Sale
    entity_name = "Sale"

    async def add_items(self, sale: Sale, items: Iterable[SaleItem]) -> list[SaleItem]:
        """Bulk-insert the line items of an already flushed sale."""
        items = list(items)
        sale.items.extend(items)
        self.session.add_all(items)
        await self.session.flush()
        return items

    async def list_sales(
        self,
        status: Optional[str] = None,
        since: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> list[Sale]:
        """List sales, newest first."""
        stmt = select(Sale)
        if status:
            stmt = stmt.where(Sale.status == status)
        if since is not None:
            stmt = stmt.where(Sale.sold_at >= since)
        stmt = stmt.order_by(Sale.sold_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def sold_product_ids(self, since: datetime) -> set[str]:
        """IDs of products present in completed sales since ``since``."""
        stmt = (
            select(SaleItem.product_id)
            .join(Sale, Sale.id == SaleItem.sale_id)
            .where(Sale.status == "concluida", Sale.sold_at >= since)
            .distinct()
        )
        result = await self.session.execute(stmt)
        return set(result.scalars().all())
