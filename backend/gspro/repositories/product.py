"""
Product repository for the ``produtos`` table.
"""

from typing import Iterable, Optional

from sqlalchemy import func, or_, select

from gspro.core.errors import ConflictError
from gspro.models.product import Product
from gspro.models.sale import SaleItem
from gspro.repositories.base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """
    Data access for inventory items.

    Handles SKU uniqueness checks before insert/update so callers get a
    readable conflict instead of an IntegrityError.
    """

    model = Product
    entity_name = "Product"

    async def sku_exists(self, sku: str, exclude_id: Optional[str] = None) -> bool:
        stmt = select(Product.id).where(Product.sku == sku)
        if exclude_id is not None:
            stmt = stmt.where(Product.id != exclude_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def create_product(self, **fields) -> Product:
        """
        Create a product.

        Raises:
            ConflictError: If the SKU is already used by another product
        """
        sku = fields.get("sku")
        if sku and await self.sku_exists(sku):
            raise ConflictError(f"SKU já cadastrado: {sku}")
        return await self.add(Product(**fields))

    async def update_product(self, product: Product, changes: dict) -> Product:
        sku = changes.get("sku")
        if sku and await self.sku_exists(sku, exclude_id=product.id):
            raise ConflictError(f"SKU já cadastrado: {sku}")
        return await self.update(product, changes)

    async def list_products(
        self,
        search: Optional[str] = None,
        kind: Optional[str] = None,
    ) -> list[Product]:
        """
        List products ordered by name.

        Args:
            search: Case-insensitive substring matched against name and SKU
            kind: Restrict to ``sucata`` or ``peca``
        """
        stmt = select(Product)
        if search:
            pattern = f"%{search.strip().lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(Product.name).like(pattern),
                    func.lower(func.coalesce(Product.sku, "")).like(pattern),
                )
            )
        if kind:
            stmt = stmt.where(Product.kind == kind)
        stmt = stmt.order_by(Product.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def has_sales(self, product_id: str) -> bool:
        stmt = select(SaleItem.id).where(SaleItem.product_id == product_id).limit(1)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def get_many(self, product_ids: Iterable[str]) -> dict[str, Product]:
        """Fetch several products at once, keyed by ID."""
        ids = list(set(product_ids))
        if not ids:
            return {}
        result = await self.session.execute(select(Product).where(Product.id.in_(ids)))
        return {product.id: product for product in result.scalars().all()}
