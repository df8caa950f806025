from decimal import Decimal
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from catalog_server.models.product import Product


class ProductStore:
    """Persistence gateway over the ``products`` table.

    Every write is committed before the method returns. Database errors are
    left to propagate to the caller.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all(self, name_filter: Optional[str] = None) -> List[Product]:
        """Return all products, or those whose name contains ``name_filter``."""
        query = select(Product)
        if name_filter:
            query = query.where(Product.name.contains(name_filter, autoescape=True))

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def find_by_id(self, product_id: int) -> Optional[Product]:
        result = await self.session.execute(
            select(Product).where(Product.id == product_id)
        )
        return result.scalar_one_or_none()

    async def insert(self, product: Product) -> Product:
        """Persist a new product and return it with its assigned id."""
        self.session.add(product)
        await self.session.commit()
        await self.session.refresh(product)
        return product

    async def update(
        self,
        product_id: int,
        name: str,
        description: str,
        price: Decimal
    ) -> Optional[Product]:
        """Overwrite the mutable fields of a product. Returns None if missing."""
        product = await self.find_by_id(product_id)
        if not product:
            return None

        product.name = name
        product.description = description
        product.price = price

        await self.session.commit()
        await self.session.refresh(product)
        return product

    async def delete(self, product_id: int) -> bool:
        product = await self.find_by_id(product_id)
        if not product:
            return False

        await self.session.delete(product)
        await self.session.commit()
        return True
