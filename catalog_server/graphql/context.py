from typing import AsyncIterator
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from catalog_server.services.product_service import ProductService
from catalog_server.services.product_store import ProductStore


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Open a session for the duration of one GraphQL request."""
    async with request.app.state.sessionmaker() as session:
        yield session


async def get_context(
    request: Request,
    db: AsyncSession = Depends(get_db)
) -> dict:
    service = ProductService(ProductStore(db), request.app.state.product_rules)
    return {"product_service": service}
