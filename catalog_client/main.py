import logging
from typing import Optional
import httpx
from fastapi import FastAPI
from catalog_client.api.adapter import ProductsAdapter
from catalog_client.api.routes import products
from catalog_client.config import Settings, settings as default_settings
from catalog_client.services.products_service import ProductsService


def create_app(
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.AsyncClient] = None
) -> FastAPI:
    """Build the REST frontend that forwards to the catalog GraphQL backend."""
    settings = settings or default_settings
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(
        title="Product Catalog API",
        description="REST API over the product catalog backend",
        version="1.0.0",
        debug=settings.debug
    )

    client = http_client or httpx.AsyncClient(timeout=settings.request_timeout)
    service = ProductsService(client, settings.graphql_endpoint)
    app.state.settings = settings
    app.state.http_client = client
    app.state.products_adapter = ProductsAdapter(service)

    app.include_router(products.router)

    @app.get("/")
    async def root():
        return {"message": "Product Catalog API", "docs": "/docs"}

    @app.on_event("shutdown")
    async def shutdown():
        """Close the connection pool to the backend."""
        await client.aclose()

    return app
