import logging
from typing import Optional
from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter
from catalog_server.config import Settings, settings as default_settings
from catalog_server.database import create_engine, create_sessionmaker, init_models
from catalog_server.graphql.context import get_context
from catalog_server.graphql.schema import schema
from catalog_server.services.product_service import ProductRules

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the catalog backend: a GraphQL endpoint over the products table."""
    settings = settings or default_settings
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(
        title="Product Catalog Server",
        description="GraphQL query layer over the product catalog",
        version="1.0.0",
        debug=settings.debug
    )

    engine = create_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.sessionmaker = create_sessionmaker(engine)
    app.state.product_rules = ProductRules.from_settings(settings)

    graphql_app = GraphQLRouter(schema, context_getter=get_context)
    app.include_router(graphql_app, prefix="/graphql")

    @app.get("/")
    async def root():
        return {"message": "Product Catalog Server", "graphql": "/graphql"}

    @app.on_event("startup")
    async def startup():
        """Ensure the products table exists."""
        if settings.create_schema_on_startup:
            await init_models(engine)
            logger.info("Database schema ready")

    @app.on_event("shutdown")
    async def shutdown():
        await engine.dispose()

    return app
