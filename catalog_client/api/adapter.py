import logging
from typing import Any, Callable, Optional
from fastapi import Response, status
from fastapi.responses import JSONResponse
from catalog_client.schemas.product import Product, ProductInput
from catalog_client.services.products_service import ProductsService

logger = logging.getLogger(__name__)


def _dump(product: Product) -> dict:
    return product.model_dump(mode="json", by_alias=True)


def _message(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


def _not_found(product_id: int) -> JSONResponse:
    logger.info("Product %s not found", product_id)
    return _message(status.HTTP_404_NOT_FOUND, f"Product with ID {product_id} not found")


def _failure(detail: str) -> JSONResponse:
    return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, detail)


class ProductsAdapter:
    """Turns catalog backend results into HTTP responses.

    Each operation has three outcomes: a value (2xx), an absent product
    (404, or 400 for create) and an exception (500). This is the only place
    backend faults are caught and logged; callers only ever see a static
    message.
    """

    def __init__(self, service: ProductsService):
        self.service = service

    async def list_products(self, search: Optional[str] = None) -> Response:
        try:
            products = await self.service.get_all_products(search)
        except Exception:
            logger.exception("Error retrieving products (search=%r)", search)
            return _failure("An error occurred while retrieving products")
        return JSONResponse([_dump(p) for p in products])

    async def get_product(self, product_id: int) -> Response:
        try:
            product = await self.service.get_product(product_id)
        except Exception:
            logger.exception("Error retrieving product with ID %s", product_id)
            return _failure("An error occurred while retrieving the product")
        if product is None:
            return _not_found(product_id)
        return JSONResponse(_dump(product))

    async def create_product(
        self,
        product_input: ProductInput,
        location_for: Callable[[int], Any]
    ) -> Response:
        """Create a product; ``location_for`` maps the new id to its URL."""
        try:
            product = await self.service.create_product(product_input)
        except Exception:
            logger.exception("Error creating product: %s", product_input.model_dump())
            return _failure("An error occurred while creating the product")
        # The backend ran but produced nothing: the input was not acceptable
        if product is None:
            logger.warning("Backend declined to create product: %s", product_input.model_dump())
            return _message(status.HTTP_400_BAD_REQUEST, "Failed to create product")
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content=_dump(product),
            headers={"Location": str(location_for(product.id))}
        )

    async def update_product(self, product_id: int, product_input: ProductInput) -> Response:
        try:
            product = await self.service.update_product(product_id, product_input)
        except Exception:
            logger.exception(
                "Error updating product with ID %s: %s", product_id, product_input.model_dump()
            )
            return _failure("An error occurred while updating the product")
        if product is None:
            return _not_found(product_id)
        return JSONResponse(_dump(product))

    async def delete_product(self, product_id: int) -> Response:
        try:
            deleted = await self.service.delete_product(product_id)
        except Exception:
            logger.exception("Error deleting product with ID %s", product_id)
            return _failure("An error occurred while deleting the product")
        if not deleted:
            return _not_found(product_id)
        return JSONResponse(True)
