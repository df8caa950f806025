from catalog_client.services.products_service import ProductsService

__all__ = ["ProductsService"]
