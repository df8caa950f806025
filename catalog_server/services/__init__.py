from catalog_server.services.product_store import ProductStore
from catalog_server.services.product_service import ProductRules, ProductService

__all__ = ["ProductStore", "ProductRules", "ProductService"]
