from catalog_client.schemas.product import Product, ProductInput

__all__ = ["Product", "ProductInput"]
