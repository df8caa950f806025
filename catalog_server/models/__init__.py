from catalog_server.models.product import Product

__all__ = ["Product"]
