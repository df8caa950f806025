from catalog_server.schemas.product import ProductInput

__all__ = ["ProductInput"]
