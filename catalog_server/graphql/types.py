from datetime import datetime
from decimal import Decimal
from typing import Optional
import strawberry
from catalog_server.models.product import Product
from catalog_server.schemas.product import ProductInput


@strawberry.type(name="Product")
class ProductType:
    id: int
    name: str
    description: str
    price: Decimal
    created_at: datetime

    @classmethod
    def from_model(cls, product: Product) -> "ProductType":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description or "",
            price=product.price,
            created_at=product.created_at,
        )


@strawberry.input(name="ProductInput")
class ProductInputType:
    name: str
    price: Decimal
    description: Optional[str] = None

    def to_input(self) -> ProductInput:
        return ProductInput(
            name=self.name,
            description=self.description,
            price=self.price,
        )
