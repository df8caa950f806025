from typing import List, Optional
import strawberry
from strawberry.types import Info
from catalog_server.graphql.types import ProductInputType, ProductType
from catalog_server.services.product_service import ProductService


def _service(info: Info) -> ProductService:
    return info.context["product_service"]


@strawberry.type
class Query:
    @strawberry.field(description="List products, optionally filtered by name")
    async def products(self, info: Info, search: Optional[str] = None) -> List[ProductType]:
        products = await _service(info).list_products(search)
        return [ProductType.from_model(p) for p in products]

    @strawberry.field(description="Get a product by ID")
    async def product(self, info: Info, id: int) -> Optional[ProductType]:
        product = await _service(info).get_product(id)
        return ProductType.from_model(product) if product else None


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_product(self, info: Info, product: ProductInputType) -> Optional[ProductType]:
        created = await _service(info).create_product(product.to_input())
        return ProductType.from_model(created) if created else None

    @strawberry.mutation
    async def update_product(
        self,
        info: Info,
        id: int,
        product: ProductInputType
    ) -> Optional[ProductType]:
        """Replace a product's fields. Resolves to null when the ID does not exist."""
        updated = await _service(info).update_product(id, product.to_input())
        return ProductType.from_model(updated) if updated else None

    @strawberry.mutation
    async def delete_product(self, info: Info, id: int) -> bool:
        return await _service(info).delete_product(id)


schema = strawberry.Schema(query=Query, mutation=Mutation)
