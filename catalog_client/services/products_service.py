from typing import Any, Dict, List, Optional
import httpx
from catalog_client.exceptions import QueryLayerError
from catalog_client.schemas.product import Product, ProductInput

PRODUCT_FIELDS = "id name description price createdAt"

GET_PRODUCTS = """
query GetProducts($search: String) {
  products(search: $search) { %s }
}
""" % PRODUCT_FIELDS

GET_PRODUCT = """
query GetProduct($id: Int!) {
  product(id: $id) { %s }
}
""" % PRODUCT_FIELDS

CREATE_PRODUCT = """
mutation CreateProduct($product: ProductInput!) {
  createProduct(product: $product) { %s }
}
""" % PRODUCT_FIELDS

UPDATE_PRODUCT = """
mutation UpdateProduct($id: Int!, $product: ProductInput!) {
  updateProduct(id: $id, product: $product) { %s }
}
""" % PRODUCT_FIELDS

DELETE_PRODUCT = """
mutation DeleteProduct($id: Int!) {
  deleteProduct(id: $id)
}
"""


def _input_variables(product_input: ProductInput) -> Dict[str, Any]:
    # Decimal goes over the wire as a string to keep its exact value
    return {
        "name": product_input.name,
        "description": product_input.description,
        "price": str(product_input.price),
    }


class ProductsService:
    """GraphQL client for the catalog backend.

    Absent products come back as None and a failed delete as False. Anything
    else that goes wrong raises QueryLayerError or an httpx error.
    """

    def __init__(self, client: httpx.AsyncClient, endpoint: str):
        self.client = client
        self.endpoint = endpoint

    async def _execute(
        self,
        operation: str,
        query: str,
        variables: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Send one GraphQL document and return its ``data`` object."""
        response = await self.client.post(
            self.endpoint,
            json={"query": query, "variables": variables},
            headers={"Content-Type": "application/json"}
        )
        if not response.is_success:
            raise QueryLayerError(operation, f"Backend returned HTTP {response.status_code}")

        body = response.json()
        errors = body.get("errors")
        if errors:
            raise QueryLayerError(
                operation,
                "Backend reported errors",
                [e.get("message", str(e)) for e in errors]
            )

        data = body.get("data")
        if data is None:
            raise QueryLayerError(operation, "No data returned from GraphQL query")
        return data

    async def get_all_products(self, search: Optional[str] = None) -> List[Product]:
        data = await self._execute("products", GET_PRODUCTS, {"search": search})
        return [Product.model_validate(p) for p in data.get("products") or []]

    async def get_product(self, product_id: int) -> Optional[Product]:
        data = await self._execute("product", GET_PRODUCT, {"id": product_id})
        product = data.get("product")
        return Product.model_validate(product) if product else None

    async def create_product(self, product_input: ProductInput) -> Optional[Product]:
        data = await self._execute(
            "createProduct",
            CREATE_PRODUCT,
            {"product": _input_variables(product_input)}
        )
        product = data.get("createProduct")
        return Product.model_validate(product) if product else None

    async def update_product(
        self,
        product_id: int,
        product_input: ProductInput
    ) -> Optional[Product]:
        data = await self._execute(
            "updateProduct",
            UPDATE_PRODUCT,
            {"id": product_id, "product": _input_variables(product_input)}
        )
        product = data.get("updateProduct")
        return Product.model_validate(product) if product else None

    async def delete_product(self, product_id: int) -> bool:
        data = await self._execute("deleteProduct", DELETE_PRODUCT, {"id": product_id})
        return data.get("deleteProduct") is True
