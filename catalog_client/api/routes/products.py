from fastapi import APIRouter, Depends, Request, Response
from typing import List, Optional
from catalog_client.api.adapter import ProductsAdapter
from catalog_client.schemas.product import Product, ProductInput

router = APIRouter(prefix="/products", tags=["products"])

NOT_FOUND = {404: {"description": "Product not found"}}
FAILURE = {500: {"description": "Catalog backend failure"}}


def get_products_adapter(request: Request) -> ProductsAdapter:
    return request.app.state.products_adapter


@router.get("", response_model=List[Product], responses=FAILURE)
async def list_products(
    search: Optional[str] = None,
    adapter: ProductsAdapter = Depends(get_products_adapter)
) -> Response:
    """List products, optionally filtered by a name substring."""
    return await adapter.list_products(search)


@router.get("/{product_id}", response_model=Product, responses={**NOT_FOUND, **FAILURE})
async def get_product(
    product_id: int,
    adapter: ProductsAdapter = Depends(get_products_adapter)
) -> Response:
    """Get a single product by ID."""
    return await adapter.get_product(product_id)


@router.post(
    "",
    response_model=Product,
    status_code=201,
    responses={400: {"description": "Product was not created"}, **FAILURE}
)
async def create_product(
    product_input: ProductInput,
    request: Request,
    adapter: ProductsAdapter = Depends(get_products_adapter)
) -> Response:
    """Create a new product."""
    return await adapter.create_product(
        product_input,
        lambda product_id: request.url_for("get_product", product_id=product_id)
    )


@router.put("/{product_id}", response_model=Product, responses={**NOT_FOUND, **FAILURE})
async def update_product(
    product_id: int,
    product_input: ProductInput,
    adapter: ProductsAdapter = Depends(get_products_adapter)
) -> Response:
    """Replace a product's name, description and price."""
    return await adapter.update_product(product_id, product_input)


@router.delete("/{product_id}", response_model=bool, responses={**NOT_FOUND, **FAILURE})
async def delete_product(
    product_id: int,
    adapter: ProductsAdapter = Depends(get_products_adapter)
) -> Response:
    """Delete a product."""
    return await adapter.delete_product(product_id)
