from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, List, Optional
from catalog_server.config import Settings
from catalog_server.exceptions import ProductValidationError
from catalog_server.models.product import Product
from catalog_server.schemas.product import ProductInput
from catalog_server.services.product_store import ProductStore


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ProductRules:
    """Optional checks applied to product input. All off by default."""
    enforce_non_negative_price: bool = False
    reject_blank_name: bool = False
    max_name_length: Optional[int] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProductRules":
        return cls(
            enforce_non_negative_price=settings.enforce_non_negative_price,
            reject_blank_name=settings.reject_blank_name,
            max_name_length=settings.max_name_length,
        )

    def check(self, product_input: ProductInput) -> None:
        """Raise ProductValidationError for the first rule the input breaks."""
        if self.reject_blank_name and not product_input.name.strip():
            raise ProductValidationError("Product name must not be blank", "name")
        if self.max_name_length is not None and len(product_input.name) > self.max_name_length:
            raise ProductValidationError(
                f"Product name must be at most {self.max_name_length} characters", "name"
            )
        if self.enforce_non_negative_price and product_input.price < 0:
            raise ProductValidationError("Product price must not be negative", "price")


class ProductService:
    """Business operations over products, backed by a ProductStore.

    Storage errors are not caught here.
    """

    def __init__(
        self,
        store: ProductStore,
        rules: Optional[ProductRules] = None,
        clock: Callable[[], datetime] = utc_now
    ):
        self.store = store
        self.rules = rules or ProductRules()
        self.clock = clock

    async def list_products(self, search: Optional[str] = None) -> List[Product]:
        """List products, optionally filtered by a name substring."""
        return await self.store.find_all(search)

    async def get_product(self, product_id: int) -> Optional[Product]:
        return await self.store.find_by_id(product_id)

    async def create_product(self, product_input: ProductInput) -> Optional[Product]:
        """Create a product. Returns None when the input is rejected by a rule."""
        try:
            self.rules.check(product_input)
        except ProductValidationError:
            return None

        product = Product(
            name=product_input.name,
            description=product_input.description or "",
            price=product_input.price,
            created_at=self.clock(),
        )
        return await self.store.insert(product)

    async def update_product(
        self,
        product_id: int,
        product_input: ProductInput
    ) -> Optional[Product]:
        """Replace name, description and price. Returns None if the product is missing."""
        if await self.store.find_by_id(product_id) is None:
            return None

        self.rules.check(product_input)
        return await self.store.update(
            product_id,
            name=product_input.name,
            description=product_input.description or "",
            price=product_input.price,
        )

    async def delete_product(self, product_id: int) -> bool:
        return await self.store.delete(product_id)
