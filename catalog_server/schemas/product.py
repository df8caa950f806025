from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional


class ProductInput(BaseModel):
    """Mutation payload shared by create and update.

    Update is a full replace: a missing description resets it to empty.
    """
    name: str = Field(..., description="Product name")
    description: Optional[str] = Field(None, description="Product description")
    price: Decimal = Field(..., description="Product price")
