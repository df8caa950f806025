from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from typing import Annotated, Optional

# Prices travel as JSON numbers, not strings
Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class ProductInput(BaseModel):
    name: str = Field(..., description="Product name")
    description: Optional[str] = Field(None, description="Product description")
    price: Price = Field(..., description="Product price")


class Product(BaseModel):
    id: int
    name: str
    description: str = ""
    price: Price
    created_at: datetime = Field(..., alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)
