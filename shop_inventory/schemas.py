from typing import Annotated
from pydantic import BaseModel, Field, StringConstraints, TypeAdapter, field_validator

from . import settings
from .products import Product, is_valid_product

# Field types shared by the Item model and the one-field-at-a-time prompts.
ModelCode = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=settings.MAX_MODEL_NAME),
]
Price = Annotated[float, Field(ge=0, allow_inf_nan=False)]
Quantity = int

MODEL_CODE_ADAPTER = TypeAdapter(ModelCode)
PRICE_ADAPTER = TypeAdapter(Price)
QUANTITY_ADAPTER = TypeAdapter(Quantity)


class Item(BaseModel):
    """
    One stocked record. The aliases double as the column headers of the
    inventory table.
    """

    product: Product = Field(..., alias="Product")
    name: ModelCode = Field(..., alias="Model Code")
    price: Price = Field(..., alias=f"Price ({settings.CURRENCY})")
    nstock: Quantity = Field(default=0, alias="Qty.")

    class Config:
        # Lets the UI build items by field name while tables use the aliases.
        populate_by_name = True

    @field_validator("product")
    @classmethod
    def product_must_be_stocked(cls, value: Product) -> Product:
        if not is_valid_product(value):
            raise ValueError(f"{value!r} is not a stocked product category")
        return value
