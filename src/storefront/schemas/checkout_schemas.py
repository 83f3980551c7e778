from typing import List

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from storefront.config import DEFAULT_ITEM_NAME


class CartItem(BaseModel):
    name: str = Field(default=DEFAULT_ITEM_NAME, description="Product name shown on the payment page")
    price: StrictInt = Field(..., ge=0, description="Unit price in minor currency units (e.g. cents)")
    quantity: StrictInt = Field(default=1, gt=0, description="Number of units")

    @field_validator("name", mode="before")
    @classmethod
    def default_blank_name(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_ITEM_NAME
        return value

    @field_validator("quantity", mode="before")
    @classmethod
    def default_missing_quantity(cls, value):
        return 1 if value is None else value


class CheckoutSessionRequest(BaseModel):
    items: List[CartItem] = Field(
        default_factory=list, validate_default=True, description="Cart contents, in display order"
    )

    @field_validator("items")
    @classmethod
    def require_items(cls, value: List[CartItem]) -> List[CartItem]:
        if not value:
            raise ValueError("No items received")
        return value


class CheckoutSessionResponse(BaseModel):
    id: str = Field(..., description="Stripe Checkout Session id")


class PublishableKeyConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    publishable_key: str = Field(..., alias="publishableKey")


class ErrorResponse(BaseModel):
    error: str
