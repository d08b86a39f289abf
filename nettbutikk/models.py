"""Shop Models - Pydantic models for catalog products and the session user."""
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

from nettbutikk.money import to_decimal


class Product(BaseModel):
    """Catalog product. Immutable once decoded."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: StrictInt
    title: StrictStr
    description: StrictStr
    price: Decimal = Field(ge=0)

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        # bool is an int subclass; "price": true is not a price
        if isinstance(v, bool) or not isinstance(v, (int, float, Decimal)):
            raise ValueError("price must be a number")
        return to_decimal(v)


class User(BaseModel):
    """Logged-in user. No verification is ever performed on the credentials."""
    model_config = ConfigDict(frozen=True)

    username: str
    password: str = Field(repr=False)
