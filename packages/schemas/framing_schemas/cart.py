"""Cart line item schema."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CartItem(BaseModel):
    """A product/size line in the shopping cart. Prices are in cents."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    product_id: str = Field(min_length=1)
    name: str
    size: str
    price: int = Field(ge=0)
    quantity: int = Field(ge=1)
    image: str | None = None

    @property
    def line_total(self) -> int:
        return self.price * self.quantity
