"""Cart state models with Decimal-based pricing."""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cartstate.money import to_decimal, format_money
from .constants import DEFAULT_CURRENCY

# A price that could not be read is kept as NaN
Price = Annotated[Decimal, Field(allow_inf_nan=True)]


class ProductInfo(BaseModel):
    """Product metadata embedded in a line item. Unknown fields are kept."""
    model_config = ConfigDict(frozen=True, extra="allow")

    name: str = ""
    prices: Dict[str, Price] = {}

    @field_validator("prices", mode="before")
    @classmethod
    def convert_prices(cls, v):
        if v is None:
            return {}
        return {currency: to_decimal(price) for currency, price in dict(v).items()}

    def price_in(self, currency: str) -> Optional[Decimal]:
        return self.prices.get(currency)


@dataclass(frozen=True)
class CartLineItem:
    """One product configuration in the cart."""
    id: Any = None
    quantity: int = 0
    properties: Dict[str, Any] = field(default_factory=dict)
    product_info: Optional[ProductInfo] = None

    def to_dict(self) -> dict:
        """Convert to the camelCase shape persisted by the store."""
        return {
            "id": self.id,
            "quantity": self.quantity,
            "properties": dict(self.properties),
            "productInfo": (
                self.product_info.model_dump(mode="json")
                if self.product_info is not None
                else None
            ),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartLineItem":
        """Create from dictionary."""
        info = data.get("productInfo", data.get("product_info"))
        return cls(
            id=data.get("id"),
            quantity=data.get("quantity", 0),
            properties=dict(data.get("properties") or {}),
            product_info=ProductInfo.model_validate(info) if info is not None else None,
        )


@dataclass(frozen=True)
class CartState:
    """
    Cart contents plus two derived views over them.

    `total` and `summary` are computed from `products` by the reducer.
    Instances are never mutated; each transition builds a new one.
    """
    total: Decimal = Decimal("0")
    summary: str = ""
    products: Dict[str, CartLineItem] = field(default_factory=dict)
    currency: str = DEFAULT_CURRENCY

    @property
    def is_empty(self) -> bool:
        return not self.products

    @property
    def total_items(self) -> int:
        """Total number of units across all lines."""
        return sum(item.quantity for item in self.products.values())

    @property
    def display_total(self) -> str:
        return format_money(self.total, self.currency)

    def to_dict(self) -> dict:
        """Convert to dictionary for the surrounding store."""
        return {
            "total": str(self.total),
            "summary": self.summary,
            "products": {key: item.to_dict() for key, item in self.products.items()},
            "currency": self.currency,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartState":
        """Create from dictionary."""
        products = data.get("products") or {}
        return cls(
            total=to_decimal(data.get("total", 0)),
            summary=data.get("summary", ""),
            products={key: CartLineItem.from_dict(item) for key, item in products.items()},
            currency=data.get("currency") or DEFAULT_CURRENCY,
        )


def initial_state() -> CartState:
    """Empty cart in the default currency."""
    return CartState()
