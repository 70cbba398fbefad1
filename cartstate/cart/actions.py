"""
Cart Actions

One pydantic model per action kind. Each carries only the fields its
transition reads; `type` is the discriminator. Payload keys are accepted
in the camelCase spelling a store dispatches (`productInfo`,
`updateProps`) or in snake_case.
"""
from typing import Any, Annotated, Dict, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .constants import ActionType
from .models import ProductInfo


class _Action(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class CartAdd(_Action):
    """Add `quantity` units of a product configuration."""
    type: Literal["CART_ADD"] = ActionType.CART_ADD.value
    id: Any = None
    key: Optional[str] = None
    quantity: int
    properties: Dict[str, Any] = {}
    product_info: Optional[ProductInfo] = Field(default=None, alias="productInfo")
    currency: Optional[str] = None


class CartRemove(_Action):
    """Drop a line item."""
    type: Literal["CART_REMOVE"] = ActionType.CART_REMOVE.value
    id: Any = None
    key: Optional[str] = None
    properties: Dict[str, Any] = {}
    currency: Optional[str] = None


class CartUpdate(_Action):
    """Overwrite fields of a line item with `update_props`."""
    type: Literal["CART_UPDATE"] = ActionType.CART_UPDATE.value
    id: Any = None
    key: Optional[str] = None
    properties: Dict[str, Any] = {}
    update_props: Dict[str, Any] = Field(default_factory=dict, alias="updateProps")
    currency: Optional[str] = None


class CartSetCurrency(_Action):
    type: Literal["CART_SET_CURRENCY"] = ActionType.CART_SET_CURRENCY.value
    currency: Optional[str] = None


class CartEmpty(_Action):
    type: Literal["CART_EMPTY"] = ActionType.CART_EMPTY.value


class UnknownAction(_Action):
    """Any action addressed to another reducer. Passed through untouched."""
    model_config = ConfigDict(frozen=True, extra="allow")

    type: Any = None


CartAction = Union[CartAdd, CartRemove, CartUpdate, CartSetCurrency, CartEmpty]

_cart_action_adapter = TypeAdapter(
    Annotated[CartAction, Field(discriminator="type")]
)

_KNOWN_TYPES = frozenset(t.value for t in ActionType)


def parse_action(data: Mapping[str, Any]) -> Union[CartAction, UnknownAction]:
    """
    Build an action model from a plain dict.

    Unknown `type` values yield UnknownAction. Known types with a malformed
    payload raise pydantic.ValidationError.
    """
    action_type = data.get("type")
    if isinstance(action_type, ActionType):
        action_type = action_type.value
    if not isinstance(action_type, str) or action_type not in _KNOWN_TYPES:
        return UnknownAction.model_validate(dict(data))
    return _cart_action_adapter.validate_python({**data, "type": action_type})


__all__ = [
    "CartAction",
    "CartAdd",
    "CartEmpty",
    "CartRemove",
    "CartSetCurrency",
    "CartUpdate",
    "UnknownAction",
    "parse_action",
]
