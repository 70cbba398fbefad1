"""Cart action tags and defaults."""
from enum import Enum
from typing import Dict


class ActionType(str, Enum):
    """
    Action kinds understood by the cart reducer.

    The value is the tag a store dispatches in the action's "type" field.
    """
    CART_ADD = "CART_ADD"
    CART_REMOVE = "CART_REMOVE"
    CART_UPDATE = "CART_UPDATE"
    CART_SET_CURRENCY = "CART_SET_CURRENCY"
    CART_EMPTY = "CART_EMPTY"


DEFAULT_CURRENCY = "£"

# Line item fields a CART_UPDATE may overwrite, keyed by accepted spelling
UPDATABLE_FIELDS: Dict[str, str] = {
    "id": "id",
    "quantity": "quantity",
    "properties": "properties",
    "product_info": "product_info",
    "productInfo": "product_info",
}
