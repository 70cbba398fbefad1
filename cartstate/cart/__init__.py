"""Cart package: state models, actions, and the reducer."""
from .actions import (
    CartAction,
    CartAdd,
    CartEmpty,
    CartRemove,
    CartSetCurrency,
    CartUpdate,
    UnknownAction,
    parse_action,
)
from .constants import ActionType, DEFAULT_CURRENCY
from .models import CartLineItem, CartState, ProductInfo, initial_state
from .reducer import compute_summary, compute_total, product_key, reduce

__all__ = [
    "ActionType",
    "CartAction",
    "CartAdd",
    "CartEmpty",
    "CartLineItem",
    "CartRemove",
    "CartSetCurrency",
    "CartState",
    "CartUpdate",
    "DEFAULT_CURRENCY",
    "ProductInfo",
    "UnknownAction",
    "compute_summary",
    "compute_total",
    "initial_state",
    "parse_action",
    "product_key",
    "reduce",
]
