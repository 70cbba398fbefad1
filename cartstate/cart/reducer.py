"""
Cart Reducer

Pure transition function `(state, action) -> state` for the shopping cart.

`total` and `summary` are two derived views over `products`. Every
transition recomputes `total`; `summary` is rebuilt by CART_ADD and
CART_REMOVE only. CART_UPDATE carries the previous summary forward
verbatim, and CART_SET_CURRENCY leaves it alone because currency does not
appear in it.

Nothing here raises. A line whose price cannot be resolved contributes
NaN, which contaminates `total` and is reported through the log.
"""
from dataclasses import replace
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from cartstate.errors import (
    ERROR_INVALID_UPDATE_VALUE,
    ERROR_MALFORMED_ACTION,
    ERROR_PRICE_NOT_FOUND,
    ERROR_PRODUCT_INFO_MISSING,
    ERROR_UNKNOWN_ACTION,
    ERROR_UNKNOWN_UPDATE_FIELD,
)
from cartstate.logging import get_logger, sanitize_key_for_logging, sanitize_string_for_logging
from cartstate.money import MISSING_PRICE, multiply
from .actions import CartAdd, CartEmpty, CartRemove, CartSetCurrency, CartUpdate, parse_action
from .constants import UPDATABLE_FIELDS
from .models import CartLineItem, CartState, ProductInfo, initial_state

logger = get_logger(__name__)

Products = Dict[str, CartLineItem]


def product_key(id: Any, key: Optional[str] = None, properties: Optional[Mapping[str, Any]] = None) -> str:
    """
    Identity of a cart line.

    An explicit key wins. Otherwise the product id followed by the property
    values in insertion order, joined with "_":

        product_key("a1")                    -> "a1"
        product_key("a1", None, {"size": "XS"}) -> "a1_XS"
    """
    if key:
        return key
    base = "" if id is None else str(id)
    values = ["" if value is None else str(value) for value in (properties or {}).values()]
    if values:
        return "_".join([base, *values])
    return base


def _line_total(key: str, item: CartLineItem, currency: str) -> Decimal:
    if item.product_info is None:
        logger.warning("%s: %s", ERROR_PRODUCT_INFO_MISSING, sanitize_key_for_logging(key))
        return MISSING_PRICE

    price = item.product_info.price_in(currency)
    if price is None:
        logger.warning(
            "%s %s: %s",
            ERROR_PRICE_NOT_FOUND,
            sanitize_string_for_logging(currency),
            sanitize_key_for_logging(key),
        )
        return MISSING_PRICE

    return multiply(price, item.quantity)


def compute_total(products: Products, currency: str) -> Decimal:
    """Sum of quantity x unit price in `currency` over all lines. 0 when empty."""
    return sum(
        (_line_total(key, item, currency) for key, item in products.items()),
        Decimal("0"),
    )


def _describe(item: CartLineItem) -> str:
    # Empty property values are skipped
    name = item.product_info.name if item.product_info is not None else ""
    props = "".join(f" {value}" for value in item.properties.values() if value)
    return f"{name}: {item.quantity}{props}"


def compute_summary(products: Products) -> str:
    """
    Human-readable description of the cart, one entry per line in order:

        "MacBook case: 1; The West End: 1 nickel finish XS"
    """
    return "; ".join(_describe(item) for item in products.values())


def _normalize_update(update_props: Mapping[str, Any]) -> Dict[str, Any]:
    changes: Dict[str, Any] = {}
    for name, value in update_props.items():
        field_name = UPDATABLE_FIELDS.get(name)
        if field_name is None:
            logger.debug("%s: %s", ERROR_UNKNOWN_UPDATE_FIELD, sanitize_string_for_logging(name))
            continue

        if field_name == "product_info" and value is not None and not isinstance(value, ProductInfo):
            try:
                value = ProductInfo.model_validate(value)
            except ValidationError as e:
                logger.warning("%s: unreadable product info (%s)", ERROR_PRODUCT_INFO_MISSING, e.error_count())
                value = None
        elif field_name == "properties":
            if value is None:
                value = {}
            elif not isinstance(value, Mapping):
                logger.debug("%s: properties", ERROR_INVALID_UPDATE_VALUE)
                continue
            else:
                value = dict(value)
        elif field_name == "quantity" and value is None:
            value = 0

        changes[field_name] = value
    return changes


def _quantity_of(item: Optional[CartLineItem]) -> int:
    # Lines fabricated by an update may carry a non-integer quantity
    if item is None or isinstance(item.quantity, bool) or not isinstance(item.quantity, int):
        return 0
    return item.quantity


def _add(state: CartState, action: CartAdd) -> CartState:
    key = product_key(action.id, action.key, action.properties)
    currency = action.currency or state.currency
    existing = state.products.get(key)

    line = CartLineItem(
        id=action.id,
        quantity=action.quantity + _quantity_of(existing),
        properties=dict(action.properties),
        product_info=action.product_info,
    )
    # The added line moves to the front
    products = {key: line}
    products.update((k, v) for k, v in state.products.items() if k != key)

    logger.debug("Added %s x%s", sanitize_key_for_logging(key), line.quantity)
    return CartState(
        total=compute_total(products, currency),
        summary=compute_summary(products),
        products=products,
        currency=currency,
    )


def _remove(state: CartState, action: CartRemove) -> CartState:
    key = product_key(action.id, action.key, action.properties)
    currency = action.currency or state.currency
    products = {k: v for k, v in state.products.items() if k != key}

    logger.debug("Removed %s", sanitize_key_for_logging(key))
    return CartState(
        total=compute_total(products, currency),
        summary=compute_summary(products),
        products=products,
        currency=currency,
    )


def _update(state: CartState, action: CartUpdate) -> CartState:
    key = product_key(action.id, action.key, action.properties)
    currency = action.currency or state.currency
    changes = _normalize_update(action.update_props)
    existing = state.products.get(key)

    # Updating an absent key creates a line holding only the given fields
    line = replace(existing, **changes) if existing is not None else CartLineItem(**changes)
    products = {**state.products, key: line}

    logger.debug("Updated %s: %s", sanitize_key_for_logging(key), sorted(changes))
    return CartState(
        total=compute_total(products, currency),
        summary=state.summary,
        products=products,
        currency=currency,
    )


def _set_currency(state: CartState, action: CartSetCurrency) -> CartState:
    currency = action.currency or state.currency
    logger.debug("Currency set to %s", sanitize_string_for_logging(currency))
    return replace(state, total=compute_total(state.products, currency), currency=currency)


def reduce(state: Optional[CartState], action: Any) -> CartState:
    """
    Apply one action to the cart.

    Args:
        state: Current cart, or None for a cart that does not exist yet
        action: A cart action model (see cartstate.cart.actions) or the
            plain dict a store dispatches. Dicts go through parse_action;
            one that fails to parse is logged and ignored. Anything else,
            including UnknownAction, returns `state` unchanged.

    Returns:
        A new CartState. `state` and `action` are not modified.
    """
    if state is None:
        state = initial_state()

    if isinstance(action, Mapping):
        try:
            action = parse_action(action)
        except ValidationError as e:
            logger.warning(
                "%s: %s (%s errors)",
                ERROR_MALFORMED_ACTION,
                sanitize_string_for_logging(action.get("type")),
                e.error_count(),
            )
            return state

    if isinstance(action, CartAdd):
        return _add(state, action)
    if isinstance(action, CartRemove):
        return _remove(state, action)
    if isinstance(action, CartUpdate):
        return _update(state, action)
    if isinstance(action, CartSetCurrency):
        return _set_currency(state, action)
    if isinstance(action, CartEmpty):
        logger.debug("Cart emptied")
        return initial_state()

    logger.debug(
        "%s: %s",
        ERROR_UNKNOWN_ACTION,
        sanitize_string_for_logging(getattr(action, "type", type(action).__name__)),
    )
    return state
