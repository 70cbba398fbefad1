"""
Common Error Constants

Centralized messages for conditions the reducer reports but never raises.
"""

# Pricing
ERROR_PRICE_NOT_FOUND = "Price not found for currency"
ERROR_PRODUCT_INFO_MISSING = "Line item has no product info"

# Actions
ERROR_UNKNOWN_ACTION = "Unrecognized action type"
ERROR_MALFORMED_ACTION = "Ignoring malformed cart action"
ERROR_UNKNOWN_UPDATE_FIELD = "Ignoring unknown line item field in update"
ERROR_INVALID_UPDATE_VALUE = "Ignoring unusable value for line item field"
