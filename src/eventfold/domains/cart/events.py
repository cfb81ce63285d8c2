"""Cart – subject prefix and event facts."""
from typing import Final

DOMAIN: Final = "cart"
ID_FIELD: Final = "cartId"

CART_CREATED: Final = "cart-created"
ITEM_ADDED: Final = "item-added"
ITEM_REMOVED: Final = "item-removed"
ITEM_QUANTITY_CHANGED: Final = "item-quantity-changed"
CART_CLEARED: Final = "cart-cleared"
CART_CHECKED_OUT: Final = "cart-checked-out"
