"""Cart domain – a shopping cart whose items are folded from its stream."""
from eventfold.domains.cart.commands import HANDLERS, command_handlers
from eventfold.domains.cart.projection import (
    CART_FOLD,
    CartItem,
    CartState,
    CartStatus,
    cart_projection,
)

__all__ = [
    "CART_FOLD",
    "CartItem",
    "CartState",
    "CartStatus",
    "HANDLERS",
    "cart_projection",
    "command_handlers",
]
