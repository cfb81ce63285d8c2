"""Cart – command payloads and handlers."""
from __future__ import annotations

from typing import Any

from eventfold.application.cqrs import CommandHandler, CommandSchema, Count, Identifier, Price, bounded
from eventfold.application.event_sourcing import EventContext, EventStore
from eventfold.config import AppSettings
from eventfold.domains.cart import events

Name = bounded(1, 200)
AddressLine = bounded(1, 200)


class CreateCart(CommandSchema):
    cart_id: Identifier
    user_id: Identifier | None = None


class AddItem(CommandSchema):
    cart_id: Identifier
    product_id: Identifier
    product_name: Name
    price: Price
    quantity: Count = 1


class RemoveItem(CommandSchema):
    cart_id: Identifier
    product_id: Identifier


class ChangeQuantity(CommandSchema):
    cart_id: Identifier
    product_id: Identifier
    quantity: Count


class ClearCart(CommandSchema):
    cart_id: Identifier


class ShippingAddress(CommandSchema):
    street: AddressLine
    city: AddressLine
    postal_code: AddressLine
    country: AddressLine


class CheckoutCart(CommandSchema):
    cart_id: Identifier
    shipping_address: ShippingAddress


class _CartHandler(CommandHandler[Any]):
    domain = events.DOMAIN
    id_field = "cart_id"


class CreateCartHandler(_CartHandler):
    command_type = "create-cart"
    schema = CreateCart
    fact = events.CART_CREATED
    timestamp_field = "createdAt"
    log_event = "cart_created"
    creates = True


class AddItemHandler(_CartHandler):
    command_type = "add-item"
    schema = AddItem
    fact = events.ITEM_ADDED
    timestamp_field = "addedAt"
    log_event = "item_added"

    def log_fields(self, payload: AddItem) -> dict[str, Any]:
        return {
            "cart_id": payload.cart_id,
            "product_name": payload.product_name,
            "quantity": payload.quantity,
        }


class RemoveItemHandler(_CartHandler):
    command_type = "remove-item"
    schema = RemoveItem
    fact = events.ITEM_REMOVED
    timestamp_field = "removedAt"
    log_event = "item_removed"

    def log_fields(self, payload: RemoveItem) -> dict[str, Any]:
        return {"cart_id": payload.cart_id, "product_id": payload.product_id}


class ChangeQuantityHandler(_CartHandler):
    command_type = "change-quantity"
    schema = ChangeQuantity
    fact = events.ITEM_QUANTITY_CHANGED
    timestamp_field = "changedAt"
    log_event = "item_quantity_changed"

    def log_fields(self, payload: ChangeQuantity) -> dict[str, Any]:
        return {
            "cart_id": payload.cart_id,
            "product_id": payload.product_id,
            "quantity": payload.quantity,
        }


class ClearCartHandler(_CartHandler):
    command_type = "clear-cart"
    schema = ClearCart
    fact = events.CART_CLEARED
    timestamp_field = "clearedAt"
    log_event = "cart_cleared"


class CheckoutCartHandler(_CartHandler):
    """Checks a cart out.

    A checked-out cart still accepts item commands; blocking them is a
    product decision left to the caller.
    """

    command_type = "checkout-cart"
    schema = CheckoutCart
    fact = events.CART_CHECKED_OUT
    timestamp_field = "checkedOutAt"
    log_event = "cart_checked_out"


HANDLERS: tuple[type[_CartHandler], ...] = (
    CreateCartHandler,
    AddItemHandler,
    RemoveItemHandler,
    ChangeQuantityHandler,
    ClearCartHandler,
    CheckoutCartHandler,
)


def command_handlers(
    store: EventStore,
    context: EventContext,
    settings: AppSettings,  # noqa: ARG001
) -> list[CommandHandler[Any]]:
    return [cls(store, context) for cls in HANDLERS]


__all__ = [
    "AddItem",
    "ChangeQuantity",
    "CheckoutCart",
    "ClearCart",
    "CreateCart",
    "HANDLERS",
    "RemoveItem",
    "ShippingAddress",
    "command_handlers",
]
