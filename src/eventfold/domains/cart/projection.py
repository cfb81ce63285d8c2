"""Cart – state types and the cart fold."""
from __future__ import annotations

import dataclasses
import enum
from typing import Any, Mapping

from eventfold.application.event_sourcing import EventContext, EventStore, Fold, Projection
from eventfold.domains.cart import events


class CartStatus(enum.StrEnum):
    ACTIVE = "active"
    CHECKED_OUT = "checked_out"


@dataclasses.dataclass
class CartItem:
    product_id: str
    product_name: str
    price: float
    quantity: int


@dataclasses.dataclass
class CartState:
    cart_id: str
    user_id: str | None = None
    items: list[CartItem] = dataclasses.field(default_factory=list)
    total_items: int = 0
    total_price: float = 0.0
    status: CartStatus = CartStatus.ACTIVE
    created_at: str = ""
    checked_out_at: str | None = None
    shipping_address: dict[str, Any] | None = None

    def find_item(self, product_id: str) -> CartItem | None:
        return next((i for i in self.items if i.product_id == product_id), None)


def _created(state: CartState, data: Mapping[str, Any]) -> None:
    state.user_id = data.get("userId")
    state.created_at = data["createdAt"]


def _item_added(state: CartState, data: Mapping[str, Any]) -> None:
    existing = state.find_item(data["productId"])
    if existing is not None:
        existing.quantity += data["quantity"]
        return
    state.items.append(
        CartItem(
            product_id=data["productId"],
            product_name=data["productName"],
            price=data["price"],
            quantity=data["quantity"],
        )
    )


def _item_removed(state: CartState, data: Mapping[str, Any]) -> None:
    state.items = [i for i in state.items if i.product_id != data["productId"]]


def _quantity_changed(state: CartState, data: Mapping[str, Any]) -> None:
    item = state.find_item(data["productId"])
    if item is not None:
        item.quantity = data["quantity"]


def _cleared(state: CartState, data: Mapping[str, Any]) -> None:  # noqa: ARG001
    state.items = []


def _checked_out(state: CartState, data: Mapping[str, Any]) -> None:
    state.status = CartStatus.CHECKED_OUT
    state.checked_out_at = data["checkedOutAt"]
    state.shipping_address = dict(data.get("shippingAddress") or {}) or None


def _totals(state: CartState) -> None:
    state.total_items = sum(i.quantity for i in state.items)
    state.total_price = sum(i.price * i.quantity for i in state.items)


CART_FOLD: Fold[CartState] = Fold(
    initial=lambda cart_id: CartState(cart_id=cart_id),
    reducers={
        events.CART_CREATED: _created,
        events.ITEM_ADDED: _item_added,
        events.ITEM_REMOVED: _item_removed,
        events.ITEM_QUANTITY_CHANGED: _quantity_changed,
        events.CART_CLEARED: _cleared,
        events.CART_CHECKED_OUT: _checked_out,
    },
    finalize=_totals,
)


def cart_projection(store: EventStore, context: EventContext) -> Projection[CartState]:
    return Projection(
        store,
        context,
        domain=events.DOMAIN,
        id_field=events.ID_FIELD,
        created_fact=events.CART_CREATED,
        fold=CART_FOLD,
    )


__all__ = ["CART_FOLD", "CartItem", "CartState", "CartStatus", "cart_projection"]
