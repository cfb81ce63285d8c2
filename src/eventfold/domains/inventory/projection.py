"""Inventory – warehouse state, stock movements and the warehouse fold.

Low-stock and out-of-stock are predicates over the folded quantities;
no event records them.
"""
from __future__ import annotations

import dataclasses
import enum
from typing import Any, Mapping

from eventfold.application.event_sourcing import EventContext, EventStore, Fold, Projection
from eventfold.domains.inventory import events


class MovementType(enum.StrEnum):
    RECEIVED = "received"
    SOLD = "sold"
    ADJUSTED = "adjusted"


@dataclasses.dataclass
class Product:
    product_id: str
    sku: str
    name: str
    category: str
    unit_price: float
    reorder_point: int
    added_at: str
    quantity: int = 0
    total_received: int = 0
    total_sold: int = 0
    low_stock: bool = False
    out_of_stock: bool = False


@dataclasses.dataclass
class StockMovement:
    """One stock change, in fold order.  Sales carry a negative quantity."""

    type: MovementType
    product_id: str
    quantity: int
    timestamp: str
    reference: str | None = None
    reason: str | None = None
    notes: str | None = None


@dataclasses.dataclass
class WarehouseState:
    warehouse_id: str
    name: str = ""
    location: str | None = None
    products: list[Product] = dataclasses.field(default_factory=list)
    movements: list[StockMovement] = dataclasses.field(default_factory=list)
    total_products: int = 0
    total_value: float = 0.0
    low_stock_count: int = 0
    created_at: str = ""

    def find_product(self, product_id: str) -> Product | None:
        return next((p for p in self.products if p.product_id == product_id), None)


def is_low_stock(product: Product) -> bool:
    return product.quantity <= product.reorder_point


def is_out_of_stock(product: Product) -> bool:
    return product.quantity == 0


def low_stock_products(state: WarehouseState) -> list[Product]:
    return [p for p in state.products if is_low_stock(p)]


def out_of_stock_products(state: WarehouseState) -> list[Product]:
    return [p for p in state.products if is_out_of_stock(p)]


def _created(state: WarehouseState, data: Mapping[str, Any]) -> None:
    state.name = data["name"]
    state.location = data.get("location")
    state.created_at = data["createdAt"]


def _product_added(state: WarehouseState, data: Mapping[str, Any]) -> None:
    state.products.append(
        Product(
            product_id=data["productId"],
            sku=data["sku"],
            name=data["name"],
            category=data["category"],
            unit_price=data["unitPrice"],
            reorder_point=data["reorderPoint"],
            added_at=data["addedAt"],
        )
    )


# Stock reducers record the movement even when the product is unknown;
# only the product mutation is skipped.


def _stock_received(state: WarehouseState, data: Mapping[str, Any]) -> None:
    product = state.find_product(data["productId"])
    if product is not None:
        product.quantity += data["quantity"]
        product.total_received += data["quantity"]
    state.movements.append(
        StockMovement(
            type=MovementType.RECEIVED,
            product_id=data["productId"],
            quantity=data["quantity"],
            reference=data.get("reference"),
            timestamp=data["receivedAt"],
        )
    )


def _stock_sold(state: WarehouseState, data: Mapping[str, Any]) -> None:
    product = state.find_product(data["productId"])
    if product is not None:
        product.quantity -= data["quantity"]
        product.total_sold += data["quantity"]
    state.movements.append(
        StockMovement(
            type=MovementType.SOLD,
            product_id=data["productId"],
            quantity=-data["quantity"],
            reference=data.get("reference"),
            timestamp=data["soldAt"],
        )
    )


def _stock_adjusted(state: WarehouseState, data: Mapping[str, Any]) -> None:
    product = state.find_product(data["productId"])
    if product is not None:
        product.quantity += data["adjustment"]
    state.movements.append(
        StockMovement(
            type=MovementType.ADJUSTED,
            product_id=data["productId"],
            quantity=data["adjustment"],
            reason=data["reason"],
            notes=data.get("notes"),
            timestamp=data["adjustedAt"],
        )
    )


def _reorder_point_set(state: WarehouseState, data: Mapping[str, Any]) -> None:
    product = state.find_product(data["productId"])
    if product is not None:
        product.reorder_point = data["reorderPoint"]


def _totals(state: WarehouseState) -> None:
    for product in state.products:
        product.low_stock = is_low_stock(product)
        product.out_of_stock = is_out_of_stock(product)
    state.total_products = len(state.products)
    state.total_value = sum(p.quantity * p.unit_price for p in state.products)
    state.low_stock_count = sum(1 for p in state.products if p.low_stock)


WAREHOUSE_FOLD: Fold[WarehouseState] = Fold(
    initial=lambda warehouse_id: WarehouseState(warehouse_id=warehouse_id),
    reducers={
        events.WAREHOUSE_CREATED: _created,
        events.PRODUCT_ADDED: _product_added,
        events.STOCK_RECEIVED: _stock_received,
        events.STOCK_SOLD: _stock_sold,
        events.STOCK_ADJUSTED: _stock_adjusted,
        events.REORDER_POINT_SET: _reorder_point_set,
    },
    finalize=_totals,
)


def warehouse_projection(store: EventStore, context: EventContext) -> Projection[WarehouseState]:
    return Projection(
        store,
        context,
        domain=events.DOMAIN,
        id_field=events.ID_FIELD,
        created_fact=events.WAREHOUSE_CREATED,
        fold=WAREHOUSE_FOLD,
    )


__all__ = [
    "MovementType",
    "Product",
    "StockMovement",
    "WAREHOUSE_FOLD",
    "WarehouseState",
    "is_low_stock",
    "is_out_of_stock",
    "low_stock_products",
    "out_of_stock_products",
    "warehouse_projection",
]
