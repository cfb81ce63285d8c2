"""Inventory – command payloads and handlers.

Stock quantities are never clamped: ``adjust-stock`` takes a signed
integer and may drive a product below zero so that later correction
events can bring it back.
"""
from __future__ import annotations

import enum
from typing import Annotated, Any

from pydantic import Field

from eventfold.application.cqrs import (
    CommandHandler,
    CommandSchema,
    Count,
    Identifier,
    NonNegative,
    Price,
    bounded,
)
from eventfold.application.event_sourcing import EventContext, EventStore
from eventfold.config import AppSettings
from eventfold.domains.inventory import events

DEFAULT_REORDER_POINT = 10
DEFAULT_CATEGORY = "General"

WarehouseName = bounded(1, 100)
Location = bounded(1, 200)
Sku = bounded(1, 50)
ProductName = bounded(1, 200)
Category = bounded(1, 100)
Reference = bounded(1, 100)
Notes = bounded(0, 500)
Adjustment = Annotated[int, Field(strict=True)]


class AdjustmentReason(enum.StrEnum):
    DAMAGED = "damaged"
    LOST = "lost"
    FOUND = "found"
    CORRECTION = "correction"
    OTHER = "other"


class CreateWarehouse(CommandSchema):
    warehouse_id: Identifier
    name: WarehouseName
    location: Location | None = None


class AddProduct(CommandSchema):
    warehouse_id: Identifier
    product_id: Identifier
    sku: Sku
    name: ProductName
    category: Category = DEFAULT_CATEGORY
    unit_price: Price
    reorder_point: NonNegative = DEFAULT_REORDER_POINT


class ReceiveStock(CommandSchema):
    warehouse_id: Identifier
    product_id: Identifier
    quantity: Count
    reference: Reference | None = None


class SellStock(CommandSchema):
    warehouse_id: Identifier
    product_id: Identifier
    quantity: Count
    reference: Reference | None = None


class AdjustStock(CommandSchema):
    warehouse_id: Identifier
    product_id: Identifier
    adjustment: Adjustment
    reason: AdjustmentReason
    notes: Notes | None = None


class SetReorderPoint(CommandSchema):
    warehouse_id: Identifier
    product_id: Identifier
    reorder_point: NonNegative


class _InventoryHandler(CommandHandler[Any]):
    domain = events.DOMAIN
    id_field = "warehouse_id"

    def log_fields(self, payload: Any) -> dict[str, Any]:
        fields = super().log_fields(payload)
        product_id = getattr(payload, "product_id", None)
        if product_id is not None:
            fields["product_id"] = product_id
        return fields


class CreateWarehouseHandler(_InventoryHandler):
    command_type = "create-warehouse"
    schema = CreateWarehouse
    fact = events.WAREHOUSE_CREATED
    timestamp_field = "createdAt"
    log_event = "warehouse_created"
    creates = True

    def log_fields(self, payload: CreateWarehouse) -> dict[str, Any]:
        return {"warehouse_id": payload.warehouse_id, "name": payload.name}


class AddProductHandler(_InventoryHandler):
    command_type = "add-product"
    schema = AddProduct
    fact = events.PRODUCT_ADDED
    timestamp_field = "addedAt"
    log_event = "product_added"

    def log_fields(self, payload: AddProduct) -> dict[str, Any]:
        return {**super().log_fields(payload), "sku": payload.sku}


class ReceiveStockHandler(_InventoryHandler):
    command_type = "receive-stock"
    schema = ReceiveStock
    fact = events.STOCK_RECEIVED
    timestamp_field = "receivedAt"
    log_event = "stock_received"

    def log_fields(self, payload: ReceiveStock) -> dict[str, Any]:
        return {**super().log_fields(payload), "quantity": payload.quantity}


class SellStockHandler(_InventoryHandler):
    command_type = "sell-stock"
    schema = SellStock
    fact = events.STOCK_SOLD
    timestamp_field = "soldAt"
    log_event = "stock_sold"

    def log_fields(self, payload: SellStock) -> dict[str, Any]:
        return {**super().log_fields(payload), "quantity": payload.quantity}


class AdjustStockHandler(_InventoryHandler):
    command_type = "adjust-stock"
    schema = AdjustStock
    fact = events.STOCK_ADJUSTED
    timestamp_field = "adjustedAt"
    log_event = "stock_adjusted"

    def log_fields(self, payload: AdjustStock) -> dict[str, Any]:
        return {
            **super().log_fields(payload),
            "adjustment": payload.adjustment,
            "reason": payload.reason.value,
        }


class SetReorderPointHandler(_InventoryHandler):
    command_type = "set-reorder-point"
    schema = SetReorderPoint
    fact = events.REORDER_POINT_SET
    timestamp_field = "setAt"
    log_event = "reorder_point_set"

    def log_fields(self, payload: SetReorderPoint) -> dict[str, Any]:
        return {**super().log_fields(payload), "reorder_point": payload.reorder_point}


HANDLERS: tuple[type[_InventoryHandler], ...] = (
    CreateWarehouseHandler,
    AddProductHandler,
    ReceiveStockHandler,
    SellStockHandler,
    AdjustStockHandler,
    SetReorderPointHandler,
)


def command_handlers(
    store: EventStore,
    context: EventContext,
    settings: AppSettings,  # noqa: ARG001
) -> list[CommandHandler[Any]]:
    return [cls(store, context) for cls in HANDLERS]


__all__ = [
    "AddProduct",
    "AdjustStock",
    "AdjustmentReason",
    "CreateWarehouse",
    "DEFAULT_REORDER_POINT",
    "HANDLERS",
    "ReceiveStock",
    "SellStock",
    "SetReorderPoint",
    "command_handlers",
]
