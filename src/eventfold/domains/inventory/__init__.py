"""Inventory domain – warehouses, products and stock movements."""
from eventfold.domains.inventory.commands import HANDLERS, AdjustmentReason, command_handlers
from eventfold.domains.inventory.projection import (
    WAREHOUSE_FOLD,
    MovementType,
    Product,
    StockMovement,
    WarehouseState,
    is_low_stock,
    is_out_of_stock,
    low_stock_products,
    out_of_stock_products,
    warehouse_projection,
)

__all__ = [
    "AdjustmentReason",
    "HANDLERS",
    "MovementType",
    "Product",
    "StockMovement",
    "WAREHOUSE_FOLD",
    "WarehouseState",
    "command_handlers",
    "is_low_stock",
    "is_out_of_stock",
    "low_stock_products",
    "out_of_stock_products",
    "warehouse_projection",
]
