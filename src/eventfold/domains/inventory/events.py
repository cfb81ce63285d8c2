"""Inventory – subject prefix and event facts."""
from typing import Final

DOMAIN: Final = "warehouse"
ID_FIELD: Final = "warehouseId"

WAREHOUSE_CREATED: Final = "warehouse-created"
PRODUCT_ADDED: Final = "product-added"
STOCK_RECEIVED: Final = "stock-received"
STOCK_SOLD: Final = "stock-sold"
STOCK_ADJUSTED: Final = "stock-adjusted"
REORDER_POINT_SET: Final = "reorder-point-set"
