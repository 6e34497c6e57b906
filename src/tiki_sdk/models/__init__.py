"""Models module initialization"""

from tiki_sdk.models.seller import (
    SellerWarehouseQuery,
    WarehouseStatus,
    WarehouseType,
)

__all__ = [
    "SellerWarehouseQuery",
    "WarehouseStatus",
    "WarehouseType",
]
