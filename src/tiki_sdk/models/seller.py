"""Seller models"""

from enum import IntEnum
from typing import Optional

from pydantic import BaseModel, Field


class WarehouseStatus(IntEnum):
    """Seller warehouse status"""
    INACTIVE = 0
    ACTIVE = 1


class WarehouseType(IntEnum):
    """Seller warehouse type"""
    WAREHOUSE = 1
    RETURN = 2


class SellerWarehouseQuery(BaseModel):
    """Query parameters accepted by the seller warehouse listing"""

    status: Optional[WarehouseStatus] = Field(default=None, description="Warehouse status")
    type: Optional[WarehouseType] = Field(default=None, description="Warehouse type")
    limit: Optional[int] = Field(default=None, description="Page size", ge=1)
    page: Optional[int] = Field(default=None, description="Page number", ge=1)

    model_config = {
        "extra": "ignore",
    }
