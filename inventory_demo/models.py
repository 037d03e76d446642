from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

ID_MIN = 1000
# Exclusive upper bound.
ID_MAX = 9999
ID_SPACE_SIZE = ID_MAX - ID_MIN

VALUE_MIN = 1
VALUE_MAX = 100


class Item(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=ID_MIN, lt=ID_MAX)
    name: str
    value: int = Field(..., ge=VALUE_MIN, le=VALUE_MAX)


class InventoryOrder(StrEnum):
    unordered = "unordered"
    sorted_by_id = "sorted_by_id"
    sorted_by_value = "sorted_by_value"
