from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class VarianceStatus(str, Enum):
    """The verbatim status values a variance entry can carry."""

    NEWLY_ADDED = "newly_added"
    UPDATED = "updated"
    REMOVED = "removed"
    # NOTE: also applied when a zero-stock primary item gains stock.
    STOCK_DEPLETED = "stock_depleted"


class InventoryRecord(BaseModel):
    """
    Defines the data contract for a single inventory line item.
    Records are immutable so a merged inventory can share them with its source.
    """

    model_config = ConfigDict(frozen=True)

    sku: str
    name: str
    price: float = 0.0
    stock: int = 0


class VarianceEntry(BaseModel):
    """One row of the reconciliation report."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    sku: str
    name: str
    status: VarianceStatus
    old_stock: int = Field(default=0)
    new_stock: int = Field(default=0)
    variation: int = Field(default=0)


KeyedDataset = dict[str, InventoryRecord]
