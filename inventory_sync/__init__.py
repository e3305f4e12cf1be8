"""Reconcile a published inventory against the warehouse source of truth."""

from .exceptions import InventorySyncError, MalformedRowError, ResourceError
from .loader import load_inventory
from .reconciler import ReconciliationResult, reconcile, summarize_report
from .schemas import InventoryRecord, KeyedDataset, VarianceEntry, VarianceStatus
from .synchronizer import InventorySynchronizer

__all__ = [
    "InventoryRecord",
    "InventorySyncError",
    "InventorySynchronizer",
    "KeyedDataset",
    "MalformedRowError",
    "ReconciliationResult",
    "ResourceError",
    "VarianceEntry",
    "VarianceStatus",
    "load_inventory",
    "reconcile",
    "summarize_report",
]
