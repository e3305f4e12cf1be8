import logging
from pathlib import Path
from typing import Optional

from . import settings
from .loader import DuplicateHook, InventorySource, load_inventory
from .pipeline import DataPipeline
from .reconciler import ReconciliationResult, reconcile, summarize_report
from .schemas import KeyedDataset, VarianceEntry

logger = logging.getLogger(__name__)


class InventorySynchronizer(DataPipeline):
    """
    Synchronizes a published inventory (primary) with the warehouse inventory
    (authoritative, the source of truth for the final state).

    Call `synchronize()` and check its outcome before reading the results;
    after a failed run both results are empty.
    """

    def __init__(
        self,
        primary_source: InventorySource,
        authoritative_source: InventorySource,
        strict: Optional[bool] = None,
        on_duplicate: Optional[DuplicateHook] = None,
    ):
        super().__init__("inventory synchronization")
        self.primary_source = primary_source
        self.authoritative_source = authoritative_source
        self.strict = settings.STRICT_MODE if strict is None else strict
        self.on_duplicate = on_duplicate
        self._report: list[VarianceEntry] = []
        self._synchronized_inventory: KeyedDataset = {}

    def synchronize(self) -> bool:
        """Runs the whole process. Returns True on success, False on failure."""
        return self.run()

    def get_report(self) -> list[VarianceEntry]:
        return list(self._report)

    def get_synchronized_inventory(self) -> KeyedDataset:
        return dict(self._synchronized_inventory)

    def reset(self) -> None:
        super().reset()
        self._report = []
        self._synchronized_inventory = {}

    def extract(self) -> tuple[KeyedDataset, KeyedDataset]:
        # Both datasets are fully loaded before reconciliation starts.
        logger.info(f"-- Loading primary inventory: {_describe(self.primary_source)} --")
        primary = load_inventory(
            self.primary_source, strict=self.strict, on_duplicate=self.on_duplicate
        )
        logger.info(
            f"-- Loading authoritative inventory: {_describe(self.authoritative_source)} --"
        )
        authoritative = load_inventory(
            self.authoritative_source, strict=self.strict, on_duplicate=self.on_duplicate
        )
        return primary, authoritative

    def transform(self, raw_data: tuple[KeyedDataset, KeyedDataset]) -> ReconciliationResult:
        primary, authoritative = raw_data
        logger.info("Comparing inventories...")
        return reconcile(primary, authoritative)

    def load(self, result: ReconciliationResult) -> None:
        self._report = result.report
        self._synchronized_inventory = result.merged

        logger.info("\n--- Variance Summary ---")
        for status, count in summarize_report(result.report).items():
            logger.info(f"{status}: {count}")
        logger.info(f"Synchronized inventory: {len(result.merged)} products")


def _describe(source: InventorySource) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    return getattr(source, "name", "<stream>")
