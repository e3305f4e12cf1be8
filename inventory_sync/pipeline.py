import logging
from abc import ABC, abstractmethod
from typing import Any

from .exceptions import InventorySyncError

logger = logging.getLogger(__name__)


class DataPipeline(ABC):
    """
    Abstract base class for data pipelines.
    Follows an Extract -> Transform -> Load (ETL) pattern and reports the
    outcome as a boolean instead of raising.
    """

    def __init__(self, report_type: str):
        self.report_type = report_type
        self.succeeded: bool | None = None

    def run(self) -> bool:
        """
        Orchestrates the pipeline execution.
        Package errors are logged and turned into a `False` outcome.
        """
        logger.info(f"🚀 STEP: {self.report_type.upper()}")
        logger.info("-" * 30)
        self.reset()

        try:
            # --- 1. EXTRACT ---
            raw_data = self.extract()

            # --- 2. TRANSFORM ---
            result = self.transform(raw_data)
        except InventorySyncError as e:
            logger.error(f"❌ {self.report_type.capitalize()} pipeline failed: {e}")
            self.succeeded = False
            return False

        # --- 3. LOAD ---
        self.load(result)
        self.succeeded = True

        logger.info(f"✅ {self.report_type.capitalize()} Pipeline Finished.")
        logger.info("=" * 60)
        return True

    def reset(self) -> None:
        """Clears the results of a previous run."""
        self.succeeded = None

    @abstractmethod
    def extract(self) -> Any:
        """Responsible for reading every input the pipeline needs."""

    @abstractmethod
    def transform(self, raw_data: Any) -> Any:
        """Responsible for turning the extracted inputs into results."""

    @abstractmethod
    def load(self, result: Any) -> None:
        """Responsible for making the results available."""
