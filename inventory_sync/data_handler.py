import json
import logging
from pathlib import Path
from typing import Optional

import pandas as pd
import requests

from . import settings
from . import utils
from .schemas import InventoryRecord, VarianceEntry

logger = logging.getLogger(__name__)


def _to_frame(items: list, columns: list[str]) -> pd.DataFrame:
    """Builds a DataFrame with a fixed column order, headers included when empty."""
    return pd.DataFrame([item.model_dump() for item in items], columns=columns)


def save_outputs(
    report: list[VarianceEntry],
    inventory: dict[str, InventoryRecord],
    output_dir: Optional[Path] = None,
) -> list[Path]:
    """Saves the report and the synchronized inventory to CSV and conditionally to JSON, with dated filenames."""
    output_dir = Path(output_dir) if output_dir is not None else settings.OUTPUT_DIR
    output_dir.mkdir(parents=True, exist_ok=True)
    date_suffix = utils.get_date_suffix_for_filename()

    outputs = [
        (settings.REPORT_FILENAME_BASE, report, settings.REPORT_COLUMNS),
        (settings.INVENTORY_FILENAME_BASE, list(inventory.values()), settings.INVENTORY_COLUMNS),
    ]

    written = []
    for base_name, items, columns in outputs:
        csv_path = output_dir / f"{base_name}_{date_suffix}.csv"
        _to_frame(items, columns).to_csv(csv_path, index=False)
        logger.info(f"✅ Saved to: {csv_path}")
        written.append(csv_path)

        if settings.SAVE_JSON_OUTPUT:
            json_path = output_dir / f"{base_name}_{date_suffix}.json"
            with open(json_path, "w", encoding="utf-8") as f:
                json.dump([item.model_dump(mode="json") for item in items], f, indent=2)
            logger.info(f"✅ JSON output saved to: {json_path}")
            written.append(json_path)

    if not settings.SAVE_JSON_OUTPUT:
        logger.info("INFO: Skipping JSON file save as per configuration.")
    return written


def save_html(document: str, output_dir: Optional[Path] = None) -> Path:
    """Writes the rendered HTML report."""
    output_dir = Path(output_dir) if output_dir is not None else settings.OUTPUT_DIR
    output_dir.mkdir(parents=True, exist_ok=True)
    html_path = output_dir / settings.HTML_FILENAME
    html_path.write_text(document, encoding="utf-8")
    logger.info(f"✅ HTML report saved to: {html_path}")
    return html_path


def post_to_webhook(
    report: list[VarianceEntry],
    status_summary: dict[str, int],
    webhook_url: Optional[str] = None,
) -> bool:
    """
    Posts the variance report AND the status summary to the webhook.
    Returns True only when the webhook accepted the payload.
    """
    webhook_url = webhook_url or settings.WEBHOOK_URL
    if not webhook_url:
        logger.warning("⚠️ WEBHOOK_URL not set. Skipping webhook post.")
        return False

    logger.info(f"🚀 Posting report and summary to webhook: {webhook_url}")

    payload = {
        "reportData": [entry.model_dump(mode="json") for entry in report],
        "statusSummary": status_summary,
    }

    try:
        response = requests.post(webhook_url, json=payload, timeout=15)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        logger.error(f"❌ Error posting to webhook: {e}")
        return False

    logger.info("✅ Report and summary successfully posted to webhook.")
    return True
