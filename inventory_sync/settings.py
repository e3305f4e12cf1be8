import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


# --- Path Configuration ---
INPUT_DIR = BASE_DIR / os.getenv("INPUT_DIR", "input")
OUTPUT_DIR = BASE_DIR / os.getenv("OUTPUT_DIR", "output")
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")

# --- Filename Configuration ---
# inv1 is the published (website) inventory, inv2 the warehouse source of truth.
PRIMARY_FILENAME = os.getenv("PRIMARY_FILENAME", "inv1.csv")
AUTHORITATIVE_FILENAME = os.getenv("AUTHORITATIVE_FILENAME", "inv2.csv")
REPORT_FILENAME_BASE = os.getenv("REPORT_FILENAME_BASE", "variance_report")
INVENTORY_FILENAME_BASE = os.getenv("INVENTORY_FILENAME_BASE", "synchronized_inventory")
HTML_FILENAME = os.getenv("HTML_FILENAME", "inventory_report.html")

# --- Behaviour Flags ---
SAVE_JSON_OUTPUT = _env_flag("SAVE_JSON_OUTPUT")
STRICT_MODE = _env_flag("STRICT_MODE")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Webhook ---
WEBHOOK_URL = os.getenv("WEBHOOK_URL")

# --- Shared Business Logic ---
# Column order for every tabular output, kept in one place.
REPORT_COLUMNS = ["sku", "name", "status", "old_stock", "new_stock", "variation"]
INVENTORY_COLUMNS = ["sku", "name", "price", "stock"]

# Human-readable labels for the report statuses.
STATUS_LABELS = {
    "updated": "Needs Update",
    "newly_added": "Add to Web,New Stock in Warehouse",
    "removed": "Out of stock in Warehouse(Remove from Web)",
    "stock_depleted": "Out of stock in web, check stock in Warehouse",
}
