from datetime import datetime
from pathlib import Path

from . import settings

# inv1 -> inventory published on the WEBSITE
SAMPLE_PRIMARY_CONTENT = """SKU-001,Laptop Pro,1200.50,0
SKU-002,Wireless Mouse,25.00,0
SKU-003,USB-C Hub,45.99,0
SKU-004,4K Monitor,350.00,0
SKU-006,Old Keyboard,30.00,0
"""

# inv2 -> actual inventory in the WAREHOUSE
SAMPLE_AUTHORITATIVE_CONTENT = """SKU-001,Laptop Pro X,1250.00,60
SKU-002,Wireless Mouse,25.00,200
SKU-003,USB-C Hub Advanced,45.99,180
SKU-005,Webcam HD,55.00,100
SKU-006,Old Keyboard,30.00,0
"""


def get_date_suffix_for_filename() -> str:
    """Returns the current date as a YYYY-MM-DD string for filenames."""
    return datetime.now().strftime("%Y-%m-%d")


def write_sample_inventories(target_dir: Path | None = None) -> tuple[Path, Path]:
    """
    Writes the demo website/warehouse CSV files and returns their paths
    as (primary, authoritative).
    """
    target_dir = Path(target_dir) if target_dir is not None else settings.INPUT_DIR
    target_dir.mkdir(parents=True, exist_ok=True)

    primary_path = target_dir / settings.PRIMARY_FILENAME
    authoritative_path = target_dir / settings.AUTHORITATIVE_FILENAME
    primary_path.write_text(SAMPLE_PRIMARY_CONTENT, encoding="utf-8")
    authoritative_path.write_text(SAMPLE_AUTHORITATIVE_CONTENT, encoding="utf-8")
    return primary_path, authoritative_path
