"""HTML presentation of a synchronization run."""

from html import escape
from typing import Iterable

from . import settings
from .schemas import InventoryRecord, VarianceEntry

_STYLE = """
        body { font-family: sans-serif; margin: 40px; background-color: #f4f7f6; color: #333; }
        .container { max-width: 1000px; margin: auto; background: #fff; padding: 20px; border-radius: 8px; box-shadow: 0 2px 15px rgba(0,0,0,0.1); }
        h1, h2 { color: #2c3e50; border-bottom: 2px solid #3498db; padding-bottom: 10px; }
        p { line-height: 1.6; }
        table { width: 100%; border-collapse: collapse; margin: 25px 0; }
        th, td { padding: 12px 15px; text-align: left; border-bottom: 1px solid #ddd; }
        thead th { background-color: #3498db; color: #ffffff; font-weight: bold; text-transform: uppercase; }
        tbody tr:nth-of-type(even) { background-color: #f9f9f9; }
        tbody tr:hover { background-color: #ecf0f1; }
        .status-updated { background-color: #f1c40f; color: #333; }
        .status-newly_added { background-color: #2ecc71; color: #fff; }
        .status-removed { background-color: #e74c3c; color: #fff; }
        .status-stock_depleted { background-color: #d35400; color: #fff; }
        .variation { font-weight: bold; }
        .variation-positive { color: #27ae60; }
        .variation-negative { color: #c0392b; }
"""


def status_label(status: str) -> str:
    """Display label for a report status; unknown statuses are shown verbatim."""
    return settings.STATUS_LABELS.get(status, status)


def variation_class(variation: int) -> str:
    if variation > 0:
        return "variation-positive"
    if variation < 0:
        return "variation-negative"
    return ""


def format_variation(variation: int) -> str:
    return f"+{variation}" if variation > 0 else str(variation)


def _report_section(report: list[VarianceEntry]) -> str:
    html = "<h2>📝 Report of Detected Variations</h2>"
    if not report:
        return html + (
            "<p>✅ Excellent! No variations found. The published inventory matches "
            "the warehouse inventory.</p>"
        )

    rows = ""
    for entry in report:
        rows += f"""
            <tr>
                <td>{escape(entry.sku)}</td>
                <td>{escape(entry.name)}</td>
                <td class="status-{escape(entry.status)}">{escape(status_label(entry.status))}</td>
                <td>{entry.old_stock}</td>
                <td>{entry.new_stock}</td>
                <td class="variation {variation_class(entry.variation)}">{format_variation(entry.variation)}</td>
            </tr>"""

    return html + f"""
    <table>
        <thead><tr><th>SKU</th><th>Product</th><th>Status</th><th>Stock on Web</th><th>Stock in Warehouse</th><th>Variation</th></tr></thead>
        <tbody>{rows}
        </tbody>
    </table>"""


def _inventory_section(inventory: Iterable[InventoryRecord]) -> str:
    rows = ""
    for product in inventory:
        rows += f"""
            <tr>
                <td>{escape(product.sku)}</td>
                <td>{escape(product.name)}</td>
                <td>{product.price:,.2f}</td>
                <td>{product.stock}</td>
            </tr>"""

    return f"""<h2>📦 Actual Warehouse Inventory (Source of Truth)</h2>
    <p>This table shows the current and correct status of all products that physically exist in the warehouse.</p>
    <table>
        <thead><tr><th>SKU</th><th>Product</th><th>Price</th><th>Current Stock</th></tr></thead>
        <tbody>{rows}
        </tbody>
    </table>"""


def render_html(
    report: list[VarianceEntry],
    inventory: dict[str, InventoryRecord],
    *,
    succeeded: bool = True,
    primary_label: str = "website",
    authoritative_label: str = "warehouse",
) -> str:
    """
    Builds a standalone HTML document for one synchronization run.
    A failed run only shows a generic error notice, never partial tables.
    """
    if succeeded:
        body = _report_section(report) + "\n    " + _inventory_section(inventory.values())
    else:
        body = (
            "<h2>❌ Error</h2>\n    <p>An error occurred during processing. Please check that "
            "the inventory files exist and are in the correct format.</p>"
        )

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Inventory Variance Report</title>
    <style>{_STYLE}    </style>
</head>
<body>
<div class="container">
    <h1>Inventory Variation Report</h1>
    <p>This report compares the published inventory ({escape(primary_label)}) with the
    physical inventory ({escape(authoritative_label)}). Variances indicate actions needed
    to update the online store.</p>
    {body}
</div>
</body>
</html>
"""
