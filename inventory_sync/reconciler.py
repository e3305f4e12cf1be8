"""Pure reconciliation of two keyed inventory datasets. No I/O happens here."""

from typing import NamedTuple

from .schemas import InventoryRecord, KeyedDataset, VarianceEntry, VarianceStatus


class ReconciliationResult(NamedTuple):
    report: list[VarianceEntry]
    merged: KeyedDataset


def _compare_authoritative(
    primary: KeyedDataset, authoritative: KeyedDataset
) -> list[VarianceEntry]:
    """First pass: every SKU of the authoritative dataset, in its order."""
    entries = []
    for sku, current in authoritative.items():
        previous = primary.get(sku)
        old_stock = previous.stock if previous is not None else 0

        if old_stock == current.stock:
            continue

        if previous is None:
            status = VarianceStatus.NEWLY_ADDED
        elif old_stock == 0:
            # Kept as labelled by the legacy report: zero-stock items that gain stock.
            status = VarianceStatus.STOCK_DEPLETED
        else:
            status = VarianceStatus.UPDATED

        entries.append(
            VarianceEntry(
                sku=sku,
                name=current.name,
                status=status,
                old_stock=old_stock,
                new_stock=current.stock,
                variation=current.stock - old_stock,
            )
        )
    return entries


def _collect_removed(
    primary: KeyedDataset, authoritative: KeyedDataset
) -> list[VarianceEntry]:
    """Second pass: primary SKUs that no longer exist in the authoritative dataset."""
    return [
        _removed_entry(sku, previous)
        for sku, previous in primary.items()
        if sku not in authoritative
    ]


def _removed_entry(sku: str, previous: InventoryRecord) -> VarianceEntry:
    return VarianceEntry(
        sku=sku,
        name=previous.name,
        status=VarianceStatus.REMOVED,
        old_stock=previous.stock,
        new_stock=0,
        variation=-previous.stock,
    )


def reconcile(primary: KeyedDataset, authoritative: KeyedDataset) -> ReconciliationResult:
    """
    Compares `primary` against the `authoritative` source of truth.

    The report lists authoritative-side changes first (in authoritative order),
    then removals (in primary order); entries whose stock did not change are
    omitted. The merged inventory is a new mapping holding exactly the
    authoritative records.
    """
    report = _compare_authoritative(primary, authoritative)
    report.extend(_collect_removed(primary, authoritative))
    return ReconciliationResult(report=report, merged=dict(authoritative))


def summarize_report(report: list[VarianceEntry]) -> dict[str, int]:
    """Counts report entries per status. Every status is present, zero if unused."""
    summary = {status.value: 0 for status in VarianceStatus}
    for entry in report:
        summary[entry.status] += 1
    return summary
