"""Behavior tests for loading headerless inventory CSV files into keyed datasets."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from inventory_sync.exceptions import MalformedRowError, ResourceError
from inventory_sync.loader import load_inventory


def test_load_inventory_types_and_keys_records(write_csv) -> None:
    """Every four-field row becomes a typed record keyed by its SKU."""
    path = write_csv("inv.csv", "SKU-001,Laptop Pro,1200.50,0\nSKU-002,Wireless Mouse,25.00,200\n")

    dataset = load_inventory(path)

    assert list(dataset) == ["SKU-001", "SKU-002"]
    laptop = dataset["SKU-001"]
    assert laptop.name == "Laptop Pro"
    assert laptop.price == pytest.approx(1200.5)
    assert laptop.stock == 0
    assert dataset["SKU-002"].stock == 200


def test_load_inventory_accepts_string_paths(write_csv) -> None:
    path = write_csv("inv.csv", "SKU-1,Widget,1,5\n")
    assert load_inventory(str(path))["SKU-1"].stock == 5


def test_rows_with_wrong_field_count_are_skipped(write_csv) -> None:
    """Short and long rows are dropped without raising."""
    path = write_csv(
        "inv.csv",
        "SKU-1,Widget,1.00,5\nSKU-2,Gadget,3.00\nSKU-3,Gizmo,2.00,7,extra\n\nSKU-4,Doohickey,4.00,9\n",
    )

    dataset = load_inventory(path)

    assert list(dataset) == ["SKU-1", "SKU-4"]


def test_malformed_numbers_coerce_to_zero(write_csv) -> None:
    path = write_csv(
        "inv.csv",
        "SKU-1,A,abc,xyz\nSKU-2,B,,\nSKU-3,C, 4.50 , 12 \nSKU-4,D,1.0,3.7\nSKU-5,E,inf,inf\n"
        "SKU-6,F,9.99x,12abc\nSKU-7,G,2.5e1,1e3\n",
    )

    dataset = load_inventory(path)

    assert (dataset["SKU-1"].price, dataset["SKU-1"].stock) == (0.0, 0)
    assert (dataset["SKU-2"].price, dataset["SKU-2"].stock) == (0.0, 0)
    assert (dataset["SKU-3"].price, dataset["SKU-3"].stock) == (4.5, 12)
    # Stock truncates toward zero like an integer cast.
    assert dataset["SKU-4"].stock == 3
    assert (dataset["SKU-5"].price, dataset["SKU-5"].stock) == (0.0, 0)
    # Only complete numbers count; a numeric prefix is not enough.
    assert (dataset["SKU-6"].price, dataset["SKU-6"].stock) == (0.0, 0)
    assert (dataset["SKU-7"].price, dataset["SKU-7"].stock) == (25.0, 1000)


def test_out_of_range_stock_saturates_instead_of_wrapping(write_csv) -> None:
    """Stock beyond the 64-bit range keeps its sign and pins to the nearest bound."""
    path = write_csv(
        "inv.csv",
        "A,W,1,99999999999999999999\nB,W,1,-99999999999999999999\nC,W,1,1e25\nD,W,1,42\n",
    )

    dataset = load_inventory(path)

    assert dataset["A"].stock == 2**63 - 1
    assert dataset["B"].stock == -(2**63)
    assert dataset["C"].stock == 2**63 - 1
    assert dataset["D"].stock == 42


def test_duplicate_sku_last_occurrence_wins_and_hook_is_called(write_csv) -> None:
    path = write_csv("inv.csv", "A,First,1,1\nB,Other,1,2\nA,Second,1,3\n")
    seen = []

    dataset = load_inventory(path, on_duplicate=lambda previous, current: seen.append((previous, current)))

    # The key keeps its first position but holds the last record.
    assert list(dataset) == ["A", "B"]
    assert dataset["A"].name == "Second"
    assert dataset["A"].stock == 3
    assert len(seen) == 1
    assert seen[0][0].name == "First"
    assert seen[0][1].name == "Second"


def test_quoted_fields_may_contain_commas(write_csv) -> None:
    path = write_csv("inv.csv", 'SKU-9,"Hub, USB-C",45.99,3\n')
    assert load_inventory(path)["SKU-9"].name == "Hub, USB-C"


def test_byte_order_mark_is_ignored(write_csv) -> None:
    path = write_csv("inv.csv", "\ufeffSKU-1,Widget,1,5\n")
    assert list(load_inventory(path)) == ["SKU-1"]


def test_latin1_files_are_read_with_fallback(write_csv) -> None:
    path = write_csv("inv.csv", "SKU-1,Café Grinder,19.90,4\n", encoding="latin-1")
    assert load_inventory(path)["SKU-1"].name == "Café Grinder"


def test_empty_file_yields_empty_dataset(write_csv) -> None:
    assert load_inventory(write_csv("inv.csv", "")) == {}


def test_text_streams_are_accepted() -> None:
    dataset = load_inventory(io.StringIO("SKU-1,Widget,1,5\nbroken,row\n"))
    assert list(dataset) == ["SKU-1"]


def test_undecodable_stream_raises_resource_error() -> None:
    stream = io.TextIOWrapper(io.BytesIO(b"A,Caf\xe9,1,2\n"), encoding="utf-8")
    with pytest.raises(ResourceError):
        load_inventory(stream)


def test_missing_file_raises_resource_error(tmp_path: Path) -> None:
    missing = tmp_path / "missing.csv"
    with pytest.raises(ResourceError) as exc_info:
        load_inventory(missing)
    assert exc_info.value.path == missing


def test_directory_raises_resource_error(tmp_path: Path) -> None:
    with pytest.raises(ResourceError):
        load_inventory(tmp_path)


def test_strict_mode_rejects_wrongly_sized_rows(write_csv) -> None:
    path = write_csv("inv.csv", "SKU-1,Widget,1,5\nSKU-2,Gadget,3\n")
    with pytest.raises(MalformedRowError) as exc_info:
        load_inventory(path, strict=True)
    assert exc_info.value.line_number == 2


def test_strict_mode_rejects_non_numeric_fields(write_csv) -> None:
    path = write_csv("inv.csv", "SKU-1,Widget,1,5\nSKU-2,Gadget,cheap,3\n")
    with pytest.raises(MalformedRowError) as exc_info:
        load_inventory(path, strict=True)
    assert exc_info.value.line_number == 2


def test_strict_mode_still_skips_blank_lines(write_csv) -> None:
    path = write_csv("inv.csv", "SKU-1,Widget,1,5\n\nSKU-2,Gadget,3,4\n")
    assert list(load_inventory(path, strict=True)) == ["SKU-1", "SKU-2"]
