import csv
import logging
import os
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

import pandas as pd

from . import settings
from .exceptions import MalformedRowError, ResourceError
from .schemas import InventoryRecord, KeyedDataset

logger = logging.getLogger(__name__)

FIELD_COUNT = len(settings.INVENTORY_COLUMNS)
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1

InventorySource = Union[str, Path, TextIO]
DuplicateHook = Callable[[InventoryRecord, InventoryRecord], None]


def _tokenize(handle: TextIO) -> list[tuple[int, list[str]]]:
    """Splits a comma-delimited stream into (line number, fields) pairs."""
    reader = csv.reader(handle, delimiter=",")
    return [(reader.line_num, fields) for fields in reader]


def _read_path(path: Path) -> list[tuple[int, list[str]]]:
    """
    Reads a CSV file with an encoding fallback:
    1. UTF-8 with BOM support ('utf-8-sig').
    2. Latin-1, which can decode any byte sequence.
    """
    if not path.is_file() or not os.access(path, os.R_OK):
        raise ResourceError(f"File not found or is not readable: {path}", path=path)

    try:
        try:
            with path.open("r", encoding="utf-8-sig", newline="") as handle:
                return _tokenize(handle)
        except UnicodeDecodeError:
            logger.info(f"INFO: UTF-8 decoding failed for {path.name}. Retrying with 'latin-1'.")
            with path.open("r", encoding="latin-1", newline="") as handle:
                return _tokenize(handle)
    except OSError as e:
        raise ResourceError(f"Could not open file: {path} ({e})", path=path) from e
    except csv.Error as e:
        raise ResourceError(f"Could not read file: {path} ({e})", path=path) from e


def _coerce_numeric(values: pd.Series) -> pd.Series:
    """Parses numeric text; anything unparseable or non-finite becomes NaN."""
    numeric = pd.to_numeric(values.str.strip(), errors="coerce")
    return numeric.where(numeric.abs() != float("inf"))


def _saturate_int64(values: pd.Series) -> pd.Series:
    """Truncates toward zero and pins out-of-range values to the int64 bounds."""
    above = values >= 2**63
    below = values < _INT64_MIN
    result = values.mask(above | below, 0).astype("int64")
    result[above] = _INT64_MAX
    result[below] = _INT64_MIN
    return result


def _to_frame(rows: list[tuple[int, list[str]]], strict: bool) -> pd.DataFrame:
    """Keeps the rows with exactly four fields and types the numeric columns."""
    kept = []
    for line_number, fields in rows:
        if not fields:
            continue  # blank line
        if len(fields) != FIELD_COUNT:
            if strict:
                raise MalformedRowError(
                    f"expected {FIELD_COUNT} fields, found {len(fields)}", line_number
                )
            logger.debug(f"  > Skipping line {line_number}: {len(fields)} fields.")
            continue
        kept.append([line_number, *fields])

    df = pd.DataFrame(kept, columns=["line", *settings.INVENTORY_COLUMNS])
    if df.empty:
        return df

    price = _coerce_numeric(df["price"])
    stock = _coerce_numeric(df["stock"])

    if strict:
        bad = df.loc[price.isna() | stock.isna(), "line"]
        if not bad.empty:
            raise MalformedRowError("price and stock must be numeric", int(bad.iloc[0]))

    # Permissive cast: malformed numbers count as zero, stock truncates toward zero.
    df["price"] = price.fillna(0).astype(float)
    df["stock"] = _saturate_int64(stock.fillna(0))
    return df


def load_inventory(
    source: InventorySource,
    *,
    strict: bool = False,
    on_duplicate: Optional[DuplicateHook] = None,
) -> KeyedDataset:
    """
    Loads a headerless `sku,name,price,stock` CSV into a dataset keyed by SKU.

    `source` may be a path or an open text stream. Rows that do not have exactly
    four fields are skipped and non-numeric price/stock values become 0, unless
    `strict` is set, in which case `MalformedRowError` is raised instead.

    When a SKU repeats, the last record wins. `on_duplicate(previous, current)`
    is called for every repeat so callers can audit the overwrite.
    """
    if hasattr(source, "read"):
        label = getattr(source, "name", "<stream>")
        try:
            rows = _tokenize(source)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise ResourceError(f"Could not read stream: {label} ({e})") from e
    else:
        label = Path(source).name
        rows = _read_path(Path(source))

    df = _to_frame(rows, strict)

    dataset: KeyedDataset = {}
    for row in df.to_dict("records"):
        record = InventoryRecord(
            sku=row["sku"],
            name=row["name"],
            price=float(row["price"]),
            stock=int(row["stock"]),
        )
        previous = dataset.get(record.sku)
        if previous is not None:
            logger.warning(
                f"⚠️ Duplicate SKU '{record.sku}' on line {row['line']} of {label}. Last occurrence wins."
            )
            if on_duplicate is not None:
                on_duplicate(previous, record)
        dataset[record.sku] = record

    skipped = sum(1 for _, fields in rows if fields) - len(df)
    logger.info(
        f"✅ Loaded {len(dataset)} records from {label} ({skipped} malformed rows skipped)."
    )
    return dataset
