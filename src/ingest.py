"""
Record ingestion: spreadsheet rows or manual form fields -> Entry.

Imported rows never fail: a malformed cell becomes 0 (numbers) or "" (text)
and the row is kept, so len(output) == len(rows). Manual entries are the
only thing that can be rejected, and rejection is signalled with None.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from pathlib import Path

import pandas as pd

import settings
from logging_setup import get_logger
from models import Entry

logger = get_logger("ecotrack.ingest")


def coerce_number(value) -> float:
    """Number-or-zero: NaN, infinities, negatives and unparsable text all give 0."""
    if value is None:
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        if pd.isna(value):
            return 0.0
    except (TypeError, ValueError):
        return 0.0
    try:
        x = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(x) or x < 0:
        return 0.0
    return x


def coerce_text(value) -> str:
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    return str(value).strip()


def _was_defaulted(raw, value: float) -> bool:
    text = coerce_text(raw)
    if value != 0.0 or not text:
        return False
    try:
        return float(text) != 0.0
    except ValueError:
        return True


def from_tabular_rows(rows) -> list[Entry]:
    """
    Map spreadsheet rows (dicts keyed by the exported column names) to entries.
    Output order follows input order.
    """
    entries: list[Entry] = []
    defaulted = 0

    for row in rows:
        if not isinstance(row, Mapping):
            row = {}

        raw_quoted = row.get(settings.COL_QUOTED)
        raw_final = row.get(settings.COL_FINAL)
        quoted = coerce_number(raw_quoted)
        final = coerce_number(raw_final)
        defaulted += _was_defaulted(raw_quoted, quoted) + _was_defaulted(raw_final, final)

        entries.append(
            Entry(
                supplier=coerce_text(row.get(settings.COL_SUPPLIER)),
                quoted_value=quoted,
                final_value=final,
                account_category=coerce_text(row.get(settings.COL_CATEGORY)),
                business_area=coerce_text(row.get(settings.COL_AREA)),
                period_label=coerce_text(row.get(settings.COL_PERIOD)),
                period_type=coerce_text(row.get(settings.COL_PERIOD_TYPE)),
            )
        )

    if defaulted:
        logger.debug("%d numeric cell(s) defaulted to 0 during import", defaulted)
    logger.debug("imported %d row(s)", len(entries))
    return entries


def _present(value) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def from_manual_fields(
    supplier_quoted,
    quoted_value,
    supplier_final,
    final_value,
    category=None,
    area=None,
    month=None,
    year=None,
    period_type=None,
):
    """
    Build one Entry from the manual form, or return None when a required field
    (both supplier names and both values) is missing.
    """
    required = (supplier_quoted, quoted_value, supplier_final, final_value)
    if not all(_present(v) for v in required):
        logger.info("manual entry incomplete; no record created")
        return None

    month = coerce_text(month)
    year = coerce_text(year)
    period_label = f"{month}/{year}" if month and year else ""

    return Entry(
        supplier=f"{coerce_text(supplier_quoted)} → {coerce_text(supplier_final)}",
        quoted_value=coerce_number(quoted_value),
        final_value=coerce_number(final_value),
        account_category=coerce_text(category),
        business_area=coerce_text(area),
        period_label=period_label,
        period_type=coerce_text(period_type),
    )


def load_rows(path) -> list[dict]:
    """Read the first sheet of a workbook (or a CSV file) into row dicts."""
    path = Path(path).expanduser()
    if not path.exists():
        raise FileNotFoundError(f"Missing data file: {path}")

    suffix = path.suffix.lower()
    if suffix in (".xlsx", ".xlsm", ".xls"):
        df = pd.read_excel(path, sheet_name=0, dtype=object)
    elif suffix == ".csv":
        df = pd.read_csv(path, dtype=object)
    else:
        raise ValueError(f"Unsupported file type: {path.suffix} (expected .xlsx or .csv)")

    df = df.dropna(how="all")
    return df.to_dict(orient="records")


def load_entries(path) -> list[Entry]:
    rows = load_rows(path)
    logger.info("loaded %d row(s) from %s", len(rows), Path(path).name)
    return from_tabular_rows(rows)
