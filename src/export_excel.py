"""
Spreadsheet export: entries back to the seven named columns.

The column names are the same ones ingest.from_tabular_rows reads, so an
exported workbook can be imported again.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

import settings
from logging_setup import get_logger

logger = get_logger("ecotrack.export_excel")


def to_tabular_rows(entries) -> list[dict]:
    return [
        {
            settings.COL_SUPPLIER: e.supplier,
            settings.COL_QUOTED: e.quoted_value,
            settings.COL_FINAL: e.final_value,
            settings.COL_CATEGORY: e.account_category or "",
            settings.COL_AREA: e.business_area or "",
            settings.COL_PERIOD: e.period_label or "",
            settings.COL_PERIOD_TYPE: e.period_type or "",
        }
        for e in entries
    ]


def to_frame(entries) -> pd.DataFrame:
    return pd.DataFrame(to_tabular_rows(entries), columns=settings.COLUMNS)


def export_excel(entries, out_path=None) -> Path:
    """Write a single-sheet workbook (sheet settings.SHEET_NAME) and return its path."""
    path = Path(out_path) if out_path else settings.OUTPUT_DIR / settings.EXCEL_FILENAME
    path.parent.mkdir(exist_ok=True, parents=True)

    df = to_frame(entries)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=settings.SHEET_NAME)

    logger.info("Workbook generated: %s (%d row(s))", path, len(df))
    return path
