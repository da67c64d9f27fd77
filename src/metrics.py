# src/metrics.py
from __future__ import annotations

import pandas as pd

import settings
from models import AggregateResult, Entry


def category_key(entry: Entry) -> str:
    return entry.account_category or settings.UNSPECIFIED_CATEGORY


def aggregate(entries) -> AggregateResult:
    """
    Totals, savings and the leading account category for the current entries.

    Single pass in entry order. The per-category map keeps first-seen order and
    the leader only changes on a strictly greater sum, so on a tie the category
    seen first wins.
    """
    total_quoted = 0.0
    total_final = 0.0
    per_category: dict[str, float] = {}

    for e in entries:
        total_quoted += e.quoted_value
        total_final += e.final_value
        key = category_key(e)
        per_category[key] = per_category.get(key, 0.0) + e.final_value

    top_category = None
    top_value = 0.0
    for category, value in per_category.items():
        if top_category is None or value > top_value:
            top_category = category
            top_value = value

    absolute_savings = total_quoted - total_final
    savings_percent = absolute_savings / total_quoted * 100 if total_quoted > 0 else 0.0

    return AggregateResult(
        total_quoted=total_quoted,
        total_final=total_final,
        absolute_savings=absolute_savings,
        savings_percent=savings_percent,
        per_category_final_sum=per_category,
        top_category=top_category if top_category is not None else settings.NO_CATEGORY,
        top_category_value=top_value,
    )


def entries_frame(entries) -> pd.DataFrame:
    """One row per entry with the fields the charts and console tables need."""
    rows = [
        {
            "supplier": e.supplier,
            "category": category_key(e),
            "quoted": e.quoted_value,
            "final": e.final_value,
            "savings": e.savings,
        }
        for e in entries
    ]
    return pd.DataFrame(rows, columns=["supplier", "category", "quoted", "final", "savings"])


def category_breakdown(entries) -> pd.DataFrame:
    """
    Quoted / final / savings summed per account category.
    Returns a dataframe with: category, quoted, final, savings (first-seen order).
    """
    df = entries_frame(entries)
    if df.empty:
        return pd.DataFrame(columns=["category", "quoted", "final", "savings"])

    grp = (
        df.groupby("category", sort=False)
        .agg(quoted=("quoted", "sum"), final=("final", "sum"), savings=("savings", "sum"))
        .reset_index()
    )
    return grp
