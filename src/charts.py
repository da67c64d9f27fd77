"""
Chart renderings for the report's image sections.

Each chart is drawn with matplotlib and returned as PNG bytes; the composer
only sees the bytes. With no entries every chart is None and the report
simply has no chart sections.
"""

from __future__ import annotations

from io import BytesIO

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

import settings  # noqa: E402
from logging_setup import get_logger  # noqa: E402
from metrics import aggregate, category_breakdown, entries_frame  # noqa: E402

logger = get_logger("ecotrack.charts")

COLORS = ["#1e3a8a", "#3b82f6", "#10b981", "#f59e0b", "#ef4444"]
QUOTED_COLOR = "#1e3a8a"
FINAL_COLOR = "#3b82f6"


def _to_png(fig) -> bytes:
    buf = BytesIO()
    fig.tight_layout()
    fig.savefig(buf, format="png", dpi=settings.CHART_DPI, facecolor="white")
    plt.close(fig)
    return buf.getvalue()


def _grouped_bars(labels, quoted, final, title: str) -> bytes:
    fig, ax = plt.subplots(figsize=(10, 3.6))
    x = np.arange(len(labels))
    ax.bar(x - 0.2, quoted, width=0.4, color=QUOTED_COLOR, label="Valor Inicial")
    ax.bar(x + 0.2, final, width=0.4, color=FINAL_COLOR, label="Valor Final")
    ax.set_xticks(x)
    ax.set_xticklabels(labels, rotation=25, ha="right", fontsize=8)
    ax.set_title(title, fontsize=11)
    ax.grid(axis="y", linestyle="--", alpha=0.5)
    ax.legend()
    return _to_png(fig)


def pie_chart(entries):
    agg = aggregate(entries)
    if not entries or (agg.total_quoted <= 0 and agg.total_final <= 0):
        return None

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.pie(
        [agg.total_quoted, agg.total_final],
        labels=["Valor Inicial", "Valor Final"],
        colors=COLORS[:2],
        autopct="%1.1f%%",
    )
    ax.set_title("Gráfico Comparativo – Pizza", fontsize=11)
    ax.axis("equal")
    return _to_png(fig)


def supplier_chart(entries):
    df = entries_frame(entries)
    if df.empty:
        return None
    return _grouped_bars(df["supplier"], df["quoted"], df["final"], "Gráfico Comparativo – Fornecedores")


def category_chart(entries):
    grp = category_breakdown(entries)
    if grp.empty:
        return None
    return _grouped_bars(grp["category"], grp["quoted"], grp["final"], "Gráfico Comparativo – Conta Razão")


_RENDERERS = {
    "pie": pie_chart,
    "suppliers": supplier_chart,
    "categories": category_chart,
}


def render_charts(entries) -> dict:
    entries = tuple(entries)
    return {name: _RENDERERS[name](entries) for name in settings.CHART_ORDER}


def chart_source_for(entries):
    """
    Chart source for composer.compose: renders the requested chart on demand
    and returns its PNG bytes (None for unknown names or nothing to plot).
    """
    entries = tuple(entries)

    def source(name: str):
        renderer = _RENDERERS.get(name)
        if renderer is None:
            logger.warning("unknown chart %r", name)
            return None
        return renderer(entries)

    return source
