from __future__ import annotations

import settings
from models import AggregateResult, Entry
from text_normalizer import normalize

CURRENCY_SYMBOL = "R$"

UNINFORMED = "não informada"
UNINFORMED_PERIOD = "período não informado"


def format_brl(value) -> str:
    """1234.5 -> 'R$ 1.234,50' (pt-BR grouping, two decimals)."""
    x = round(float(value), 2)
    s = f"{abs(x):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    sign = "-" if x < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL} {s}"


def format_percent(value) -> str:
    return f"{float(value):.2f}%"


def describe_entry(entry: Entry, index: int) -> list[str]:
    """
    Sentences describing one negotiation, in report order.
    Free-text fields are normalized before being embedded; the period label is
    shown as recorded.
    """
    return [
        f"{index + 1}. Analisou-se a negociação referente a {normalize(entry.supplier)}.",
        f"Na área {normalize(entry.business_area or UNINFORMED)}, "
        f"vinculada à conta {normalize(entry.account_category or UNINFORMED)},",
        f"em {entry.period_label or UNINFORMED_PERIOD}.",
        f"O valor inicialmente cotado foi de {format_brl(entry.quoted_value)}, "
        f"enquanto o valor final ficou em {format_brl(entry.final_value)}, "
        f"gerando uma economia de {format_brl(entry.savings)} "
        f"({format_percent(entry.savings_percent)}).",
    ]


def describe_consolidated(agg: AggregateResult) -> list[str]:
    # category shown verbatim, as it appears in the selector list
    return [
        f"No consolidado geral, o valor total cotado foi de {format_brl(agg.total_quoted)}, "
        f"enquanto o valor final negociado foi de {format_brl(agg.total_final)}.",
        f"Esse resultado representou uma economia absoluta de {format_brl(agg.absolute_savings)}, "
        f"equivalente a {format_percent(agg.savings_percent)}. "
        f"A conta mais utilizada foi {agg.top_category}.",
    ]


def narrative_sections(entries) -> list[list[str]]:
    return [describe_entry(e, i) for i, e in enumerate(entries)]


def summary_rows(agg: AggregateResult) -> list[tuple[str, str]]:
    """Label/value pairs for the 'Resumo' block."""
    top = agg.top_category
    if top != settings.NO_CATEGORY:
        top = f"{top} ({format_brl(agg.top_category_value)})"
    return [
        ("Valor Cotado", format_brl(agg.total_quoted)),
        ("Valor Final", format_brl(agg.total_final)),
        ("Economia Absoluta", format_brl(agg.absolute_savings)),
        ("% Economizada", format_percent(agg.savings_percent)),
        ("Conta mais utilizada", top),
    ]
