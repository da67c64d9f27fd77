import sys

from rich.console import Console
from rich.table import Table

import settings
from charts import chart_source_for
from export_excel import export_excel
from export_pdf import export_pdf
from ingest import load_entries
from logging_setup import configure_logging
from metrics import aggregate, category_breakdown
from models import RecordSet
from narrative import format_brl, format_percent, summary_rows


def _make_kv_table(title: str, rows: list[tuple[str, str]]) -> Table:
    t = Table(title=title, show_lines=True)
    t.add_column("Campo")
    t.add_column("Valor", overflow="fold")
    for k, v in rows:
        t.add_row(k, v)
    return t


def _entries_table(records: RecordSet) -> Table:
    t = Table(title="Negociações", show_lines=True, expand=True)
    t.add_column("#", justify="right", no_wrap=True)
    t.add_column("Fornecedor", overflow="fold", ratio=3)
    t.add_column("Cotado", justify="right", no_wrap=True)
    t.add_column("Final", justify="right", no_wrap=True)
    t.add_column("Economia", justify="right", no_wrap=True)
    t.add_column("Conta Razão", overflow="fold", ratio=3)
    t.add_column("Área", overflow="fold", ratio=1)
    t.add_column("Mês/Ano", no_wrap=True)
    for i, e in enumerate(records, start=1):
        t.add_row(
            str(i),
            e.supplier,
            format_brl(e.quoted_value),
            format_brl(e.final_value),
            f"{format_brl(e.savings)} ({format_percent(e.savings_percent)})",
            e.account_category,
            e.business_area,
            e.period_label,
        )
    return t


def _category_table(records: RecordSet) -> Table:
    grp = category_breakdown(records)
    t = Table(title="Por Conta Razão", show_lines=True)
    t.add_column("Conta Razão", overflow="fold")
    t.add_column("Cotado", justify="right", no_wrap=True)
    t.add_column("Final", justify="right", no_wrap=True)
    t.add_column("Economia", justify="right", no_wrap=True)
    for _, r in grp.iterrows():
        t.add_row(str(r["category"]), format_brl(r["quoted"]), format_brl(r["final"]), format_brl(r["savings"]))
    return t


def main(data_path=None):
    configure_logging()
    console = Console()

    data_path = data_path or (sys.argv[1] if len(sys.argv) > 1 else settings.DATA_PATH)

    records = RecordSet()
    records.extend(load_entries(data_path))

    console.print(
        _make_kv_table(
            "EcoTrack – Relatório Comparativo",
            [
                ("Arquivo", str(data_path)),
                ("Negociações", str(len(records))),
            ],
        )
    )
    console.print()

    if len(records):
        console.print(_entries_table(records))
        console.print()
        console.print(_category_table(records))
        console.print()

    agg = aggregate(records)
    console.print(_make_kv_table("Resumo", summary_rows(agg)))
    console.print()

    snapshot = records.snapshot()
    xlsx_path = export_excel(snapshot)
    export_pdf(snapshot, chart_source=chart_source_for(snapshot))

    console.print(f"Planilha: {xlsx_path}")
    console.print(f"PDF: {settings.OUTPUT_DIR / settings.PDF_FILENAME}")


if __name__ == "__main__":
    main()
