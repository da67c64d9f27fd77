import pytest

from metrics import aggregate
from models import Entry
from narrative import describe_consolidated, describe_entry, format_brl, format_percent, summary_rows


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, "R$ 0,00"),
        (1234.5, "R$ 1.234,50"),
        (1234567.891, "R$ 1.234.567,89"),
        (-200, "-R$ 200,00"),
        (0.004, "R$ 0,00"),
    ],
)
def test_format_brl(value, expected):
    assert format_brl(value) == expected


def test_format_percent():
    assert format_percent(13.3333) == "13.33%"
    assert format_percent(0) == "0.00%"


def test_describe_entry_fills_template():
    entry = Entry(
        supplier="Auto Peças → Pneus",
        quoted_value=1000,
        final_value=800,
        business_area="Escritório",
    )
    lines = describe_entry(entry, 0)

    assert lines == [
        "1. Analisou-se a negociação referente a Auto Pecas Pneus.",
        "Na área Escritorio, vinculada à conta nao informada,",
        "em período não informado.",
        "O valor inicialmente cotado foi de R$ 1.000,00, enquanto o valor final ficou em R$ 800,00, "
        "gerando uma economia de R$ 200,00 (20.00%).",
    ]


def test_describe_entry_keeps_period_label_and_numbers_by_index():
    entry = Entry(supplier="A", quoted_value=0, final_value=50, account_category="X", period_label="Março/2025")
    lines = describe_entry(entry, 4)

    assert lines[0].startswith("5. ")
    assert lines[2] == "em Março/2025."
    assert "(0.00%)" in lines[3]
    assert "-R$ 50,00" in lines[3]


def test_consolidated_shows_category_verbatim():
    entries = [Entry(supplier="A", quoted_value=1500, final_value=1300, account_category="5110502 Pneus e Câmaras (Veicular)")]
    lines = describe_consolidated(aggregate(entries))

    assert lines[0] == (
        "No consolidado geral, o valor total cotado foi de R$ 1.500,00, "
        "enquanto o valor final negociado foi de R$ 1.300,00."
    )
    assert lines[1].endswith("A conta mais utilizada foi 5110502 Pneus e Câmaras (Veicular).")
    assert "R$ 200,00, equivalente a 13.33%" in lines[1]


def test_consolidated_for_empty_entries():
    lines = describe_consolidated(aggregate([]))
    assert "R$ 0,00" in lines[0]
    assert "equivalente a 0.00%" in lines[1]
    assert lines[1].endswith("foi Nenhuma.")


def test_summary_rows(sample_entries):
    rows = dict(summary_rows(aggregate(sample_entries)))
    assert rows["Economia Absoluta"] == "R$ 200,00"
    assert rows["% Economizada"] == "13.33%"
    assert rows["Conta mais utilizada"] == "X (R$ 1.300,00)"
    assert dict(summary_rows(aggregate([])))["Conta mais utilizada"] == "Nenhuma"
