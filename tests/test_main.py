import settings
from export_excel import export_excel
from generate_data import generate_synthetic_negotiations
from ingest import from_tabular_rows
from main import main


def test_synthetic_negotiations_are_deterministic():
    a = generate_synthetic_negotiations(rows=12, seed=3, year=2025)
    b = generate_synthetic_negotiations(rows=12, seed=3, year=2025)

    assert list(a.columns) == settings.COLUMNS
    assert len(a) == 12
    assert a.equals(b)
    assert (a[settings.COL_QUOTED] > 0).all()
    assert (a[settings.COL_FINAL] > 0).all()
    assert a[settings.COL_PERIOD].str.endswith("/2025").all()


def test_main_writes_both_artifacts(tmp_path):
    df = generate_synthetic_negotiations(rows=8, seed=1, year=2025)
    source = export_excel(from_tabular_rows(df.to_dict(orient="records")), tmp_path / "entrada.xlsx")

    main(source)

    assert (settings.OUTPUT_DIR / settings.EXCEL_FILENAME).exists()
    assert (settings.OUTPUT_DIR / settings.PDF_FILENAME).read_bytes().startswith(b"%PDF")
