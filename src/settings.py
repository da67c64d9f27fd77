"""
Central configuration for report paths, page geometry and report literals.

All layout values are in millimetres on an A4 page, measured from the top
edge (the renderer converts to reportlab points). Paths can be redirected with
ECOTRACK_DATA_DIR / ECOTRACK_OUTPUT_DIR.
"""

from __future__ import annotations

import os
from pathlib import Path


# Repo-relative paths (no local machine paths)
PROJECT_ROOT = Path(__file__).resolve().parents[1]
DATA_DIR = Path(os.getenv("ECOTRACK_DATA_DIR", PROJECT_ROOT / "data"))
OUTPUT_DIR = Path(os.getenv("ECOTRACK_OUTPUT_DIR", PROJECT_ROOT / "reports"))
DATA_PATH = DATA_DIR / "negociacoes.xlsx"

PDF_FILENAME = "relatorio_ecotrack.pdf"
EXCEL_FILENAME = "ecotrack.xlsx"
SHEET_NAME = "Relatorio"

# Wire contract shared by import and export
COL_SUPPLIER = "Fornecedor"
COL_QUOTED = "Valor Cotado (R$)"
COL_FINAL = "Valor Final (R$)"
COL_CATEGORY = "Conta Razão"
COL_AREA = "Área"
COL_PERIOD = "Mês/Ano"
COL_PERIOD_TYPE = "Período"

COLUMNS = [
    COL_SUPPLIER,
    COL_QUOTED,
    COL_FINAL,
    COL_CATEGORY,
    COL_AREA,
    COL_PERIOD,
    COL_PERIOD_TYPE,
]

UNSPECIFIED_CATEGORY = "Não informada"
NO_CATEGORY = "Nenhuma"

# ----------------------------
# Page geometry (mm)
# ----------------------------
PAGE_WIDTH = 210.0
PAGE_HEIGHT = 297.0

COVER_TITLE_Y = 10.0
COVER_TITLE_GAP = 10.0

IMAGE_X = 15.0
IMAGE_WIDTH = 180.0
IMAGE_GAP = 10.0

TOP_MARGIN = 20.0
BOTTOM_LIMIT = 280.0
HEADING_GAP = 10.0

TEXT_X = 15.0
COLUMN_WIDTH = 180.0
LINE_HEIGHT = 7.0
ENTRY_GAP = 5.0
CONSOLIDATED_GAP = 5.0

# ----------------------------
# Fonts (pt)
# ----------------------------
FONT = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
TITLE_SIZE = 18
HEADING_SIZE = 16
BODY_SIZE = 12

REPORT_TITLE = "Relatório de Negociações"
NARRATIVE_HEADING = "Análise do Relatório"

# Fixed acquisition order for the chart section
CHART_ORDER = ("pie", "suppliers", "categories")

# Chart rasterization
CHART_DPI = 200
