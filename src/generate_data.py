import random
from datetime import date

import numpy as np
import pandas as pd

import settings
from export_excel import export_excel
from ingest import from_tabular_rows
from logging_setup import configure_logging, get_logger

logger = get_logger("ecotrack.generate_data")

# Selector lists from the entry form
ACCOUNT_CATEGORIES = [
    "5110507 Veículos (Veicular)",
    "5110503 Partes, Peças e Aces (Veicular)",
    "5110502 Pneus e Câmaras (Veicular)",
    "5210405 Reparo/Cons. (Reparos e Consertos)",
    "5210401 Predial (Predial)",
    "5210404 Móveis/Utens. (Móveis e Utensílios)",
    "5210403 Equipamentos (Equipamentos)",
    "5211915 Limpeza e Conservação (Limpeza e Conservação)",
    "5111923 Indenização P/Danos (Danos)",
]
AREAS = ["CD Torquato", "CD Turismo", "CD 3", "Loja", "Escritório", "Farma"]
MONTHS = [
    "Janeiro", "Fevereiro", "Março", "Abril", "Maio", "Junho",
    "Julho", "Agosto", "Setembro", "Outubro", "Novembro", "Dezembro",
]
PERIOD_TYPES = ["Mensal", "Semestral", "Anual"]
SUPPLIERS = [
    "Auto Peças Silva", "Pneus Brasil", "Construtora Alfa", "Clean Serv",
    "Móveis Paraná", "TecEquip", "Reparos Já", "Seguradora Norte",
]


def _apply_outcome(quoted: float, outcome: str) -> float:
    """
    Final value for a quote under a negotiation outcome.
    DISCOUNT is the common case; FLAT and OVERRUN keep zero/negative savings in the mix.
    """
    if outcome == "DISCOUNT":
        return quoted * random.uniform(0.70, 0.97)
    if outcome == "FLAT":
        return quoted
    if outcome == "OVERRUN":
        return quoted * random.uniform(1.01, 1.12)
    # Unknown outcome -> treat as discount
    return _apply_outcome(quoted, "DISCOUNT")


def generate_synthetic_negotiations(rows: int = 25, seed: int = 42, year: int | None = None) -> pd.DataFrame:
    """
    Synthetic negotiation sheet with the exported column layout.
    Quotes are log-normal around R$ 8.000; outcomes are ~75% discount,
    ~15% flat, ~10% overrun.
    """
    random.seed(seed)
    np.random.seed(seed)
    year = year or date.today().year

    quotes = np.round(np.random.lognormal(mean=np.log(8_000), sigma=0.8, size=rows), 2)

    out = []
    for i in range(rows):
        roll = random.random()
        if roll < 0.75:
            outcome = "DISCOUNT"
        elif roll < 0.90:
            outcome = "FLAT"
        else:
            outcome = "OVERRUN"

        quoted = float(quotes[i])
        final = round(_apply_outcome(quoted, outcome), 2)
        first, second = random.sample(SUPPLIERS, 2)

        out.append({
            settings.COL_SUPPLIER: f"{first} → {second}",
            settings.COL_QUOTED: quoted,
            settings.COL_FINAL: final,
            settings.COL_CATEGORY: random.choice(ACCOUNT_CATEGORIES),
            settings.COL_AREA: random.choice(AREAS),
            settings.COL_PERIOD: f"{random.choice(MONTHS)}/{year}",
            settings.COL_PERIOD_TYPE: random.choice(PERIOD_TYPES),
        })

    return pd.DataFrame(out, columns=settings.COLUMNS)


def main():
    configure_logging()
    df = generate_synthetic_negotiations(rows=25, seed=42)

    entries = from_tabular_rows(df.to_dict(orient="records"))
    out_path = export_excel(entries, settings.DATA_PATH)

    logger.info("Synthetic negotiation data generated: %s", out_path)
    logger.info("Rows per account category:\n%s", df[settings.COL_CATEGORY].value_counts().to_string())


if __name__ == "__main__":
    main()
