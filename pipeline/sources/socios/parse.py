# pipeline/sources/socios/parse.py
#
# Parse the ownership CSV (one row per partner participation).
#
# Design decisions:
#   - Every column is read as string (infer_schema_length=0). Documents are
#     never numeric: "02712943961" must keep its leading zero.
#   - A partner owned by several companies appears in several rows, one per
#     controlling company. The tree builder turns those into shared nodes.
#   - Row order is captured in "ordem" before any filtering so that children
#     keep the file order after validation drops rows.
#   - No checksum validation here. A malformed document flows through to the
#     domain, which rejects the whole tree.
#
# Invariants:
#   - Output columns: ordem (u32), documento, tipo, valor_total, controladora
#     (all str, null when empty).
#   - tipo is lower-cased; all string columns are stripped.
from __future__ import annotations

from pathlib import Path

import polars as pl

COLUNAS = {
    "DOCUMENTO": "documento",
    "TIPO": "tipo",
    "VALOR_TOTAL": "valor_total",
    "DOCUMENTO_CONTROLADORA": "controladora",
}


def parse_socios(raw_path: Path, separator: str = ";") -> pl.DataFrame:
    """Parse the ownership CSV into a participations DataFrame.

    Args:
        raw_path:  Path to a UTF-8 CSV with header
                   DOCUMENTO;TIPO;VALOR_TOTAL;DOCUMENTO_CONTROLADORA.
        separator: Field separator.

    Returns:
        DataFrame with one row per participation, in file order.

    Raises:
        ValueError: if a required column is missing from the header.
    """
    raw = pl.read_csv(
        raw_path,
        separator=separator,
        infer_schema_length=0,
        null_values=["", "NULL"],
    )

    faltantes = sorted(set(COLUNAS) - set(raw.columns))
    if faltantes:
        raise ValueError(f"Colunas ausentes em {raw_path.name}: {', '.join(faltantes)}")

    df = raw.select([pl.col(origem).str.strip_chars().alias(destino) for origem, destino in COLUNAS.items()])
    df = df.with_columns(pl.col("tipo").str.to_lowercase())

    # strip_chars can turn "  " into "": normalise to null.
    df = df.with_columns(
        [
            pl.when(pl.col(c) == "").then(None).otherwise(pl.col(c)).alias(c)
            for c in COLUNAS.values()
        ]
    )

    return df.with_row_index("ordem")
