# pipeline/sources/socios/validate.py
#
# Structural checks of the participations DataFrame.
#
# Design decisions:
#   - Unlike the staging validators, bad rows are NOT dropped. Every row is a
#     partner whose value belongs in the total, so an unknown tipo or an
#     unparseable valor_total aborts the load. The error lists the CSV line
#     numbers (header is line 1) so the operator can fix the file.
#   - Rows with a malformed documento pass through. Checksum validation is the
#     domain's job and rejects the whole tree there.
#   - Exact duplicate participations (same documento, tipo, valor_total and
#     controladora) are collapsed, keeping the first. They cannot change the
#     total. The same documento under two different controladoras is a shared
#     partner and is preserved.
#
# Invariants:
#   - On return, tipo is "pessoa" or "empresa" for every row.
#   - On return, valor_total matches ^\d+(\.\d+)?$ (non-negative, dot separator).
#   - Input order (column "ordem") is preserved.
from __future__ import annotations

import polars as pl

from pipeline.log import log

TIPOS_VALIDOS = ["pessoa", "empresa"]

# ordem 0 is the first data row, which is line 2 of the file.
_PRIMEIRA_LINHA_DE_DADOS = 2


class ParticipacaoInvalidaError(ValueError):
    """Linhas do CSV com tipo ou valor_total invalido."""

    def __init__(self, motivo: str, linhas: list[int]) -> None:
        self.motivo = motivo
        self.linhas = linhas
        super().__init__(f"{motivo} nas linhas {', '.join(str(n) for n in linhas)}")


def _linhas(df: pl.DataFrame) -> list[int]:
    return [int(ordem) + _PRIMEIRA_LINHA_DE_DADOS for ordem in df["ordem"].to_list()]


def validate_socios(df: pl.DataFrame) -> pl.DataFrame:
    """Validate the DataFrame returned by parse_socios.

    Steps applied:
        1. Reject rows whose tipo is not "pessoa" or "empresa".
        2. Reject rows whose valor_total is null or not a non-negative decimal.
        3. Deduplicate identical participations, keeping the first.

    Args:
        df: DataFrame returned by parse_socios().

    Returns:
        DataFrame with the same columns, without exact duplicates.

    Raises:
        ParticipacaoInvalidaError: on the first failing step, listing every
            offending line of that step.
    """
    # Step 1
    tipo_ok = pl.col("tipo").is_in(TIPOS_VALIDOS).fill_null(False)
    sem_tipo = df.filter(~tipo_ok)
    if not sem_tipo.is_empty():
        raise ParticipacaoInvalidaError("TIPO invalido", _linhas(sem_tipo))

    # Step 2
    valor_ok = pl.col("valor_total").str.contains(r"^\d+(\.\d+)?$").fill_null(False)
    sem_valor = df.filter(~valor_ok)
    if not sem_valor.is_empty():
        raise ParticipacaoInvalidaError("VALOR_TOTAL invalido", _linhas(sem_valor))

    # Step 3
    antes = len(df)
    df = df.unique(
        subset=["documento", "tipo", "valor_total", "controladora"],
        keep="first",
        maintain_order=True,
    )
    duplicadas = antes - len(df)
    if duplicadas:
        log(f"  {duplicadas} participacoes duplicadas ignoradas", nivel="WARNING")
    return df
