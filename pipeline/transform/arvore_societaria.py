# pipeline/transform/arvore_societaria.py
#
# Build the in-memory ownership tree from the participations DataFrame.
#
# Design decisions:
#   - Exactly one row without controladora is the root. Zero or several roots
#     are rejected: the aggregator takes a single partner.
#   - Children of a company are ALL rows whose controladora equals the
#     company's documento, in file order ("ordem"). If the same company
#     documento appears in several rows (shared subsidiary), every occurrence
#     gets the same children.
#   - Shared subtrees are built once and reused (memo keyed by documento, tipo
#     and valor_total). The entities are frozen, so sharing is safe and keeps
#     heavily shared groups linear in size.
#   - Cycles (A owns B owns A) cannot be expressed with frozen tuples. The
#     back-edge becomes a childless PessoaJuridica for the ancestor; its
#     document was already counted higher up, so the total is unchanged.
#     Back-edge nodes are not memoized.
#   - No checksum validation: that happens in calcular_patrimonio_total.
#
# Invariants:
#   - The returned tree contains one node per (row, path), with children in
#     file order. A company never appears twice on one root-to-leaf path with
#     children below the second occurrence.
#   - valor_total strings are converted with Decimal(str), never float.
from __future__ import annotations

from collections import defaultdict
from decimal import Decimal

import polars as pl

from api.domain.documento.value_objects import mascarar
from api.domain.patrimonio.entities import PessoaFisica, PessoaJuridica, Socio


class ArvoreSocietariaError(ValueError):
    """Participacoes que nao formam uma arvore com raiz unica."""


def construir_arvore(df: pl.DataFrame) -> Socio:
    """Turn validated participations into a PessoaFisica/PessoaJuridica tree.

    Args:
        df: DataFrame returned by validate_socios().

    Returns:
        The root partner.

    Raises:
        ArvoreSocietariaError: no root, more than one root, a controladora that
            is not listed as an "empresa".
    """
    linhas = df.sort("ordem").to_dicts()

    raizes = [linha for linha in linhas if linha["controladora"] is None]
    if not raizes:
        raise ArvoreSocietariaError("Nenhuma participacao sem controladora: arvore sem raiz")
    if len(raizes) > 1:
        raise ArvoreSocietariaError(f"Arvore com {len(raizes)} raizes; esperada exatamente 1")

    filhos: dict[str, list[dict[str, object]]] = defaultdict(list)
    for linha in linhas:
        if linha["controladora"] is not None:
            filhos[str(linha["controladora"])].append(linha)

    empresas = {linha["documento"] for linha in linhas if linha["tipo"] == "empresa"}
    pessoas = {linha["documento"] for linha in linhas if linha["tipo"] == "pessoa"}
    for controladora in filhos:
        if controladora in empresas:
            continue
        if controladora in pessoas:
            raise ArvoreSocietariaError(f"Controladora {mascarar(controladora)} nao e empresa")
        raise ArvoreSocietariaError(f"Controladora {mascarar(controladora)} nao encontrada")

    memo: dict[tuple[object, object, object], Socio] = {}

    def _montar(linha: dict[str, object], caminho: frozenset[object]) -> Socio:
        chave = (linha["documento"], linha["tipo"], linha["valor_total"])
        if chave in memo:
            return memo[chave]

        documento = linha["documento"]
        valor = Decimal(str(linha["valor_total"]))
        if linha["tipo"] == "pessoa":
            socio: Socio = PessoaFisica(documento, valor)  # type: ignore[arg-type]
        else:
            if documento in caminho:
                return PessoaJuridica(documento, valor, ())  # type: ignore[arg-type]
            socios = tuple(_montar(f, caminho | {documento}) for f in filhos.get(str(documento), []))
            socio = PessoaJuridica(documento, valor, socios)  # type: ignore[arg-type]

        memo[chave] = socio
        return socio

    return _montar(raizes[0], frozenset())
