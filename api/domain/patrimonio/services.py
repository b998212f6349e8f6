# api/domain/patrimonio/services.py
#
# Pure domain service: total asset value of a partner ownership tree.
#
# Design decisions:
#   - The "already processed" document set is created per top-level call and
#     threaded through the recursion as an explicit argument. There is no
#     module or instance state, so concurrent calls never interfere.
#   - A document seen twice contributes 0 the second time and its subtree is
#     not visited again. The first occurrence wins, even if a later
#     occurrence declares a different valor_total.
#   - Every visited node is validated BEFORE the duplicate check, so an
#     invalid document aborts the call even when it repeats.
#   - Amounts are Decimal end to end; the sum is rounded once, at the end,
#     with ROUND_HALF_UP (1234.565 -> 1234.57).
#
# Invariants:
#   - calcular_patrimonio_total never mutates the tree.
#   - DocumentoInvalidoError propagates unchanged; no partial total exists.
#   - Terminates on cyclic graphs: a revisited document is never expanded.
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from api.domain.documento.validacao import validate_document

from .entities import PessoaJuridica, Socio

_CENTAVOS = Decimal("0.01")


def arredondar_valor(valor: Decimal) -> Decimal:
    """Arredonda para 2 casas, meio para cima."""
    return valor.quantize(_CENTAVOS, rounding=ROUND_HALF_UP)


def calcular_patrimonio_total(socio: Socio) -> Decimal:
    """Soma o valor do socio e de todos os socios distintos alcancaveis.

    Args:
        socio: Raiz da arvore (PessoaFisica ou PessoaJuridica).

    Returns:
        Total arredondado para 2 casas decimais.

    Raises:
        DocumentoInvalidoError: if any document in the tree is neither a
            valid CPF nor a valid CNPJ.
    """
    processados: set[str] = set()
    total = _valor_recursivo(socio, processados)
    return arredondar_valor(total)


def documentos_distintos(socio: Socio) -> frozenset[str]:
    """Documentos alcancaveis a partir de `socio`, cada um uma vez. Nao valida."""
    vistos: set[str] = set()
    pilha: list[Socio] = [socio]
    while pilha:
        atual = pilha.pop()
        if atual.documento in vistos:
            continue
        vistos.add(atual.documento)
        if isinstance(atual, PessoaJuridica):
            pilha.extend(atual.socios)
    return frozenset(vistos)


def _valor_recursivo(socio: Socio, processados: set[str]) -> Decimal:
    validate_document(socio.documento)

    if socio.documento in processados:
        return Decimal("0")
    processados.add(socio.documento)

    total = Decimal(socio.valor_total)
    if isinstance(socio, PessoaJuridica):
        total += _valor_socios(socio, processados)
    return total


def _valor_socios(empresa: PessoaJuridica, processados: set[str]) -> Decimal:
    total = Decimal("0")
    for socio in empresa.socios:
        total += _valor_recursivo(socio, processados)
    return total
