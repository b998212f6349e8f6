# pipeline/amostra.py
#
# Grupo societario de exemplo, usado pelo CLI quando nenhum arquivo e informado.
#
# O CPF 31464238049 aparece duas vezes: socio direto da empresa raiz e socio da
# subsidiaria 20955843000159. O total esperado conta esse valor uma unica vez,
# ou seja, e a soma simples de TOTAIS.
from __future__ import annotations

from decimal import Decimal

from api.domain.patrimonio.entities import PessoaFisica, PessoaJuridica, Socio

TOTAIS: tuple[Decimal, ...] = (
    Decimal("489678.98"),
    Decimal("879546.25"),
    Decimal("145789.12"),
    Decimal("478578.25"),
    Decimal("145528.12"),
    Decimal("999457"),
    Decimal("556587"),
)

DOCUMENTO_EMPRESA_RAIZ = "41720647000175"


def gerar_socios() -> list[Socio]:
    """Socios diretos da empresa raiz, na ordem de visita."""
    socio1 = PessoaFisica("42156492859", TOTAIS[0])
    socio2 = PessoaFisica("02712943961", TOTAIS[1])
    socio3 = PessoaFisica("31464238049", TOTAIS[2])
    socio4 = PessoaFisica("98089811868", TOTAIS[3])
    socio5 = PessoaFisica("21960671804", TOTAIS[4])
    subsidiaria = PessoaJuridica("20955843000159", TOTAIS[5], (socio1, socio2, socio3))

    return [socio3, socio4, socio5, subsidiaria]


def gerar_grupo() -> PessoaJuridica:
    return PessoaJuridica(DOCUMENTO_EMPRESA_RAIZ, TOTAIS[6], tuple(gerar_socios()))
