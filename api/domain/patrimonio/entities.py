# api/domain/patrimonio/entities.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TypeAlias


@dataclass(frozen=True)
class PessoaFisica:
    """Socio pessoa fisica. Folha da arvore societaria."""
    documento: str
    valor_total: Decimal


@dataclass(frozen=True)
class PessoaJuridica:
    """Socio pessoa juridica. Possui seus proprios socios, em ordem.

    O valor_total declarado da empresa e o valor dos seus socios sao
    distintos e ambos entram no patrimonio.
    """
    documento: str
    valor_total: Decimal
    socios: tuple[Socio, ...] = ()


Socio: TypeAlias = PessoaFisica | PessoaJuridica
