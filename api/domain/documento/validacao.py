# api/domain/documento/validacao.py
#
# Checksum validation for CPF (11 digits) and CNPJ (14 digits).
#
# Design decisions:
#   - Both documents share the weighted-sum-mod-11 rule; only the weights
#     differ. CPF weights are a linear ramp (length + 1 - i). CNPJ weights are
#     the two literal Receita Federal tables, which do NOT follow a ramp.
#   - Input must already be digit-only. Punctuated forms ("111.444.777-35")
#     are rejected, not normalised.
#   - The boolean functions never raise: wrong type, wrong length, non-ASCII
#     digits and repeated-digit sequences all return False. Only
#     validate_document raises, and only DocumentoInvalidoError.
#
# Invariants:
#   - All functions are pure.
#   - "11111111111" and "11111111111111" (and every other repeated digit) are
#     invalid even though they satisfy the checksum.
from __future__ import annotations

import re

from .errors import DocumentoInvalidoError

CPF_TAMANHO = 11
CNPJ_TAMANHO = 14

_PESOS_CNPJ_1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_PESOS_CNPJ_2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

_APENAS_DIGITOS = re.compile(r"[0-9]+")


def _digito_verificador(digitos: list[int], pesos: tuple[int, ...] | list[int]) -> int:
    soma = sum(d * p for d, p in zip(digitos, pesos))
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


def _pesos_cpf(comprimento: int) -> list[int]:
    """Rampa linear: 10..2 para o 1o digito, 11..2 para o 2o."""
    return [comprimento + 1 - i for i in range(comprimento)]


def _digitos_se_estrutura_valida(documento: object, tamanho: int) -> list[int] | None:
    if not isinstance(documento, str) or len(documento) != tamanho:
        return None
    if not _APENAS_DIGITOS.fullmatch(documento):
        return None
    if len(set(documento)) == 1:
        return None
    return [int(c) for c in documento]


def is_valid_cpf(documento: object) -> bool:
    """True se `documento` e um CPF de 11 digitos com verificadores corretos."""
    digitos = _digitos_se_estrutura_valida(documento, CPF_TAMANHO)
    if digitos is None:
        return False

    d1 = _digito_verificador(digitos[:9], _pesos_cpf(9))
    d2 = _digito_verificador(digitos[:10], _pesos_cpf(10))
    return digitos[9] == d1 and digitos[10] == d2


def is_valid_cnpj(documento: object) -> bool:
    """True se `documento` e um CNPJ de 14 digitos com verificadores corretos."""
    digitos = _digitos_se_estrutura_valida(documento, CNPJ_TAMANHO)
    if digitos is None:
        return False

    d1 = _digito_verificador(digitos[:12], _PESOS_CNPJ_1)
    d2 = _digito_verificador(digitos[:13], _PESOS_CNPJ_2)
    return digitos[12] == d1 and digitos[13] == d2


def is_valid_document(documento: object) -> bool:
    return is_valid_cpf(documento) or is_valid_cnpj(documento)


def validate_document(documento: object) -> None:
    """Guarda: levanta DocumentoInvalidoError se nao for CPF nem CNPJ valido.

    Raises:
        DocumentoInvalidoError: carrying the offending value in ``.documento``.
    """
    if not is_valid_document(documento):
        raise DocumentoInvalidoError(documento)
