# api/domain/documento/value_objects.py
from __future__ import annotations

from enum import StrEnum

from .errors import DocumentoInvalidoError
from .validacao import is_valid_cnpj, is_valid_cpf


class TipoDocumento(StrEnum):
    CPF = "cpf"    # Pessoa fisica, 11 digitos
    CNPJ = "cnpj"  # Pessoa juridica, 14 digitos


def tipo_documento(documento: str) -> TipoDocumento:
    """Classifica um documento valido. Levanta DocumentoInvalidoError caso contrario."""
    if is_valid_cpf(documento):
        return TipoDocumento.CPF
    if is_valid_cnpj(documento):
        return TipoDocumento.CNPJ
    raise DocumentoInvalidoError(documento)


def mascarar(documento: object) -> str:
    """Forma segura para logs e mensagens de erro.

    CPF valido vira ***.XXX.XXX-** (LGPD: nunca logar CPF completo). CNPJ e dado
    publico e sai formatado. Qualquer outra coisa e reduzida aos 3 ultimos
    caracteres, pois pode ser um CPF com digito errado. Valores que nao sao
    str viram "***".
    """
    if is_valid_cnpj(documento):
        d = str(documento)
        return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"
    if is_valid_cpf(documento):
        d = str(documento)
        return f"***.{d[3:6]}.{d[6:9]}-**"
    if not isinstance(documento, str):
        return "***"
    texto = documento
    if len(texto) <= 3:
        return "***"
    return "*" * (len(texto) - 3) + texto[-3:]
