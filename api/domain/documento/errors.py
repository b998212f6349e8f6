# api/domain/documento/errors.py
from __future__ import annotations


class DocumentoInvalidoError(ValueError):
    """Documento que nao e CPF nem CNPJ valido. Carrega a string rejeitada."""

    def __init__(self, documento: object) -> None:
        self.documento = documento
        super().__init__(f'O documento "{documento}" nao esta no formato exigido.')
