# api/application/services/patrimonio_service.py
from __future__ import annotations

from api.domain.documento.validacao import is_valid_document
from api.domain.documento.value_objects import mascarar, tipo_documento
from api.domain.patrimonio.entities import PessoaFisica, PessoaJuridica, Socio
from api.domain.patrimonio.services import calcular_patrimonio_total, documentos_distintos

from ..dtos.patrimonio_dto import DocumentoDTO, PatrimonioDTO, SocioDTO


class PatrimonioService:
    def calcular(self, socio_dto: SocioDTO) -> PatrimonioDTO:
        """Levanta DocumentoInvalidoError se algum documento da arvore for invalido."""
        raiz = _para_entidade(socio_dto)
        total = calcular_patrimonio_total(raiz)
        return PatrimonioDTO(
            documento=mascarar(raiz.documento),
            tipo=tipo_documento(raiz.documento).value,
            valor_total=total,
            qtd_documentos_distintos=len(documentos_distintos(raiz)),
        )

    def verificar_documento(self, documento: str) -> DocumentoDTO:
        if not is_valid_document(documento):
            return DocumentoDTO(documento=mascarar(documento), valido=False)
        return DocumentoDTO(
            documento=mascarar(documento),
            valido=True,
            tipo=tipo_documento(documento).value,
        )


def _para_entidade(dto: SocioDTO) -> Socio:
    if dto.tipo == "pessoa":
        return PessoaFisica(dto.documento, dto.valor_total)
    return PessoaJuridica(
        dto.documento,
        dto.valor_total,
        tuple(_para_entidade(s) for s in dto.socios),
    )
