from fastapi import APIRouter, Depends, HTTPException

from api.application.dtos.patrimonio_dto import PatrimonioDTO, SocioDTO
from api.application.services.patrimonio_service import PatrimonioService
from api.domain.documento.errors import DocumentoInvalidoError
from api.domain.documento.value_objects import mascarar
from api.interfaces.api.dependencies import get_patrimonio_service

router = APIRouter()


@router.post("/patrimonio", response_model=PatrimonioDTO)
def calcular_patrimonio(
    socio: SocioDTO,
    service: PatrimonioService = Depends(get_patrimonio_service),  # noqa: B008
) -> PatrimonioDTO:
    try:
        return service.calcular(socio)
    except DocumentoInvalidoError as err:
        # Arvore inteira rejeitada: nunca devolve total parcial
        raise HTTPException(status_code=422, detail=f"Documento invalido: {mascarar(err.documento)}") from err
