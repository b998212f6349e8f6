from fastapi import APIRouter, Depends

from api.application.dtos.patrimonio_dto import DocumentoDTO
from api.application.services.patrimonio_service import PatrimonioService
from api.interfaces.api.dependencies import get_patrimonio_service

router = APIRouter()


@router.get("/documentos/{documento}", response_model=DocumentoDTO)
def verificar_documento(
    documento: str,
    service: PatrimonioService = Depends(get_patrimonio_service),  # noqa: B008
) -> DocumentoDTO:
    return service.verificar_documento(documento)
