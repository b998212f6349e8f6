# api/application/dtos/patrimonio_dto.py
from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, model_validator


class SocioDTO(BaseModel):
    documento: str = Field(min_length=1, max_length=32)
    tipo: Literal["pessoa", "empresa"]
    valor_total: Decimal = Field(ge=0)
    socios: list[SocioDTO] = []

    @model_validator(mode="after")
    def _pessoa_sem_socios(self) -> SocioDTO:
        if self.tipo == "pessoa" and self.socios:
            raise ValueError("Pessoa fisica nao possui socios")
        return self


class PatrimonioDTO(BaseModel):
    documento: str           # mascarado
    tipo: str                # "cpf" | "cnpj"
    valor_total: Decimal     # 2 casas, ROUND_HALF_UP
    qtd_documentos_distintos: int


class DocumentoDTO(BaseModel):
    documento: str           # mascarado
    valido: bool
    tipo: str | None = None  # None quando invalido


SocioDTO.model_rebuild()
