# tests/integration/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

# Desabilitar rate limit em testes
os.environ["API_RATE_LIMIT_PER_MINUTE"] = "0"


@pytest.fixture(scope="session")
def client() -> Generator[TestClient, None, None]:
    """TestClient do FastAPI sem rate limit."""
    # Limpar cache de settings para pegar API_RATE_LIMIT_PER_MINUTE=0
    from api.infrastructure.config import get_settings
    get_settings.cache_clear()

    from api.interfaces.api.main import app
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def grupo_exemplo() -> dict[str, object]:
    """Mesmo grupo de pipeline.amostra, no formato JSON da API."""
    repetido = {"documento": "31464238049", "tipo": "pessoa", "valor_total": "145789.12"}
    return {
        "documento": "41720647000175",
        "tipo": "empresa",
        "valor_total": "556587",
        "socios": [
            repetido,
            {"documento": "98089811868", "tipo": "pessoa", "valor_total": "478578.25"},
            {"documento": "21960671804", "tipo": "pessoa", "valor_total": "145528.12"},
            {
                "documento": "20955843000159",
                "tipo": "empresa",
                "valor_total": "999457",
                "socios": [
                    {"documento": "42156492859", "tipo": "pessoa", "valor_total": "489678.98"},
                    {"documento": "02712943961", "tipo": "pessoa", "valor_total": "879546.25"},
                    repetido,
                ],
            },
        ],
    }
