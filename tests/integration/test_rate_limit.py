from __future__ import annotations

import os
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def rate_limited_client() -> Generator[TestClient, None, None]:
    """Client com rate limit ativo (3 req/min para teste rapido)."""
    from api.infrastructure.config import get_settings

    old_limit = os.environ.get("API_RATE_LIMIT_PER_MINUTE", "0")
    old_keys = os.environ.get("API_KEYS")
    os.environ["API_RATE_LIMIT_PER_MINUTE"] = "3"
    os.environ["API_KEYS"] = "test-key"
    get_settings.cache_clear()

    # App novo: o contador vive na instancia do middleware
    from fastapi import FastAPI

    from api.interfaces.api.middleware.rate_limit import RateLimitMiddleware
    from api.interfaces.api.routes.documento_routes import router

    app = FastAPI()
    app.add_middleware(RateLimitMiddleware)
    app.include_router(router, prefix="/api")
    with TestClient(app) as c:
        yield c

    os.environ["API_RATE_LIMIT_PER_MINUTE"] = old_limit
    if old_keys is None:
        os.environ.pop("API_KEYS", None)
    else:
        os.environ["API_KEYS"] = old_keys
    get_settings.cache_clear()


def test_rate_limit_permite_dentro_do_limite(rate_limited_client: TestClient) -> None:
    for _ in range(3):
        response = rate_limited_client.get("/api/documentos/42156492859")
        assert response.status_code == 200


def test_rate_limit_bloqueia_apos_limite(rate_limited_client: TestClient) -> None:
    for _ in range(3):
        rate_limited_client.get("/api/documentos/42156492859")
    response = rate_limited_client.get("/api/documentos/42156492859")
    assert response.status_code == 429
    assert "Rate limit" in response.json()["detail"]


def test_rate_limit_bypass_com_api_key_configurada(rate_limited_client: TestClient) -> None:
    for _ in range(3):
        rate_limited_client.get("/api/documentos/42156492859")
    response = rate_limited_client.get("/api/documentos/42156492859", headers={"X-API-Key": "test-key"})
    assert response.status_code == 200


def test_rate_limit_api_key_desconhecida_nao_libera(rate_limited_client: TestClient) -> None:
    for _ in range(3):
        rate_limited_client.get("/api/documentos/42156492859")
    response = rate_limited_client.get("/api/documentos/42156492859", headers={"X-API-Key": "outra"})
    assert response.status_code == 429
