# api/interfaces/api/middleware/rate_limit.py
from __future__ import annotations

import time
from collections import defaultdict, deque

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from api.infrastructure.config import get_settings

_JANELA_SEGUNDOS = 60.0


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Janela deslizante de 60s por IP, em memoria. Um processo = um contador."""

    def __init__(self, app: object) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self._requests: dict[str, deque[float]] = defaultdict(deque)

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        settings = get_settings()

        # 0 = sem limite (usado em testes)
        if settings.rate_limit_per_minute == 0:
            return await call_next(request)

        # Bypass apenas para chaves configuradas em API_KEYS
        api_key = request.headers.get("X-API-Key")
        if api_key and api_key in settings.api_keys:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        now = time.monotonic()
        janela = self._requests[client_ip]

        while janela and now - janela[0] >= _JANELA_SEGUNDOS:
            janela.popleft()

        if len(janela) >= settings.rate_limit_per_minute:
            return Response(
                content='{"detail": "Rate limit excedido. Tente novamente em 1 minuto."}',
                status_code=429,
                media_type="application/json",
            )

        janela.append(now)
        return await call_next(request)
