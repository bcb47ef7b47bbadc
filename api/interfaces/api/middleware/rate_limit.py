# api/interfaces/api/middleware/rate_limit.py
from __future__ import annotations

import time
from collections import defaultdict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from api.infrastructure.config import get_settings

_JANELA_SEGUNDOS = 60.0


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Janela deslizante de 60s por IP. Chaves em API_KEYS nao sao limitadas."""

    def __init__(self, app: object) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self._requests: dict[str, list[float]] = defaultdict(list)
        self._ultima_limpeza = time.monotonic()

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        settings = get_settings()

        # 0 = sem limite (usado em testes)
        if settings.rate_limit_per_minute == 0:
            return await call_next(request)

        api_key = request.headers.get("X-API-Key")
        if api_key and api_key in settings.api_keys:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        now = time.monotonic()
        if now - self._ultima_limpeza >= _JANELA_SEGUNDOS:
            self.descartar_inativos(now)

        recentes = [t for t in self._requests[client_ip] if now - t < _JANELA_SEGUNDOS]
        if len(recentes) >= settings.rate_limit_per_minute:
            self._requests[client_ip] = recentes
            return Response(
                content='{"detail": "Rate limit excedido. Tente novamente em 1 minuto."}',
                status_code=429,
                media_type="application/json",
                headers={"Retry-After": str(int(_JANELA_SEGUNDOS))},
            )

        recentes.append(now)
        self._requests[client_ip] = recentes
        return await call_next(request)

    def descartar_inativos(self, now: float) -> None:
        """Remove IPs sem requisicao dentro da janela."""
        for ip in list(self._requests):
            recentes = [t for t in self._requests[ip] if now - t < _JANELA_SEGUNDOS]
            if recentes:
                self._requests[ip] = recentes
            else:
                del self._requests[ip]
        self._ultima_limpeza = now
