"""Rotas HTTP da API.

Estrutura:
- routes/health/: health checks e readiness
- routes/auth/: login e registro
- routes/guess_status/: gate de visibilidade dos palpites
- routes/categories/: categorias, vencedor e palpites
- routes/nominees/: indicados
- routes/users/: ranking e pontuação
- routes/realtime/: feed WebSocket do gate

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
