"""API: camada de borda HTTP/WebSocket.

Responsabilidades:
- Endpoints HTTP e WebSocket (routes/)
- Schemas de request/response (schemas.py)
- Autenticação via Bearer token e role Admin (dependencies.py)
- Tradução de erros de domínio para status HTTP (errors.py)
- correlation_id por requisição (middleware.py)

NÃO PODE conter: regras de catálogo, pontuação ou do gate.
"""
