"""App: núcleo do Palpitheion (serviços, domínio e infraestrutura).

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: entidades e regras puras do catálogo
- services/: serviços de aplicação (catálogo, palpites, pontuação, gate, auth)
- infra/: implementações concretas de IO (stores, identidade, crypto, WebSocket)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs

Padrão: app executa; api adapta; config configura; utils apoia.
"""
