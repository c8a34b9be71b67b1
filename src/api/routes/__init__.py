"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (webhook, health, status)
- Validação inicial de request (headers, assinatura)
- Delegação para connectors/use_cases
- Respostas HTTP apropriadas

Estrutura:
- routes/roblox/: webhook de privacidade da Roblox
- routes/health/: liveness e status de configuração
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
