"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (webhook do Tally, health)
- Validação inicial de request (método, headers)
- Delegação para connectors/use_cases
- Respostas HTTP com corpo de erro classificado

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
