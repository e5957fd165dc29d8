"""Connectors: adapters de borda para APIs externas.

Estrutura:
- tally/: autenticação e parsing do webhook recebido
- discord/: cliente HTTP para webhooks do Discord
"""

__all__: list[str] = []
