"""Payload builders: construção de payloads para APIs externas.

Estrutura:
- discord/: corpo do webhook (username + embeds)
"""

__all__: list[str] = []
