"""API: camada de borda do relay.

Responsabilidades:
- Receber o webhook do Tally (autenticação e parse do corpo)
- Construir o corpo JSON enviado ao webhook do Discord
- Executar o POST ao Discord

Subpastas:
- connectors/: adapters HTTP (tally/ entrada, discord/ saída)
- payload_builders/: construção de payloads para APIs externas
- routes/: endpoints HTTP (webhook do Tally, health)

NÃO PODE conter: regras de exibição de campos, resolução de destino.
"""
