"""App: orquestração, casos de uso e infraestrutura do relay.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (inputs/outputs, sem IO direto)
- services/: resolver de destino, transcoder de campos, envelope
- domain/: modelos da submissão e da apresentação
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados
- constants/: constantes da aplicação

Padrão: app executa; api adapta; config descreve.
"""
