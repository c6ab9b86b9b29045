"""App: coração do sistema: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos do evento, da service instance e da mensagem
- use_cases/: pipeline de relay (resolve → credenciais → tradução → envio)
- translators/: tradutores de payload por source
- infra/: implementações concretas de IO (HTTP, stores)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; utils apoia.
"""
