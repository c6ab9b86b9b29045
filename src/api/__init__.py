"""API: camada de borda.

Responsabilidades:
- Receber eventos do toolchain (POST /accept)
- Falar com APIs externas (TIAM, Slack)

Subpastas:
- connectors/: clientes HTTP das APIs externas
- routes/: endpoints HTTP (accept, health)

NÃO PODE conter: regras do pipeline de relay nem escolha de tradutor.
"""
