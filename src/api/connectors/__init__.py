"""Connectors: adapters de borda para APIs externas.

Estrutura:
- slack/: Slack Web API (chat.postMessage)
- tiam/: introspecção de credenciais do toolchain

Cada connector implementa um protocolo de app/protocols/.
"""

__all__: list[str] = []
