"""Payload builders — construção de corpos JSON para APIs externas.

Estrutura:
- greenapi/: corpos por endpoint Green API
"""

__all__: list[str] = []
