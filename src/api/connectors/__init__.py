"""Connectors — adapters de borda para APIs externas.

Estrutura:
- greenapi/: gateway WhatsApp-over-HTTP Green API
"""

__all__: list[str] = []
