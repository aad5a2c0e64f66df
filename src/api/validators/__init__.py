"""Validators — limites client-side para APIs externas.

Estrutura:
- greenapi/: limites dos endpoints Green API
"""

__all__: list[str] = []
