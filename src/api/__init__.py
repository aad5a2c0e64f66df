"""API — camada de borda com o provedor Green API.

Subpastas:
- connectors/: transporte, montagem de requisições, erros e fachada
- normalizers/: números de telefone -> identificadores do provedor
- payload_builders/: corpos JSON por endpoint
- validators/: limites client-side aplicados antes do envio

NÃO PODE conter: configuração global nem estado mutável compartilhado.
"""
