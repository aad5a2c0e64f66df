"""App — wiring do cliente: constantes, contratos e composition root.

Subpastas:
- bootstrap/: composition root (factories, logging, credenciais)
- protocols/: contratos/interfaces (transporte)
- constants/: endpoints, métodos HTTP e sufixos de chat

Padrão: app monta; api adapta; config configura.
"""
