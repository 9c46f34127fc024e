"""API: camada de borda do relay.

Subpastas:
- connectors/: cliente HTTP da Telegram Bot API
- normalizers/: email e updates Telegram → modelos internos
- payload_builders/: mensagens HTML e teclados do Telegram
- routes/: endpoints HTTP (webhook Telegram, health)

NÃO PODE conter: orquestração de use cases.
"""
