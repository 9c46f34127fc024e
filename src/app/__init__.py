"""App: orquestração, casos de uso e infraestrutura do relay.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: relay de email e tratamento de updates do Telegram
- services/: dispatcher de mensagens para o Telegram
- infra/: implementações concretas de IO (OpenAI, MIME, SMTP)
- protocols/: contratos e modelos compartilhados
- observability/: correlation_id dos logs estruturados

Padrão: app executa; api adapta; ai resume; utils apoia.
"""
