"""App — coração do dispatcher: fachada do bot, domínio e wiring.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- bot/: fachada Bot (connect, dispatch, envio, anexos, shutdown)
- domain/: Message, Attachment e payloads nativos etiquetados
- protocols/: contrato de sessão de backend
- observability/: correlation_id, métricas e hook de trace
- constants/: BotType

Padrão: app executa; api adapta; dispatch roteia; utils apoia.
"""
