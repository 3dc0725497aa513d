"""API — camada de borda e adapters de backends de chat.

Responsabilidades:
- Manter sessões com as plataformas (gateway Discord, Socket Mode Slack)
- Normalizar eventos nativos para Message
- Extrair anexos segundo a política de cada plataforma

Subpastas:
- connectors/: sessões por backend (abrir, fechar, enviar)
- normalizers/: eventos nativos → modelos internos

NÃO PODE conter: roteamento de comandos, middlewares, regras do Bot.
"""
