#!/usr/bin/env python3
"""Bot de eco de exemplo para Slack ou Discord.

Uso:
    python scripts/run_echo_bot.py slack
    python scripts/run_echo_bot.py discord
    BOT_TYPE=slack python scripts/run_echo_bot.py

Tokens via env (DISCORD_BOT_TOKEN | SLACK_APP_TOKEN + SLACK_BOT_TOKEN).
Encerra com Ctrl+C (SIGINT) ou SIGTERM.
"""

from __future__ import annotations

import argparse
import logging

from app.bootstrap import create_bot, initialize_app, validate_runtime_settings
from app.bot import Bot
from app.constants.bot_types import SUPPORTED_BOT_TYPES
from app.domain.message import Message
from config.settings import get_base_settings
from dispatch.middleware import logging_middleware
from dispatch.types import Command

ECHO_PATTERN = r"^echo "

logger = logging.getLogger("echo_bot")


def echo(bot: Bot, message: Message) -> None:
    attachments = bot.get_attachments(message)
    logger.info(
        "echo_received",
        extra={"attachments": len(attachments), "channel_id": message.channel_id},
    )
    bot.send_message(message.channel_id, f"You said: {message.content[len('echo '):]}")


def unknown_command(bot: Bot, message: Message) -> None:
    logger.info(
        "unknown_command",
        extra={"bot_type": str(bot.bot_type), "content_length": len(message.content)},
    )


def build_echo_bot(bot_type: str) -> Bot:
    bot = create_bot(bot_type)
    bot.add_middleware(logging_middleware)
    bot.add_handler(Command(pattern=ECHO_PATTERN, handler=echo))
    bot.set_unknown_command_handler(unknown_command)
    return bot


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "bot_type",
        nargs="?",
        default=get_base_settings().bot_type or None,
        choices=sorted(str(bot_type) for bot_type in SUPPORTED_BOT_TYPES),
        help="Backend de chat a conectar (padrão: BOT_TYPE do ambiente).",
    )
    args = parser.parse_args(argv)
    if args.bot_type is None:
        parser.error("informe o backend ou defina BOT_TYPE")
    return args


def main() -> None:
    args = parse_args()
    initialize_app()
    validate_runtime_settings()
    bot = build_echo_bot(args.bot_type)
    bot.connect()
    print(f"[{args.bot_type}] conectado como {bot.backend.self_id}; Ctrl+C para sair")
    bot.start_listening()


if __name__ == "__main__":
    main()
