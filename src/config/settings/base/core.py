"""Settings base do processo do bot (comuns a todos os backends)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

VALID_BOT_TYPES = frozenset({"discord", "slack"})

_ENV_ALIASES: dict[str, Environment] = {
    "prod": "production",
    "production": "production",
    "stage": "staging",
    "staging": "staging",
}

_TRUTHY = frozenset({"true", "1", "yes"})


def env_flag(name: str, default: bool = False) -> bool:
    """Lê uma flag booleana ("true" | "1" | "yes")."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def env_seconds(name: str, default: float) -> float:
    """Lê uma duração em segundos; valor não numérico vira NaN e falha no validate()."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return float("nan")


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base.

    Attributes:
        environment: development | staging | production
        service_name: Campo `service` dos logs
        debug: Liga LOG_LEVEL=DEBUG quando LOG_LEVEL não é informado
        log_level: Nível do root logger
        bot_type: Backend escolhido pelo entry point ("" = decidido pelo chamador)
        shutdown_drain_timeout_seconds: Espera máxima por dispatches em
            andamento antes do disconnect
    """

    environment: Environment = "development"
    service_name: str = "bot_dispatcher"
    debug: bool = False
    log_level: str = "INFO"
    bot_type: str = ""
    shutdown_drain_timeout_seconds: float = 10.0

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def validate(self) -> list[str]:
        """Lista de erros (vazia = OK)."""
        errors: list[str] = []
        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")
        if self.bot_type and self.bot_type not in VALID_BOT_TYPES:
            errors.append(
                f"BOT_TYPE inválido: {self.bot_type} (esperado: {', '.join(sorted(VALID_BOT_TYPES))})"
            )
        # NaN falha nas duas comparações
        if not self.shutdown_drain_timeout_seconds >= 0:
            errors.append("SHUTDOWN_DRAIN_TIMEOUT_SECONDS deve ser um número >= 0")
        return errors


def _load_base_from_env() -> BaseSettings:
    debug = env_flag("DEBUG")
    return BaseSettings(
        environment=_ENV_ALIASES.get(os.getenv("ENVIRONMENT", "").strip().lower(), "development"),
        service_name=os.getenv("SERVICE_NAME", "bot_dispatcher"),
        debug=debug,
        log_level=os.getenv("LOG_LEVEL", "DEBUG" if debug else "INFO").upper(),
        bot_type=os.getenv("BOT_TYPE", "").strip().lower(),
        shutdown_drain_timeout_seconds=env_seconds("SHUTDOWN_DRAIN_TIMEOUT_SECONDS", 10.0),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """BaseSettings lidas do ambiente (cacheadas)."""
    return _load_base_from_env()
