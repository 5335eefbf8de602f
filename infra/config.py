# infra/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from infra.path import default_db_path


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_log_level(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unsupported log level in {name}: {raw!r}")
    return level


@dataclass(frozen=True)
class EngineSettings:
    db_url: str
    log_level: int = logging.INFO
    sql_echo: bool = False

    @staticmethod
    def from_env() -> "EngineSettings":
        db_url = os.getenv("SCHED_DB_URL")
        if db_url is None or not db_url.strip():
            db_url = f"sqlite:///{default_db_path().as_posix()}"
        return EngineSettings(
            db_url=db_url.strip(),
            log_level=_env_log_level("SCHED_LOG_LEVEL", logging.INFO),
            sql_echo=_env_flag("SCHED_SQL_ECHO"),
        )


__all__ = ["EngineSettings"]
