# infra/logging_config.py
from __future__ import annotations
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from infra.config import EngineSettings
from infra.operational_support import TraceIdLogFilter
from infra.path import user_data_dir


def setup_logging(settings: EngineSettings | None = None, log_dir: Path | None = None) -> Path:
    """
    Configure application logging.
    Logs go to the per-user data directory unless ``log_dir`` is given.
    """
    settings = settings or EngineSettings.from_env()
    log_dir = log_dir or (user_data_dir() / "logs")
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / "schedule.log"

    logger = logging.getLogger()
    logger.setLevel(settings.log_level)

    # Clear any existing handlers so repeated setup does not duplicate output
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    # File handler (rotating)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=1_000_000,  # 1 MB per file
        backupCount=5,
        encoding="utf-8",
    )
    trace_filter = TraceIdLogFilter()
    file_handler.addFilter(trace_filter)
    file_formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] trace=%(trace_id)s %(name)s - %(message)s"
    )
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    console = logging.StreamHandler()
    console.addFilter(trace_filter)
    console.setFormatter(logging.Formatter("%(levelname)s [trace=%(trace_id)s]: %(message)s"))
    logger.addHandler(console)

    logger.info("Logging initialized. Log file at %s", log_file)
    return log_file
