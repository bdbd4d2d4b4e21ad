"""
Logging setup for the family tree package.

``get_logger`` hands out loggers under the ``family_tree`` namespace. The
first call wires the base logger to ``logs/family_tree.log`` and to stderr
(WARNING and up, or everything when ``debug`` is set in
``config/family_tree.yml``); every other logger also writes its own
``logs/<name>.log``.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from family_tree.config import get_config

PROJECT_ROOT = Path(__file__).resolve().parents[3]
BASE_LOGGER_NAME = "family_tree"
FORMATTER = logging.Formatter(
    "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


class _Settings:
    """Resolved logging options, read from config once."""

    def __init__(self) -> None:
        cfg = get_config()
        level_name = str(cfg.logging.get("level", "INFO")).upper()

        self.debug = bool(cfg.debug)
        self.level = logging.DEBUG if self.debug else getattr(logging, level_name, logging.INFO)
        self.rotate = bool(cfg.logging.get("rotate", False))
        self.master_file = cfg.logging.get("file", "family_tree.log")

        log_dir = Path(cfg.paths.get("logs_dir") or "logs")
        self.log_dir = log_dir if log_dir.is_absolute() else PROJECT_ROOT / log_dir
        self.log_dir.mkdir(parents=True, exist_ok=True)

    def file_handler(self, filename: str) -> logging.Handler:
        path = self.log_dir / filename
        if self.rotate:
            handler: logging.Handler = RotatingFileHandler(
                path, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8"
            )
        else:
            handler = logging.FileHandler(path, encoding="utf-8")
        handler.setLevel(self.level)
        handler.setFormatter(FORMATTER)
        return handler


_settings: Optional[_Settings] = None
_loggers: Dict[str, logging.Logger] = {}


def _configure() -> _Settings:
    """Attach the master file and console handlers to the base logger once."""
    global _settings
    if _settings is not None:
        return _settings

    settings = _Settings()
    base = logging.getLogger(BASE_LOGGER_NAME)
    base.setLevel(settings.level)
    base.propagate = False
    base.addHandler(settings.file_handler(settings.master_file))

    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG if settings.debug else logging.WARNING)
    console.setFormatter(FORMATTER)
    base.addHandler(console)

    _settings = settings
    return settings


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``name`` as a logger nested under ``family_tree``."""
    settings = _configure()

    name = name or BASE_LOGGER_NAME
    if name != BASE_LOGGER_NAME and not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"

    logger = logging.getLogger(name)
    if name != BASE_LOGGER_NAME and name not in _loggers:
        logger.setLevel(settings.level)
        handler = settings.file_handler(f"{name.replace('.', '_')}.log")
        handler.is_module_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
        logger.propagate = True

    _loggers[name] = logger
    return logger


def list_active_loggers() -> List[str]:
    """Names of every logger handed out so far."""
    return list(_loggers)
