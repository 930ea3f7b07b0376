# File: link_scout/logger.py
"""
Настройка логгера LinkScout.

Все сообщения краулера проходят через :class:`link_scout.reporter.Reporter`,
который пишет в логгер с именем ``LOGGER_NAME``. Здесь этот логгер получает
обработчики: stdout всегда, файл с ротацией по желанию.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(message)s"
LOGGER_NAME: Final[str] = "LinkScout"

# ротация лог-файла: 5 МБ, три архивные копии
_MAX_BYTES: Final[int] = 5 * 1024 * 1024
_BACKUPS: Final[int] = 3


def _with_format(handler: logging.Handler, fmt: str) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure(
    *,
    level: Union[int, str] = "INFO",
    log_file: Union[str, Path, None] = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """
    Настраивает логгер LinkScout и возвращает его.

    При ``replace_handlers=True`` старые обработчики закрываются и снимаются,
    иначе новые добавляются к существующим. Записи не уходят в root-логгер.
    """
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(level)

    if replace_handlers:
        for handler in log.handlers:
            handler.close()
        log.handlers.clear()

    log.addHandler(_with_format(logging.StreamHandler(sys.stdout), log_format))
    if log_file is not None:
        file_handler = RotatingFileHandler(
            str(log_file), maxBytes=_MAX_BYTES, backupCount=_BACKUPS, encoding="utf-8"
        )
        log.addHandler(_with_format(file_handler, log_format))

    log.propagate = False
    return log


def init_logging(
    level: Union[int, str] = "INFO",
    log_file: Union[str, Path, None] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Вызывается из CLI один раз при старте."""
    return configure(level=level, log_file=log_file, log_format=log_format)


__all__ = ["configure", "init_logging", "LOGGER_NAME", "DEFAULT_FORMAT"]
