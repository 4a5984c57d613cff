"""
Logging configuration для btc-amount.

Модули пакета пишут в логгеры logging.getLogger(__name__) и сами
handlers не настраивают. setup_logging подключает вывод к логгеру
пакета "btc_amount" в одном из двух форматов:
  - **human** – цветной однострочный
  - **json**  – newline-delimited JSON для агрегаторов логов

Usage:
    from btc_amount.core.logging_config import setup_logging
    setup_logging(level="DEBUG", fmt="json")
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Final, Optional

PACKAGE_LOGGER: Final[str] = "btc_amount"


class JSONFormatter(logging.Formatter):
    """Каждая запись — один JSON объект."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            log_obj["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_obj, default=str, ensure_ascii=False)


class HumanFormatter(logging.Formatter):
    """Цветной короткий однострочный формат."""

    COLOURS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[1;31m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        colour = self.COLOURS.get(record.levelname, "")
        ts = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        return (
            f"{colour}{ts} [{record.levelname:<7}]{self.RESET} "
            f"{record.name}: {record.getMessage()}"
        )


def setup_logging(
    level: str = "INFO",
    fmt: str = "human",
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Настройка логгера пакета.

    Args:
        level: DEBUG, INFO, WARNING, ERROR или CRITICAL
        fmt: "human" или "json"
        log_file: Дополнительный файл логов (всегда JSON)

    Returns:
        Настроенный логгер "btc_amount"

    Raises:
        ValueError: Если fmt не "human" и не "json"
    """
    if fmt not in ("human", "json"):
        raise ValueError(f"fmt must be 'human' or 'json', got {fmt!r}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Повторный вызов не дублирует handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(JSONFormatter() if fmt == "json" else HumanFormatter())
    logger.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(path), encoding="utf-8")
        fh.setFormatter(JSONFormatter())
        logger.addHandler(fh)

    return logger
