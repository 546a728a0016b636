"""
Logging setup.

Библиотека не устанавливает handlers при импорте: приложение-потребитель
вызывает setup_logging() само, если хочет видеть DEBUG-записи snaccs.
"""

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", format_string: Optional[str] = None) -> None:
    """
    Настройка логирования для процесса.

    Args:
        level: Уровень логирования (DEBUG, INFO, WARNING, ERROR)
        format_string: Формат записи (по умолчанию DEFAULT_FORMAT)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string or DEFAULT_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """
    Logger для модуля.

    Args:
        name: Имя logger (обычно __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
