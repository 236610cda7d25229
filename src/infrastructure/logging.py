"""
Logging setup.

Stdlib logging с единым форматом. Библиотечные модули только получают логгер
через get_logger(__name__); конфигурацию handlers выполняет вызывающее приложение.
"""

import logging
import sys
from typing import Final, Optional

DEFAULT_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
) -> None:
    """
    Настройка root logger.

    Args:
        level: Уровень логирования (DEBUG, INFO, WARNING, ERROR)
        format_string: Формат сообщений (DEFAULT_FORMAT если None)

    Raises:
        ValueError: Если level не является именем уровня logging
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown logging level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format=format_string or DEFAULT_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Логгер модуля.

    Args:
        name: Имя логгера (обычно __name__)
    """
    return logging.getLogger(name)
