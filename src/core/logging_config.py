"""
Logging — структурированное логирование через structlog

Единая точка настройки логирования. Ядро арифметики пишет только
редкие события (capacity_exceeded, invalid_format); CLI пишет
выполненные операции на уровне debug.
"""

import logging

import structlog

DEFAULT_LOG_LEVEL = "WARNING"


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """
    Настройка structlog поверх stdlib logging.

    Args:
        level: Имя уровня stdlib ('DEBUG', 'INFO', 'WARNING', ...)

    Raises:
        ValueError: Если имя уровня неизвестно
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(format="%(message)s", level=numeric_level, force=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Логгер модуля поверх stdlib logging.

    Процессоры structlog берутся из текущей конфигурации при первом
    использовании. Фильтрация по уровню и вывод остаются за stdlib:
    без configure_logging() события ниже WARNING отбрасываются, а
    stdout библиотека не трогает.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
