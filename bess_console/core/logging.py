"""
Configuração de logging estruturado com structlog.

Em DEBUG os eventos saem coloridos no console; nos demais ambientes,
uma linha JSON por evento com serviço e ambiente carimbados.
"""

import logging
import sys

import structlog

from bess_console.core.config import settings


def add_service_context(logger, method_name: str, event_dict: dict) -> dict:
    """Carimba serviço e ambiente no evento."""
    event_dict.setdefault("service", settings.PROJECT_NAME)
    event_dict.setdefault("environment", settings.ENVIRONMENT)
    return event_dict


def setup_logging() -> None:
    """Configura logging estruturado para a aplicação."""
    level = logging.DEBUG if settings.DEBUG else logging.getLevelName(settings.LOG_LEVEL.upper())

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.DEBUG:
        renderer: list[structlog.types.Processor] = [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        renderer = [
            add_service_context,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]

    structlog.configure(
        processors=shared_processors + renderer,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    # passlib avisa sobre a versão do bcrypt a cada hash
    logging.getLogger("passlib").setLevel(logging.ERROR)
