# portfolio_api/core/logging.py
from __future__ import annotations

import logging
import sys

import structlog

from portfolio_api.core.config import settings


SERVICE_NAME = "api"


def configure_logging(service_name: str = SERVICE_NAME, *, level: str | int | None = None) -> None:
    """
    Configura structlog una sola vez para toda la API.
    Emite JSON por stderr: ts, level, service, event + contexto.
    Sin `level` se usa settings.log_level.
    """
    global SERVICE_NAME
    SERVICE_NAME = service_name

    if level is None:
        level = settings.log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
            structlog.processors.add_log_level,
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(**initial_values) -> structlog.BoundLogger:
    # Proxy perezoso: toma la configuración vigente en el primer uso
    return structlog.get_logger(service=SERVICE_NAME, **initial_values)
