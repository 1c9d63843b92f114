"""
src/zeropoint_core/logs.py
Logging estructurado (structlog sobre logging estándar).
La librería nunca configura el logging al importarse: lo hace la aplicación.
"""
import logging
from typing import Any

import structlog
from structlog.stdlib import LoggerFactory

NAMESPACE = "zeropoint"


def get_logger(name: str) -> Any:
    """Logger con el nombre acotado al espacio 'zeropoint'."""
    if not name.startswith(NAMESPACE):
        if name == "__main__":
            name = f"{NAMESPACE}.main"
        else:
            name = f"{NAMESPACE}.{name}"
    return structlog.get_logger(name)


def configure_logging(service_name: str, *, level: int | str = logging.INFO, cache: bool = True) -> Any:
    """Pipeline JSON hacia logging estándar. Devuelve el logger del servicio."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=cache,
    )
    return get_logger(service_name)
