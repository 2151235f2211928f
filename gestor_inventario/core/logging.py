"""Configuración de logging para el servicio."""

import logging
import sys
import threading

LOGGER_PREFIX = "gestor_inventario"

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False
_lock = threading.Lock()


def get_logger(name: str) -> logging.Logger:
    """Logger bajo el espacio de nombres del servicio."""
    if name.startswith(LOGGER_PREFIX):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_PREFIX}.{name}")


def configure_logging(level="INFO", handler: logging.Handler = None) -> None:
    """Configura la jerarquía de loggers del servicio (idempotente)."""
    global _configured
    with _lock:
        if _configured:
            return
        _configured = True

    root_logger = logging.getLogger(LOGGER_PREFIX)
    root_logger.setLevel(level)
    root_logger.propagate = False

    h = handler or logging.StreamHandler(sys.stderr)
    h.setFormatter(logging.Formatter(_FORMAT))
    root_logger.addHandler(h)


def reset_logging() -> None:
    """Deshace la configuración. Solo para tests."""
    global _configured
    with _lock:
        _configured = False
    logger = logging.getLogger(LOGGER_PREFIX)
    logger.handlers.clear()
    logger.setLevel(logging.WARNING)
    logger.propagate = True
