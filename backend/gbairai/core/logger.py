"""
GBAIRAI - Structured Tracing Logger
Logger structuré avec trace_id automatique et décorateur de traçage des appels

Champs émis: timestamp, level, trace_id, module, message, metadata
"""
import functools
import logging
import time
from typing import Any, Callable, Dict, Optional

import structlog

from gbairai.core.trace_context import get_trace_id


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structlog (rendu JSON) et le niveau du logger standard"""
    logging.basicConfig(format="%(message)s", level=log_level.upper())
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_traced_logger(module: str) -> "TracedLogger":
    """TracedLogger associé à un nom de module"""
    return TracedLogger(module)


class TracedLogger:
    """
    Logger structuré injectant automatiquement le trace_id

    Enveloppe structlog et ajoute trace_id et module à chaque entrée.
    """

    def __init__(self, module: str):
        self._module = module
        self._logger = structlog.get_logger()

    def _build_event(
        self,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        event: Dict[str, Any] = {
            "trace_id": get_trace_id(),
            "module": self._module,
        }
        if metadata:
            event["metadata"] = metadata
        return event

    def info(
        self,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> None:
        self._logger.info(message, **self._build_event(metadata), **kwargs)

    def warning(
        self,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> None:
        self._logger.warning(message, **self._build_event(metadata), **kwargs)

    def error(
        self,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> None:
        self._logger.error(message, **self._build_event(metadata), **kwargs)

    def debug(
        self,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> None:
        self._logger.debug(message, **self._build_event(metadata), **kwargs)

    def exception(
        self,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> None:
        """Log de niveau ERROR avec la trace de l'exception courante"""
        self._logger.exception(message, **self._build_event(metadata), **kwargs)


def trace_execution(
    module: str,
    name: Optional[str] = None,
):
    """
    Décorateur qui journalise le début et la fin d'une coroutine

    Usage:
        @trace_execution("Moderation", "moderate_content")
        async def moderate_content(self, content):
            ...

    Sortie:
        [INFO] [trace_id] [Moderation] moderate_content started
        [INFO] [trace_id] [Moderation] moderate_content completed metadata={duration_ms=12.3}
    """
    def decorator(func: Callable) -> Callable:
        operation = name or func.__name__
        traced_logger = get_traced_logger(module)

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            traced_logger.info(f"{operation} started")
            start = time.monotonic()
            try:
                result = await func(*args, **kwargs)
                duration_ms = round((time.monotonic() - start) * 1000, 1)
                traced_logger.info(
                    f"{operation} completed",
                    metadata={"duration_ms": duration_ms},
                )
                return result
            except Exception as e:
                duration_ms = round((time.monotonic() - start) * 1000, 1)
                traced_logger.error(
                    f"{operation} failed",
                    metadata={"duration_ms": duration_ms, "error": str(e)},
                )
                raise

        return wrapper
    return decorator
