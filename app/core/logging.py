"""Structured logging for the locale resolver.

Translation events (tables loaded, cache hits, unreadable files, missing keys)
are emitted through structlog on top of stdlib logging. Output is rendered for
a terminal when ``PREFIX`` is set and as JSON lines otherwise. Under pytest
nothing is emitted.
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from .config import settings

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def resolve_log_level(name: Optional[str]) -> int:
    """Map a level name such as "debug" to its stdlib value, defaulting to INFO."""
    if not name:
        return logging.INFO
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def build_processors(json_output: bool) -> List[Processor]:
    """Processor chain shared by every translation logger.

    Args:
        json_output: Render JSON lines instead of the console renderer.

    Returns:
        Ordered structlog processors, renderer last.
    """
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    json_output: Optional[bool] = None,
    silent: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and return the root translation logger.

    Args:
        log_level: Level name; defaults to ``settings.LOG_LEVEL``.
        json_output: JSON rendering; defaults to ``settings.is_production``.
        silent: Drop every record; defaults to True under pytest.

    Returns:
        Logger bound to the ``i18n`` service name.
    """
    if silent is None:
        silent = _is_test_environment()
    if json_output is None:
        json_output = settings.is_production
    level = SILENT_LEVEL if silent else resolve_log_level(log_level or settings.LOG_LEVEL)

    structlog.configure(
        processors=build_processors(json_output),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=not silent,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)
    logging.root.setLevel(level)

    return structlog.stdlib.get_logger().bind(service="i18n")


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module's short name and dotted path."""
    current_frame = inspect.currentframe()
    caller = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    module_name = module.__name__
    return logger.bind(component=module_name.rsplit(".", 1)[-1], module_path=module_name)
