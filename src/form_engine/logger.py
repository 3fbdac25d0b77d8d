"""
Engine logging.

Form data may hold personal information, so engine diagnostics are only
emitted when a caller explicitly asks for debug output.
"""

import logging
from typing import Any

from form_engine.config import get_config


class EngineLogger(logging.LoggerAdapter):
    """Logger adapter that is silent unless debug output was requested."""

    def __init__(self, logger: logging.Logger, prefix: str, is_debug: bool):
        super().__init__(logger, {"prefix": prefix})
        self.prefix = prefix
        self.is_debug = is_debug

    def isEnabledFor(self, level: int) -> bool:
        return self.is_debug and self.logger.isEnabledFor(level)

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        return f"[{self.prefix}] {msg}", kwargs


def get_engine_logger(prefix: str, is_debug: bool | None = None) -> EngineLogger:
    """
    Get a logger for one engine component.

    Args:
        prefix: Component name, used for the logger name and message prefix.
        is_debug: Whether to emit anything. Defaults to ``config.debug``.
    """
    config = get_config()
    if is_debug is None:
        is_debug = config.debug
    logger = logging.getLogger(f"{config.logger_name}.{prefix}")
    return EngineLogger(logger, prefix, is_debug)
