"""Console log functions.

A console log function receives a ConsoleLogLevel and a rendered message and
delivers it to the server console. The default writes to standard output.
"""

import sys
from typing import Any, Callable, Optional

import structlog
from structlog.stdlib import BoundLogger

from localization.models import ConsoleLogLevel

ConsoleLogFunction = Callable[[ConsoleLogLevel, Any], None]


def print_console_log_function(level: ConsoleLogLevel, message: Any) -> None:
    """Write ``[LEVEL]: message`` to standard output."""
    level_name = level.value if isinstance(level, ConsoleLogLevel) else str(level)
    print(f"[{level_name}]: {message}", file=sys.stdout)


def structlog_console_log_function(
    logger: Optional[BoundLogger] = None,
) -> ConsoleLogFunction:
    """Build a console log function that writes through structlog.

    Levels map ERROR -> error, WARN -> warning, INFO -> info, DEBUG -> debug
    and TRACE -> debug with ``trace=True``.

    Args:
        logger: Logger to write to. Defaults to a logger bound to the
            "console" component.

    Returns:
        Console log function.
    """
    log = logger or structlog.get_logger().bind(component="console")

    def _log(level: ConsoleLogLevel, message: Any) -> None:
        text = str(message)
        if level == ConsoleLogLevel.ERROR:
            log.error(text)
        elif level == ConsoleLogLevel.WARN:
            log.warning(text)
        elif level == ConsoleLogLevel.DEBUG:
            log.debug(text)
        elif level == ConsoleLogLevel.TRACE:
            log.debug(text, trace=True)
        else:
            log.info(text)

    return _log
