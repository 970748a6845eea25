"""
Logging setup for the keysweep CLI.

Library modules only create module-level loggers; handlers are attached here
by the entry point.
"""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from keysweep.core.config import LoggingConfig


def setup_logging(config: LoggingConfig, console: Console | None = None) -> Path | None:
    """
    Configure the root logger from a LoggingConfig.

    Console output goes through Rich on stderr. When ``config.file`` is set a
    plain FileHandler using ``config.format`` is attached as well.

    Returns:
        Resolved path of the log file, or None if file logging is disabled
    """
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(rich_handler)

    if not config.file:
        return None

    log_path = Path(config.file).expanduser().resolve()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(config.format))
    root.addHandler(file_handler)
    return log_path
