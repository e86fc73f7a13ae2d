"""Logger shared by the consfold modules.

Sequence operations log their name at DEBUG level once per call, the input
guard logs rejected arguments at DEBUG, and ``append`` warns when run
permissively on a non-Sequence argument.
"""

import logging
import sys

from consfold import config

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "consfold",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Return the named logger, attaching a stdout handler on first use.

    Later calls with the same name return the logger as first configured.

    Args:
        name: Logger name, ``consfold`` or a dotted child of it
        level: Level name; ``settings.LOG_LEVEL`` when omitted
        format_string: Record format; timestamp, name, level and message by default

    Returns:
        The logger, which does not propagate to the root logger
    """
    level = level or config.settings.LOG_LEVEL
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger


logger = setup_logger()
