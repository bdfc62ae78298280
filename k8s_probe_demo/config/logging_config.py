"""Root logger configuration shared by the API runtime and CLI commands."""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def config_configure_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger once.

    Repeated calls only adjust the level, so application factories invoked
    several times in one process (tests, reloads) do not duplicate output.

    Args:
        level: Logging level name, case insensitive.

    Returns:
        None: Root logger is configured as a side effect.
    """

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if root_logger.handlers:
        return

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root_logger.addHandler(console_handler)
