import logging
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
HANDLER_NAME = "r2gateway.console"


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Set up console logging on the root logger.

    Safe to call more than once: the gateway's console handler is replaced,
    never stacked, so records are not emitted twice.

    Args:
        level: Level name; unknown names fall back to INFO.
        fmt: Record format. Defaults to DEFAULT_FORMAT.
    """
    log_level = (level or "INFO").upper()
    numeric_level = getattr(logging, log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in list(root_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(HANDLER_NAME)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(
        logging.Formatter(fmt or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).info("Logging configured with level: %s", log_level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
