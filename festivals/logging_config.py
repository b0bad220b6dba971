"""Logging setup for the festivals package."""

import logging

LOGGER_NAME = "festivals"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class FestivalsHandler(logging.StreamHandler):
    """Stream handler installed on the package logger by configure_logging()."""

    def __init__(self) -> None:
        super().__init__()
        self.setFormatter(logging.Formatter(LOG_FORMAT))


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a single stream handler to the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not any(isinstance(handler, FestivalsHandler) for handler in logger.handlers):
        logger.addHandler(FestivalsHandler())
    return logger
