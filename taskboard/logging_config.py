"""Logging configuration for the API process."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-5s %(name)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Module-level flag to track if logging has been configured
_logging_configured = False


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a console handler.

    Idempotent: repeated calls (app reloads, test clients) keep the first setup.
    """
    global _logging_configured

    if _logging_configured:
        return

    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)

    # SQL echo is too noisy at INFO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    _logging_configured = True
