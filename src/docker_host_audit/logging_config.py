# docker_host_audit/logging_config.py

import logging
import os
import sys

LOG_LEVEL_ENV = "DOCKER_AUDIT_LOG_LEVEL"
LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: int | None = None) -> logging.Logger:
    """
    Send the package's log records to standard error.

    The report itself goes to standard output, so logging stays quiet
    (WARNING) unless a level is passed or set through
    ``DOCKER_AUDIT_LOG_LEVEL``.

    Args:
        level: Explicit level, overriding the environment.

    Returns:
        logging.Logger: The configured package logger.
    """
    if level is None:
        name = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            level = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger = logging.getLogger("docker_host_audit")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return package_logger
