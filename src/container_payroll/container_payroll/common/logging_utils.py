from __future__ import annotations

import logging
import sys
from typing import Optional

# Package logger, e.g. "container_payroll" for "container_payroll.common".
ROOT_LOGGER_NAME = __package__.rsplit(".", 1)[0]


def setup_logger(level: Optional[str] = None, name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Configure the package logger once (stderr, `asctime | level | name | message`).

    Module loggers are children of this one, so they share the handler.
    """
    log = logging.getLogger(name)
    log_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    log.setLevel(log_level)
    if log.handlers:
        return log

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    log.addHandler(handler)
    return log
