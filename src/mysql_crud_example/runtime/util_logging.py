# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Process-wide logging setup.

Environment Variables:
    LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        Default: INFO

Log Format Example:
    2025-01-15 10:30:45 [INFO] mysql_crud_example.repositories.repository_user: Inserted user
"""

from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"
_VALID_LEVELS: frozenset[str] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
)


def configure_logging() -> None:
    """Configure root logging once at startup.

    Call sites attach structured fields through ``extra={...}``
    (correlation_id, user_id, row_count, ...).
    """
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    if log_level not in _VALID_LEVELS:
        print(
            f"Warning: Invalid LOG_LEVEL '{log_level}', using INFO. "
            f"Valid levels: {', '.join(sorted(_VALID_LEVELS))}",
            file=sys.stderr,
        )
        log_level = "INFO"

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


__all__: list[str] = ["LOG_DATE_FORMAT", "LOG_FORMAT", "configure_logging"]
