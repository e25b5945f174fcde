# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Runtime configuration and process setup.

Exports:
    ModelDatabaseConfig: Connection settings resolved from the environment
    configure_logging: Process-wide logging setup

The walkthrough itself lives in ``runtime.demo_runner`` and is imported
directly, since it depends on the infrastructure layer.
"""

from mysql_crud_example.runtime.model_database_config import (
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_DATABASE_URL,
    DEFAULT_POOL_MAX_SIZE,
    ModelDatabaseConfig,
)
from mysql_crud_example.runtime.util_logging import (
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    configure_logging,
)

__all__: list[str] = [
    "DEFAULT_CONNECT_TIMEOUT_SECONDS",
    "DEFAULT_DATABASE_URL",
    "DEFAULT_POOL_MAX_SIZE",
    "LOG_DATE_FORMAT",
    "LOG_FORMAT",
    "ModelDatabaseConfig",
    "configure_logging",
]
