# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure adapters: the aiomysql-backed connection manager."""

from mysql_crud_example.infrastructure.mysql_connection_manager import (
    MysqlConnectionManager,
    build_ssl_context,
)

__all__: list[str] = ["MysqlConnectionManager", "build_ssl_context"]
