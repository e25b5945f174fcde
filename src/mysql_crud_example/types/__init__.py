# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Types module for mysql_crud_example."""

from mysql_crud_example.types.type_dsn import (
    DEFAULT_MYSQL_PORT,
    SSL_MODE_QUERY_KEY,
    ModelParsedDSN,
)

__all__: list[str] = [
    "DEFAULT_MYSQL_PORT",
    "SSL_MODE_QUERY_KEY",
    "ModelParsedDSN",
]
