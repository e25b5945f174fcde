# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definitions for mysql_crud_example."""

from mysql_crud_example.protocols.protocol_database_client import (
    ProtocolDatabaseClient,
)

__all__: list[str] = ["ProtocolDatabaseClient"]
