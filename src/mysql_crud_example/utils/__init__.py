# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility functions for mysql_crud_example.

Exports:
    build_ssl_disabled_dsn: Derive the TLS-disabled fallback URL
    db_operation_error_context: Translate driver exceptions into package errors
    generate_random_email / generate_random_username: Demo identities
    parse_and_validate_dsn: Parse a MySQL URL into ModelParsedDSN
    sanitize_dsn: Mask credentials for logging
"""

from mysql_crud_example.utils.util_db_error_context import (
    db_operation_error_context,
    map_mysql_error,
)
from mysql_crud_example.utils.util_dsn_validation import (
    build_ssl_disabled_dsn,
    parse_and_validate_dsn,
    sanitize_dsn,
    validate_database_name,
)
from mysql_crud_example.utils.util_random_identity import (
    generate_random_email,
    generate_random_username,
)

__all__: list[str] = [
    "build_ssl_disabled_dsn",
    "db_operation_error_context",
    "generate_random_email",
    "generate_random_username",
    "map_mysql_error",
    "parse_and_validate_dsn",
    "sanitize_dsn",
    "validate_database_name",
]
