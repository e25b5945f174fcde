# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Errors Module.

Exports:
    ModelInfraErrorContext: Configuration model for bundled error context
    RuntimeHostError: Base error class
    ProtocolConfigurationError: Configuration and DSN validation errors
    InfraConnectionError: Database connection errors
    InfraTimeoutError: Connect or statement timeouts
    InfraAuthenticationError: Access denied errors
    UniqueConstraintViolationError: Duplicate key errors
    RecordNotFoundError: Required row missing

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - Passwords or full connection strings with credentials
        - Row contents beyond identifiers

    SAFE to include:
        - Operation and table names
        - Correlation IDs
        - MySQL error numbers
        - Hostnames and port numbers
"""

from mysql_crud_example.errors.infra_errors import (
    InfraAuthenticationError,
    InfraConnectionError,
    InfraTimeoutError,
    ProtocolConfigurationError,
    RecordNotFoundError,
    RuntimeHostError,
    UniqueConstraintViolationError,
)
from mysql_crud_example.errors.model_infra_error_context import ModelInfraErrorContext

__all__: list[str] = [
    "InfraAuthenticationError",
    "InfraConnectionError",
    "InfraTimeoutError",
    "ModelInfraErrorContext",
    "ProtocolConfigurationError",
    "RecordNotFoundError",
    "RuntimeHostError",
    "UniqueConstraintViolationError",
]
