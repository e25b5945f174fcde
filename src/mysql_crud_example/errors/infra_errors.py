# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure-Specific Error Classes.

Error Hierarchy:
    Exception
    └── RuntimeHostError (base error)
        ├── ProtocolConfigurationError
        ├── InfraConnectionError
        ├── InfraTimeoutError
        ├── InfraAuthenticationError
        ├── UniqueConstraintViolationError
        └── RecordNotFoundError

All errors:
    - Carry an EnumErrorCode for classification
    - Support proper error chaining with ``raise ... from e``
    - Accept ModelInfraErrorContext for bundled context parameters
    - Accept extra keyword context for debugging (never credentials)
"""

from __future__ import annotations

from uuid import UUID

from mysql_crud_example.enums import EnumErrorCode
from mysql_crud_example.errors.model_infra_error_context import ModelInfraErrorContext


class RuntimeHostError(Exception):
    """Base error class for mysql_crud_example.

    Structured Fields (via ModelInfraErrorContext):
        transport_type: Layer the failure came from
        operation: Operation being performed
        correlation_id: Correlation ID for log lookup
        target_name: Target table or resource name

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.DATABASE,
        ...     operation="select_all_users",
        ...     target_name="users",
        ... )
        >>> raise RuntimeHostError("Table not found", context=context)
    """

    def __init__(
        self,
        message: str,
        error_code: EnumErrorCode | None = None,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize RuntimeHostError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled infrastructure context (transport_type, operation, etc.)
            **extra_context: Additional context information
        """
        structured_context: dict[str, object] = dict(extra_context)

        correlation_id: UUID | None = None
        if context is not None:
            if context.transport_type is not None:
                structured_context["transport_type"] = context.transport_type
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            correlation_id = context.correlation_id

        super().__init__(message)
        self.message = message
        self.error_code = error_code or EnumErrorCode.OPERATION_FAILED
        self.correlation_id = correlation_id
        self.context = structured_context

    def __str__(self) -> str:
        return self.message


class ProtocolConfigurationError(RuntimeHostError):
    """Raised when configuration or DSN validation fails.

    Example:
        >>> raise ProtocolConfigurationError(
        ...     "DATABASE_POOL_MAX_SIZE must be a positive integer",
        ...     context=context,
        ...     parameter="DATABASE_POOL_MAX_SIZE",
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


class InfraConnectionError(RuntimeHostError):
    """Raised when the database server cannot be reached or the connection drops.

    Example:
        >>> raise InfraConnectionError(
        ...     "Failed to connect to database - check host and port",
        ...     context=context,
        ...     mysql_errno=2003,
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumErrorCode.DATABASE_CONNECTION_ERROR,
            context=context,
            **extra_context,
        )


class InfraTimeoutError(RuntimeHostError):
    """Raised when a connect or statement deadline is exceeded."""

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumErrorCode.TIMEOUT_ERROR,
            context=context,
            **extra_context,
        )


class InfraAuthenticationError(RuntimeHostError):
    """Raised when the server denies access for the configured credentials."""

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumErrorCode.AUTHENTICATION_ERROR,
            context=context,
            **extra_context,
        )


class UniqueConstraintViolationError(RuntimeHostError):
    """Raised when an insert or update collides with a UNIQUE key.

    Example:
        >>> try:
        ...     await insert_user(db, "alice", "alice@example.com")
        ... except UniqueConstraintViolationError:
        ...     logger.warning("alice already exists")
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumErrorCode.DUPLICATE_RECORD,
            context=context,
            **extra_context,
        )


class RecordNotFoundError(RuntimeHostError):
    """Raised by service workflows that require a row which does not exist.

    Plain lookups (``select_user_by_id``) return ``None`` instead.
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumErrorCode.RESOURCE_NOT_FOUND,
            context=context,
            **extra_context,
        )


__all__ = [
    "InfraAuthenticationError",
    "InfraConnectionError",
    "InfraTimeoutError",
    "ProtocolConfigurationError",
    "RecordNotFoundError",
    "RuntimeHostError",
    "UniqueConstraintViolationError",
]
