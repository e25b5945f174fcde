# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure Error Context Model.

Bundles the structured fields shared by every infrastructure error so that
error constructors keep a short parameter list.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from mysql_crud_example.enums import EnumInfraTransportType


class ModelInfraErrorContext(BaseModel):
    """Structured context attached to infrastructure errors.

    Attributes:
        transport_type: Layer the failure came from (DATABASE, RUNTIME)
        operation: Operation being performed (connect, insert_user, ...)
        target_name: Target table or resource name
        correlation_id: Correlation ID tying log lines to the error

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.DATABASE,
        ...     operation="insert_user",
        ...     target_name="users",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise UniqueConstraintViolationError("Duplicate entry", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    transport_type: EnumInfraTransportType | None = Field(
        default=None,
        description="Layer the failure came from (DATABASE, RUNTIME)",
    )
    operation: str | None = Field(
        default=None,
        description="Operation being performed",
    )
    target_name: str | None = Field(
        default=None,
        description="Target table or resource name",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Correlation ID tying log lines to the error",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: UUID | None = None,
        **kwargs: object,
    ) -> ModelInfraErrorContext:
        """Build a context, generating a correlation ID when none is given."""
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelInfraErrorContext"]
