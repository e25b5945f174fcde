"""
Tests for the mysql_crud_example error hierarchy.

All tests validate:
- Error class instantiation
- Inheritance chain
- Error chaining (raise ... from e)
- Structured context fields via ModelInfraErrorContext
- Error code mapping
"""

from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from mysql_crud_example.enums import EnumErrorCode, EnumInfraTransportType
from mysql_crud_example.errors import (
    InfraAuthenticationError,
    InfraConnectionError,
    InfraTimeoutError,
    ModelInfraErrorContext,
    ProtocolConfigurationError,
    RecordNotFoundError,
    RuntimeHostError,
    UniqueConstraintViolationError,
)


class TestModelInfraErrorContextWithCorrelation:
    """Tests for ModelInfraErrorContext.with_correlation() factory method."""

    def test_with_correlation_generates_uuid_when_none(self) -> None:
        context = ModelInfraErrorContext.with_correlation()
        assert isinstance(context.correlation_id, UUID)
        assert context.correlation_id.version == 4

    def test_with_correlation_uses_provided_uuid(self) -> None:
        provided_id = uuid4()
        context = ModelInfraErrorContext.with_correlation(correlation_id=provided_id)
        assert context.correlation_id == provided_id

    def test_with_correlation_with_other_fields(self) -> None:
        context = ModelInfraErrorContext.with_correlation(
            transport_type=EnumInfraTransportType.DATABASE,
            operation="insert_user",
            target_name="users",
        )
        assert context.transport_type == EnumInfraTransportType.DATABASE
        assert context.operation == "insert_user"
        assert context.target_name == "users"


class TestModelInfraErrorContext:
    """Tests for ModelInfraErrorContext configuration model."""

    def test_basic_instantiation(self) -> None:
        context = ModelInfraErrorContext()
        assert context.transport_type is None
        assert context.operation is None
        assert context.target_name is None
        assert context.correlation_id is None

    def test_context_is_immutable(self) -> None:
        context = ModelInfraErrorContext(operation="connect")
        with pytest.raises(ValidationError):
            context.operation = "other"  # type: ignore[misc]

    def test_context_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            ModelInfraErrorContext(dsn="mysql://root:pw@h/db")  # type: ignore[call-arg]


class TestRuntimeHostError:
    """Tests for the base error class."""

    def test_default_error_code(self) -> None:
        error = RuntimeHostError("Something failed")
        assert error.message == "Something failed"
        assert str(error) == "Something failed"
        assert error.error_code == EnumErrorCode.OPERATION_FAILED
        assert error.correlation_id is None
        assert error.context == {}

    def test_context_fields_are_flattened(self) -> None:
        correlation_id = uuid4()
        context = ModelInfraErrorContext(
            transport_type=EnumInfraTransportType.DATABASE,
            operation="select_all_users",
            target_name="users",
            correlation_id=correlation_id,
        )
        error = RuntimeHostError("Table not found", context=context, mysql_errno=1146)

        assert error.correlation_id == correlation_id
        assert error.context["transport_type"] == EnumInfraTransportType.DATABASE
        assert error.context["operation"] == "select_all_users"
        assert error.context["target_name"] == "users"
        assert error.context["mysql_errno"] == 1146

    def test_explicit_error_code(self) -> None:
        error = RuntimeHostError(
            "Bad query", error_code=EnumErrorCode.DATABASE_QUERY_ERROR
        )
        assert error.error_code == EnumErrorCode.DATABASE_QUERY_ERROR

    def test_error_chaining(self) -> None:
        original = ValueError("root cause")
        try:
            raise RuntimeHostError("wrapped") from original
        except RuntimeHostError as e:
            assert e.__cause__ is original


class TestErrorSubclasses:
    """Each subclass fixes its error code and stays a RuntimeHostError."""

    @pytest.mark.parametrize(
        ("error_cls", "expected_code"),
        [
            (ProtocolConfigurationError, EnumErrorCode.INVALID_CONFIGURATION),
            (InfraConnectionError, EnumErrorCode.DATABASE_CONNECTION_ERROR),
            (InfraTimeoutError, EnumErrorCode.TIMEOUT_ERROR),
            (InfraAuthenticationError, EnumErrorCode.AUTHENTICATION_ERROR),
            (UniqueConstraintViolationError, EnumErrorCode.DUPLICATE_RECORD),
            (RecordNotFoundError, EnumErrorCode.RESOURCE_NOT_FOUND),
        ],
    )
    def test_error_code_and_inheritance(
        self, error_cls: type[RuntimeHostError], expected_code: EnumErrorCode
    ) -> None:
        error = error_cls("failure", context=ModelInfraErrorContext(operation="op"))
        assert isinstance(error, RuntimeHostError)
        assert error.error_code == expected_code
        assert error.context["operation"] == "op"

    def test_unique_violation_keeps_key_name(self) -> None:
        error = UniqueConstraintViolationError(
            "Unique constraint violation on key 'users.email'",
            key_name="users.email",
        )
        assert error.context["key_name"] == "users.email"

    def test_catching_base_class(self) -> None:
        with pytest.raises(RuntimeHostError):
            raise InfraConnectionError("Connection refused")
