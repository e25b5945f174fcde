# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""CRUD operations for the ``users`` table.

Each function runs exactly one parameterized statement through a
ProtocolDatabaseClient and maps the result to/from ModelUser. Failures
propagate as RuntimeHostError subclasses; a missing row on lookup is not an
error.
"""

from __future__ import annotations

import logging
from uuid import uuid4

from mysql_crud_example.enums import EnumInfraTransportType
from mysql_crud_example.errors import ModelInfraErrorContext, RuntimeHostError
from mysql_crud_example.models import ModelUser
from mysql_crud_example.protocols import ProtocolDatabaseClient

logger = logging.getLogger(__name__)

TABLE_USERS: str = "users"

CREATE_USER_TABLE_SQL: str = """
CREATE TABLE IF NOT EXISTS users (
    id BIGINT UNSIGNED AUTO_INCREMENT PRIMARY KEY,
    username VARCHAR(50) NOT NULL UNIQUE,
    email VARCHAR(100) NOT NULL UNIQUE,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_unicode_ci
"""

INSERT_USER_SQL: str = "INSERT INTO users (username, email) VALUES (%s, %s)"

SELECT_ALL_USERS_SQL: str = (
    "SELECT id, username, email, created_at, updated_at FROM users ORDER BY id"
)

SELECT_USER_BY_ID_SQL: str = (
    "SELECT id, username, email, created_at, updated_at FROM users WHERE id = %s"
)

SELECT_OLDEST_USER_SQL: str = (
    "SELECT id, username, email, created_at, updated_at FROM users "
    "ORDER BY created_at ASC, id ASC LIMIT 1"
)

COUNT_USERS_SQL: str = "SELECT COUNT(*) AS user_count FROM users"

UPDATE_USER_EMAIL_SQL: str = "UPDATE users SET email = %s WHERE id = %s"

DELETE_USER_SQL: str = "DELETE FROM users WHERE id = %s"


async def create_table(db: ProtocolDatabaseClient) -> None:
    """Create the ``users`` table if it does not exist."""
    logger.info("Creating users table")
    await db.execute(
        CREATE_USER_TABLE_SQL, operation="create_table", target_name=TABLE_USERS
    )
    logger.info("Users table ready")


async def insert_user(db: ProtocolDatabaseClient, username: str, email: str) -> int:
    """Insert a user and return the server-assigned id.

    Raises:
        UniqueConstraintViolationError: If ``username`` or ``email`` is taken.
        RuntimeHostError: If the server reports no generated id.
    """
    correlation_id = uuid4()
    logger.info(
        "Inserting user",
        extra={"correlation_id": str(correlation_id), "username": username},
    )
    result = await db.execute(
        INSERT_USER_SQL,
        (username, email),
        operation="insert_user",
        target_name=TABLE_USERS,
        correlation_id=correlation_id,
    )
    if result.last_insert_id is None:
        ctx = ModelInfraErrorContext.with_correlation(
            correlation_id=correlation_id,
            transport_type=EnumInfraTransportType.DATABASE,
            operation="insert_user",
            target_name=TABLE_USERS,
        )
        raise RuntimeHostError(
            "Insert into users returned no generated id", context=ctx
        )
    user_id = int(result.last_insert_id)
    logger.info(
        "Inserted user - ID: %d",
        user_id,
        extra={"correlation_id": str(correlation_id), "user_id": user_id},
    )
    return user_id


async def select_all_users(db: ProtocolDatabaseClient) -> list[ModelUser]:
    """Return every user ordered by id."""
    logger.debug("Selecting all users")
    rows = await db.fetch_all(
        SELECT_ALL_USERS_SQL, operation="select_all_users", target_name=TABLE_USERS
    )
    users = [ModelUser.model_validate(row) for row in rows]
    logger.debug("Selected %d users", len(users), extra={"row_count": len(users)})
    return users


async def select_user_by_id(
    db: ProtocolDatabaseClient, user_id: int
) -> ModelUser | None:
    """Return the user with ``user_id``, or None (logged at WARNING) if absent."""
    logger.debug("Selecting user by ID - ID: %d", user_id, extra={"user_id": user_id})
    row = await db.fetch_one(
        SELECT_USER_BY_ID_SQL,
        (user_id,),
        operation="select_user_by_id",
        target_name=TABLE_USERS,
    )
    if row is None:
        logger.warning("User not found - ID: %d", user_id, extra={"user_id": user_id})
        return None
    logger.debug("Found user - ID: %d", user_id, extra={"user_id": user_id})
    return ModelUser.model_validate(row)


async def find_oldest_user(db: ProtocolDatabaseClient) -> ModelUser | None:
    """Return the earliest-created user (ties broken by id), or None if empty."""
    logger.debug("Finding oldest user")
    row = await db.fetch_one(
        SELECT_OLDEST_USER_SQL, operation="find_oldest_user", target_name=TABLE_USERS
    )
    if row is None:
        logger.debug("No users found")
        return None
    user = ModelUser.model_validate(row)
    logger.debug("Found oldest user - ID: %d", user.id, extra={"user_id": user.id})
    return user


async def count_users(db: ProtocolDatabaseClient) -> int:
    row = await db.fetch_one(
        COUNT_USERS_SQL, operation="count_users", target_name=TABLE_USERS
    )
    return int(row["user_count"]) if row else 0  # type: ignore[call-overload]


async def update_user_email(
    db: ProtocolDatabaseClient, user_id: int, email: str
) -> int:
    """Set a user's email; the server refreshes ``updated_at``.

    Returns:
        Rows affected (0 when the id does not exist or the email is unchanged).
    """
    logger.info("Updating user email - ID: %d", user_id, extra={"user_id": user_id})
    result = await db.execute(
        UPDATE_USER_EMAIL_SQL,
        (email, user_id),
        operation="update_user_email",
        target_name=TABLE_USERS,
    )
    logger.info(
        "Updated user email - ID: %d, rows affected: %d",
        user_id,
        result.row_count,
        extra={"user_id": user_id, "row_count": result.row_count},
    )
    return result.row_count


async def delete_user(db: ProtocolDatabaseClient, user_id: int) -> int:
    """Delete a user (its profile cascades). Returns rows affected."""
    logger.info("Deleting user - ID: %d", user_id, extra={"user_id": user_id})
    result = await db.execute(
        DELETE_USER_SQL,
        (user_id,),
        operation="delete_user",
        target_name=TABLE_USERS,
    )
    logger.info(
        "Deleted user - ID: %d, rows affected: %d",
        user_id,
        result.row_count,
        extra={"user_id": user_id, "row_count": result.row_count},
    )
    return result.row_count


__all__: list[str] = [
    "CREATE_USER_TABLE_SQL",
    "DELETE_USER_SQL",
    "INSERT_USER_SQL",
    "SELECT_ALL_USERS_SQL",
    "SELECT_OLDEST_USER_SQL",
    "SELECT_USER_BY_ID_SQL",
    "TABLE_USERS",
    "UPDATE_USER_EMAIL_SQL",
    "count_users",
    "create_table",
    "delete_user",
    "find_oldest_user",
    "insert_user",
    "select_all_users",
    "select_user_by_id",
    "update_user_email",
]
