# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""User Service.

Multi-step user workflows built on the single-statement repository functions
in ``repositories.repository_user``. Statements run in autocommit mode, so a
workflow that fails part-way leaves the earlier statements applied; the error
propagates to the caller without compensation.

Example:
    >>> async with MysqlConnectionManager(config) as db:
    ...     service = ServiceUser(db)
    ...     user_id = await service.insert_random_user()
    ...     await service.update_user_email(user_id)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mysql_crud_example.enums import EnumInfraTransportType
from mysql_crud_example.errors import (
    ModelInfraErrorContext,
    RecordNotFoundError,
    UniqueConstraintViolationError,
)
from mysql_crud_example.models import ModelDuplicateCheckResult, ModelUser
from mysql_crud_example.repositories import repository_user
from mysql_crud_example.utils import generate_random_email, generate_random_username

if TYPE_CHECKING:
    from mysql_crud_example.protocols import ProtocolDatabaseClient

logger = logging.getLogger(__name__)


class ServiceUser:
    """Workflows over the ``users`` table.

    Raises:
        RecordNotFoundError: When a workflow needs a row that does not exist.
        UniqueConstraintViolationError: When a generated identity collides.
        RuntimeHostError: For connection and other database errors.
    """

    def __init__(self, db: ProtocolDatabaseClient) -> None:
        self._db = db

    async def insert_random_user(self) -> int:
        """Insert a user with a generated username and email.

        Returns:
            The id assigned by the server.
        """
        username = generate_random_username()
        email = generate_random_email()
        return await repository_user.insert_user(self._db, username, email)

    async def update_user_email(self, user_id: int) -> ModelUser:
        """Prefix the user's email with ``updated_`` and return the re-read row.

        Raises:
            RecordNotFoundError: If no user has ``user_id``, before or after
                the update.
        """
        user = await repository_user.select_user_by_id(self._db, user_id)
        if user is None:
            raise RecordNotFoundError(
                f"Cannot update email: user {user_id} not found",
                context=self._context("update_user_email"),
                user_id=user_id,
            )

        new_email = f"updated_{user.email}"
        await repository_user.update_user_email(self._db, user_id, new_email)

        updated = await repository_user.select_user_by_id(self._db, user_id)
        if updated is None:
            raise RecordNotFoundError(
                f"User {user_id} disappeared after email update",
                context=self._context("update_user_email"),
                user_id=user_id,
            )
        logger.info(
            "Updated user - ID: %d, username: %s, email: %s",
            updated.id,
            updated.username,
            updated.email,
            extra={"user_id": updated.id},
        )
        return updated

    async def delete_oldest_user(self) -> ModelUser:
        """Delete the earliest-created user and return it.

        Raises:
            RecordNotFoundError: If the table is empty.
        """
        oldest = await repository_user.find_oldest_user(self._db)
        if oldest is None:
            raise RecordNotFoundError(
                "Cannot delete oldest user: users table is empty",
                context=self._context("delete_oldest_user"),
            )

        logger.info(
            "Deleting oldest user - ID: %d, username: %s",
            oldest.id,
            oldest.username,
            extra={"user_id": oldest.id},
        )
        await repository_user.delete_user(self._db, oldest.id)
        return oldest

    async def demonstrate_duplicate_email(self) -> ModelDuplicateCheckResult | None:
        """Insert a fresh username with an existing email and expect rejection.

        Returns:
            The check result, or None when there is no user to collide with.
        """
        users = await repository_user.select_all_users(self._db)
        if not users:
            logger.warning("No users available for the duplicate email check")
            return None

        existing = users[0]
        rows_before = len(users)
        logger.info(
            "Attempting to insert duplicate email of user ID: %d",
            existing.id,
            extra={"user_id": existing.id},
        )

        rejected = False
        inserted_id: int | None = None
        try:
            inserted_id = await repository_user.insert_user(
                self._db, generate_random_username(), existing.email
            )
        except UniqueConstraintViolationError as e:
            rejected = True
            logger.info(
                "Duplicate email rejected (expected): %s",
                e,
                extra={"user_id": existing.id},
            )

        rows_after = await repository_user.count_users(self._db)

        if inserted_id is not None:
            logger.warning(
                "Duplicate email was accepted - removing inserted user ID: %d",
                inserted_id,
                extra={"user_id": inserted_id},
            )
            await repository_user.delete_user(self._db, inserted_id)

        result = ModelDuplicateCheckResult(
            column="email",
            rejected=rejected,
            rows_before=rows_before,
            rows_after=rows_after,
        )
        logger.info(
            "User count after duplicate email attempt: %d (before: %d)",
            rows_after,
            rows_before,
        )
        return result

    @staticmethod
    def _context(operation: str) -> ModelInfraErrorContext:
        return ModelInfraErrorContext.with_correlation(
            transport_type=EnumInfraTransportType.DATABASE,
            operation=operation,
            target_name=repository_user.TABLE_USERS,
        )


__all__: list[str] = ["ServiceUser"]
