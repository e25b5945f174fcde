# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""User + Profile Service.

Workflows that touch both the ``users`` and ``profiles`` tables. Each step is
one autocommitted statement executed in order; if a step fails the error is
logged and propagated, and the steps already executed stay applied.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mysql_crud_example.enums import EnumInfraTransportType
from mysql_crud_example.errors import (
    ModelInfraErrorContext,
    RecordNotFoundError,
    RuntimeHostError,
    UniqueConstraintViolationError,
)
from mysql_crud_example.models import ModelDuplicateCheckResult
from mysql_crud_example.repositories import repository_profile, repository_user
from mysql_crud_example.utils import generate_random_email, generate_random_username

if TYPE_CHECKING:
    from mysql_crud_example.protocols import ProtocolDatabaseClient

logger = logging.getLogger(__name__)

DEFAULT_BIO: str = "This is a sample biography"
DEFAULT_AVATAR_URL: str = "https://example.com/avatar.png"
UPDATED_BIO: str = "This is an updated biography"
UPDATED_AVATAR_URL: str = "https://example.com/updated-avatar.png"


class ServiceUserProfile:
    """Create, update and delete a user together with its profile."""

    def __init__(self, db: ProtocolDatabaseClient) -> None:
        self._db = db

    async def create_user_with_profile(self) -> tuple[int, int]:
        """Insert a generated user and a profile pointing at it.

        Returns:
            ``(user_id, profile_id)``.

        Raises:
            RuntimeHostError: If either insert fails. A user inserted before
                a failed profile insert is not removed.
        """
        username = generate_random_username()
        email = generate_random_email()
        logger.info("Creating user with profile")

        user_id = await repository_user.insert_user(self._db, username, email)
        try:
            profile_id = await repository_profile.insert_profile(
                self._db,
                user_id,
                f"{username} Smith",
                DEFAULT_BIO,
                DEFAULT_AVATAR_URL,
            )
        except RuntimeHostError as e:
            logger.error(
                "Profile insert failed for user ID: %d: %s",
                user_id,
                e,
                extra={"user_id": user_id, "error_code": e.error_code.value},
            )
            raise

        logger.info(
            "Created user with profile - user ID: %d, profile ID: %d",
            user_id,
            profile_id,
            extra={"user_id": user_id, "profile_id": profile_id},
        )
        return user_id, profile_id

    async def update_user_and_profile(self, user_id: int) -> None:
        """Give the user a new generated email and rewrite its profile.

        Raises:
            RecordNotFoundError: If the user or its profile does not exist.
        """
        logger.info("Updating user and profile - user ID: %d", user_id)

        new_email = f"updated_{generate_random_username()}@example.com"
        updated_users = await repository_user.update_user_email(
            self._db, user_id, new_email
        )
        if updated_users == 0:
            raise RecordNotFoundError(
                f"Cannot update user {user_id}: not found",
                context=self._context("update_user_and_profile"),
                user_id=user_id,
            )

        updated_profiles = await repository_profile.update_profile(
            self._db,
            user_id,
            f"Updated {generate_random_username()}",
            UPDATED_BIO,
            UPDATED_AVATAR_URL,
        )
        if updated_profiles == 0:
            raise RecordNotFoundError(
                f"Cannot update profile of user {user_id}: not found",
                context=self._context("update_user_and_profile"),
                user_id=user_id,
            )
        logger.info("Updated user and profile - user ID: %d", user_id)

    async def delete_user_and_profile(self, user_id: int) -> None:
        """Delete the profile, then the user."""
        logger.info("Deleting user and profile - user ID: %d", user_id)
        await repository_profile.delete_profile(self._db, user_id)
        deleted = await repository_user.delete_user(self._db, user_id)
        if deleted == 0:
            logger.warning(
                "User not found while deleting - ID: %d",
                user_id,
                extra={"user_id": user_id},
            )
            return
        logger.info("Deleted user and profile - user ID: %d", user_id)

    async def demonstrate_duplicate_username(
        self,
    ) -> ModelDuplicateCheckResult | None:
        """Insert an existing username with a fresh email and expect rejection.

        Returns:
            The check result, or None when there is no user to collide with.
        """
        users = await repository_user.select_all_users(self._db)
        if not users:
            logger.warning("No users available for the duplicate username check")
            return None

        existing = users[0]
        rows_before = len(users)
        profiles_before = len(await repository_profile.select_all_profiles(self._db))
        logger.info(
            "Attempting to insert duplicate username: %s",
            existing.username,
            extra={"user_id": existing.id},
        )

        rejected = False
        inserted_id: int | None = None
        try:
            inserted_id = await repository_user.insert_user(
                self._db, existing.username, generate_random_email()
            )
        except UniqueConstraintViolationError as e:
            rejected = True
            logger.info("Duplicate username rejected (expected): %s", e)

        rows_after = await repository_user.count_users(self._db)
        profiles_after = len(await repository_profile.select_all_profiles(self._db))

        if inserted_id is not None:
            logger.warning(
                "Duplicate username was accepted - removing inserted user ID: %d",
                inserted_id,
                extra={"user_id": inserted_id},
            )
            await repository_user.delete_user(self._db, inserted_id)

        logger.info(
            "User count: %d (before: %d), profile count: %d (before: %d)",
            rows_after,
            rows_before,
            profiles_after,
            profiles_before,
        )
        return ModelDuplicateCheckResult(
            column="username",
            rejected=rejected,
            rows_before=rows_before,
            rows_after=rows_after,
        )

    @staticmethod
    def _context(operation: str) -> ModelInfraErrorContext:
        return ModelInfraErrorContext.with_correlation(
            transport_type=EnumInfraTransportType.DATABASE,
            operation=operation,
            target_name=repository_profile.TABLE_PROFILES,
        )


__all__: list[str] = [
    "DEFAULT_AVATAR_URL",
    "DEFAULT_BIO",
    "ServiceUserProfile",
    "UPDATED_AVATAR_URL",
    "UPDATED_BIO",
]
