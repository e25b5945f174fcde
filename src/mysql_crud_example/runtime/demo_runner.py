# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""End-to-end CRUD walkthrough.

Runs every repository and service operation once, in order, against a single
MysqlConnectionManager. The first unrecoverable error propagates; the pool is
closed on every exit path.

Steps:
    1. Connect (one SSL-disabled fallback attempt on failure)
    2. Create the ``users`` and ``profiles`` tables
    3. Insert a random user
    4. Select all users
    5. Select the inserted user by id
    6. Update its email and re-read it
    7. Try to insert a duplicate email
    8. Delete the oldest user
    9. Create and update a user with a profile
    10. Try to insert a duplicate username, then delete the profiled user
    11. List the remaining users
"""

from __future__ import annotations

import logging

from mysql_crud_example.infrastructure import MysqlConnectionManager
from mysql_crud_example.models import ModelUser
from mysql_crud_example.repositories import (
    create_profile_table,
    create_table,
    select_all_users,
    select_user_by_id,
)
from mysql_crud_example.runtime.model_database_config import ModelDatabaseConfig
from mysql_crud_example.services import ServiceUser, ServiceUserProfile

logger = logging.getLogger(__name__)


async def run_demo(config: ModelDatabaseConfig | None = None) -> list[ModelUser]:
    """Execute the walkthrough and return the users left in the table.

    Raises:
        RuntimeHostError: On connection failure (after the fallback attempt)
            or on any statement failure.
    """
    async with MysqlConnectionManager(config) as db:
        await create_table(db)
        await create_profile_table(db)

        users = ServiceUser(db)
        user_id = await users.insert_random_user()

        all_users = await select_all_users(db)
        logger.info("Found %d users", len(all_users))
        for user in all_users:
            logger.debug(
                "User - ID: %d, username: %s, email: %s, created: %s, updated: %s",
                user.id,
                user.username,
                user.email,
                user.created_at,
                user.updated_at,
            )

        found = await select_user_by_id(db, user_id)
        if found is not None:
            logger.info(
                "Selected user - ID: %d, username: %s, email: %s",
                found.id,
                found.username,
                found.email,
            )
            await users.update_user_email(found.id)

        duplicate_email = await users.demonstrate_duplicate_email()
        if duplicate_email is not None and not duplicate_email.is_consistent:
            logger.warning("Duplicate email check did not behave as expected")

        deleted = await users.delete_oldest_user()
        logger.info("Deleted oldest user - ID: %d", deleted.id)

        profiles = ServiceUserProfile(db)
        profile_user_id, _ = await profiles.create_user_with_profile()
        await profiles.update_user_and_profile(profile_user_id)

        duplicate_username = await profiles.demonstrate_duplicate_username()
        if duplicate_username is not None and not duplicate_username.is_consistent:
            logger.warning("Duplicate username check did not behave as expected")

        await profiles.delete_user_and_profile(profile_user_id)

        final_users = await select_all_users(db)
        logger.info("Users remaining in database: %d", len(final_users))
        for user in final_users:
            logger.info(
                "User - ID: %d, username: %s, email: %s",
                user.id,
                user.username,
                user.email,
            )
        logger.info("CRUD walkthrough completed")
        return final_users


__all__: list[str] = ["run_demo"]
