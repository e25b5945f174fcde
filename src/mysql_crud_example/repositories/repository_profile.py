# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""CRUD operations for the ``profiles`` table.

A profile belongs to exactly one user (``user_id`` is UNIQUE) and is removed
with it through ``ON DELETE CASCADE``. Profiles are addressed by ``user_id``.
"""

from __future__ import annotations

import logging

from mysql_crud_example.enums import EnumInfraTransportType
from mysql_crud_example.errors import ModelInfraErrorContext, RuntimeHostError
from mysql_crud_example.models import ModelProfile
from mysql_crud_example.protocols import ProtocolDatabaseClient

logger = logging.getLogger(__name__)

TABLE_PROFILES: str = "profiles"

CREATE_PROFILE_TABLE_SQL: str = """
CREATE TABLE IF NOT EXISTS profiles (
    id BIGINT UNSIGNED AUTO_INCREMENT PRIMARY KEY,
    user_id BIGINT UNSIGNED NOT NULL UNIQUE,
    full_name VARCHAR(100) NOT NULL,
    bio TEXT,
    avatar_url VARCHAR(255),
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
    FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE
) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_unicode_ci
"""

INSERT_PROFILE_SQL: str = (
    "INSERT INTO profiles (user_id, full_name, bio, avatar_url) "
    "VALUES (%s, %s, %s, %s)"
)

_PROFILE_COLUMNS: str = "id, user_id, full_name, bio, avatar_url, created_at, updated_at"

SELECT_ALL_PROFILES_SQL: str = f"SELECT {_PROFILE_COLUMNS} FROM profiles ORDER BY id"

SELECT_PROFILE_BY_USER_ID_SQL: str = (
    f"SELECT {_PROFILE_COLUMNS} FROM profiles WHERE user_id = %s"
)

UPDATE_PROFILE_SQL: str = (
    "UPDATE profiles SET full_name = %s, bio = %s, avatar_url = %s WHERE user_id = %s"
)

DELETE_PROFILE_SQL: str = "DELETE FROM profiles WHERE user_id = %s"


async def create_profile_table(db: ProtocolDatabaseClient) -> None:
    """Create the ``profiles`` table. Requires ``users`` to exist."""
    logger.info("Creating profiles table")
    await db.execute(
        CREATE_PROFILE_TABLE_SQL,
        operation="create_profile_table",
        target_name=TABLE_PROFILES,
    )
    logger.info("Profiles table ready")


async def insert_profile(
    db: ProtocolDatabaseClient,
    user_id: int,
    full_name: str,
    bio: str | None = None,
    avatar_url: str | None = None,
) -> int:
    """Insert a profile for ``user_id`` and return the new profile id.

    Raises:
        UniqueConstraintViolationError: If the user already has a profile.
        RuntimeHostError: If ``user_id`` does not reference an existing user,
            or the server reports no generated id.
    """
    logger.info("Inserting profile - user ID: %d", user_id, extra={"user_id": user_id})
    result = await db.execute(
        INSERT_PROFILE_SQL,
        (user_id, full_name, bio, avatar_url),
        operation="insert_profile",
        target_name=TABLE_PROFILES,
    )
    if result.last_insert_id is None:
        ctx = ModelInfraErrorContext.with_correlation(
            transport_type=EnumInfraTransportType.DATABASE,
            operation="insert_profile",
            target_name=TABLE_PROFILES,
        )
        raise RuntimeHostError(
            "Insert into profiles returned no generated id",
            context=ctx,
            user_id=user_id,
        )
    profile_id = int(result.last_insert_id)
    logger.info(
        "Inserted profile - ID: %d",
        profile_id,
        extra={"user_id": user_id, "profile_id": profile_id},
    )
    return profile_id


async def select_all_profiles(db: ProtocolDatabaseClient) -> list[ModelProfile]:
    logger.debug("Selecting all profiles")
    rows = await db.fetch_all(
        SELECT_ALL_PROFILES_SQL,
        operation="select_all_profiles",
        target_name=TABLE_PROFILES,
    )
    profiles = [ModelProfile.model_validate(row) for row in rows]
    logger.debug("Selected %d profiles", len(profiles))
    return profiles


async def select_profile_by_user_id(
    db: ProtocolDatabaseClient, user_id: int
) -> ModelProfile | None:
    """Return the profile owned by ``user_id``, or None (logged at WARNING)."""
    logger.debug(
        "Selecting profile by user ID - user ID: %d", user_id, extra={"user_id": user_id}
    )
    row = await db.fetch_one(
        SELECT_PROFILE_BY_USER_ID_SQL,
        (user_id,),
        operation="select_profile_by_user_id",
        target_name=TABLE_PROFILES,
    )
    if row is None:
        logger.warning(
            "Profile not found - user ID: %d", user_id, extra={"user_id": user_id}
        )
        return None
    return ModelProfile.model_validate(row)


async def update_profile(
    db: ProtocolDatabaseClient,
    user_id: int,
    full_name: str,
    bio: str | None = None,
    avatar_url: str | None = None,
) -> int:
    """Overwrite the profile fields for ``user_id``. Returns rows affected."""
    logger.info("Updating profile - user ID: %d", user_id, extra={"user_id": user_id})
    result = await db.execute(
        UPDATE_PROFILE_SQL,
        (full_name, bio, avatar_url, user_id),
        operation="update_profile",
        target_name=TABLE_PROFILES,
    )
    return result.row_count


async def delete_profile(db: ProtocolDatabaseClient, user_id: int) -> int:
    logger.info("Deleting profile - user ID: %d", user_id, extra={"user_id": user_id})
    result = await db.execute(
        DELETE_PROFILE_SQL,
        (user_id,),
        operation="delete_profile",
        target_name=TABLE_PROFILES,
    )
    return result.row_count


__all__: list[str] = [
    "CREATE_PROFILE_TABLE_SQL",
    "DELETE_PROFILE_SQL",
    "INSERT_PROFILE_SQL",
    "SELECT_ALL_PROFILES_SQL",
    "SELECT_PROFILE_BY_USER_ID_SQL",
    "TABLE_PROFILES",
    "UPDATE_PROFILE_SQL",
    "create_profile_table",
    "delete_profile",
    "insert_profile",
    "select_all_profiles",
    "select_profile_by_user_id",
    "update_profile",
]
