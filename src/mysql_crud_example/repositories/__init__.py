# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Single-statement repositories for the ``users`` and ``profiles`` tables."""

from mysql_crud_example.repositories.repository_profile import (
    create_profile_table,
    delete_profile,
    insert_profile,
    select_all_profiles,
    select_profile_by_user_id,
    update_profile,
)
from mysql_crud_example.repositories.repository_user import (
    count_users,
    create_table,
    delete_user,
    find_oldest_user,
    insert_user,
    select_all_users,
    select_user_by_id,
    update_user_email,
)

__all__: list[str] = [
    "count_users",
    "create_profile_table",
    "create_table",
    "delete_profile",
    "delete_user",
    "find_oldest_user",
    "insert_profile",
    "insert_user",
    "select_all_profiles",
    "select_all_users",
    "select_profile_by_user_id",
    "select_user_by_id",
    "update_profile",
    "update_user_email",
]
