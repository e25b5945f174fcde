# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""In-memory ProtocolDatabaseClient for unit tests.

Dispatches on the SQL constants exported by the repository modules and keeps
``users`` and ``profiles`` as lists of dicts. UNIQUE columns, the
``profiles.user_id`` foreign key and ``ON DELETE CASCADE`` are enforced so
that services see the same errors a MySQL server would produce.

Timestamps come from a deterministic clock that advances one second per
write, so ``updated_at`` always moves forward on update.

Example usage:
    >>> db = FakeDatabaseClient()
    >>> user_id = await insert_user(db, "alice", "alice@example.com")
    >>> (await select_user_by_id(db, user_id)).email
    'alice@example.com'
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timedelta
from uuid import UUID

from mysql_crud_example.enums import EnumErrorCode, EnumInfraTransportType
from mysql_crud_example.errors import (
    ModelInfraErrorContext,
    RuntimeHostError,
    UniqueConstraintViolationError,
)
from mysql_crud_example.models import ModelExecuteResult
from mysql_crud_example.repositories import repository_profile as rp
from mysql_crud_example.repositories import repository_user as ru

__all__ = ["FakeDatabaseClient"]

_EPOCH = datetime(2025, 1, 1, 12, 0, 0)


class FakeDatabaseClient:
    """Minimal in-memory stand-in for MysqlConnectionManager.

    Attributes:
        users: Rows of the ``users`` table.
        profiles: Rows of the ``profiles`` table.
        operations: Operation names in call order.
        tables_created: Table names created through DDL.
    """

    def __init__(self) -> None:
        self.users: list[dict[str, object]] = []
        self.profiles: list[dict[str, object]] = []
        self.operations: list[str] = []
        self.tables_created: list[str] = []
        self._next_user_id = 1
        self._next_profile_id = 1
        self._ticks = 0

    def _now(self) -> datetime:
        self._ticks += 1
        return _EPOCH + timedelta(seconds=self._ticks)

    def _duplicate(self, key: str, operation: str) -> UniqueConstraintViolationError:
        return UniqueConstraintViolationError(
            f"Unique constraint violation on key '{key}'",
            context=ModelInfraErrorContext(
                transport_type=EnumInfraTransportType.DATABASE,
                operation=operation,
                target_name=key.split(".")[0],
            ),
            mysql_errno=1062,
            key_name=key,
        )

    def _find_user(self, user_id: object) -> dict[str, object] | None:
        return next((u for u in self.users if u["id"] == user_id), None)

    def _find_profile(self, user_id: object) -> dict[str, object] | None:
        return next((p for p in self.profiles if p["user_id"] == user_id), None)

    async def execute(
        self,
        sql: str,
        params: Sequence[object] = (),
        *,
        operation: str = "execute",
        target_name: str = "mysql",
        correlation_id: UUID | None = None,
    ) -> ModelExecuteResult:
        self.operations.append(operation)

        if sql == ru.CREATE_USER_TABLE_SQL:
            self.tables_created.append(ru.TABLE_USERS)
            return ModelExecuteResult()
        if sql == rp.CREATE_PROFILE_TABLE_SQL:
            self.tables_created.append(rp.TABLE_PROFILES)
            return ModelExecuteResult()

        if sql == ru.INSERT_USER_SQL:
            username, email = params
            if any(u["username"] == username for u in self.users):
                raise self._duplicate("users.username", operation)
            if any(u["email"] == email for u in self.users):
                raise self._duplicate("users.email", operation)
            now = self._now()
            user_id = self._next_user_id
            self._next_user_id += 1
            self.users.append(
                {
                    "id": user_id,
                    "username": username,
                    "email": email,
                    "created_at": now,
                    "updated_at": now,
                }
            )
            return ModelExecuteResult(row_count=1, last_insert_id=user_id)

        if sql == ru.UPDATE_USER_EMAIL_SQL:
            email, user_id = params
            user = self._find_user(user_id)
            if user is None or user["email"] == email:
                return ModelExecuteResult(row_count=0)
            if any(u["email"] == email for u in self.users):
                raise self._duplicate("users.email", operation)
            user["email"] = email
            user["updated_at"] = self._now()
            return ModelExecuteResult(row_count=1)

        if sql == ru.DELETE_USER_SQL:
            (user_id,) = params
            user = self._find_user(user_id)
            if user is None:
                return ModelExecuteResult(row_count=0)
            self.users.remove(user)
            self.profiles = [p for p in self.profiles if p["user_id"] != user_id]
            return ModelExecuteResult(row_count=1)

        if sql == rp.INSERT_PROFILE_SQL:
            user_id, full_name, bio, avatar_url = params
            if self._find_user(user_id) is None:
                raise RuntimeHostError(
                    "Foreign key constraint violation",
                    error_code=EnumErrorCode.DATABASE_QUERY_ERROR,
                    mysql_errno=1452,
                )
            if self._find_profile(user_id) is not None:
                raise self._duplicate("profiles.user_id", operation)
            now = self._now()
            profile_id = self._next_profile_id
            self._next_profile_id += 1
            self.profiles.append(
                {
                    "id": profile_id,
                    "user_id": user_id,
                    "full_name": full_name,
                    "bio": bio,
                    "avatar_url": avatar_url,
                    "created_at": now,
                    "updated_at": now,
                }
            )
            return ModelExecuteResult(row_count=1, last_insert_id=profile_id)

        if sql == rp.UPDATE_PROFILE_SQL:
            full_name, bio, avatar_url, user_id = params
            profile = self._find_profile(user_id)
            if profile is None:
                return ModelExecuteResult(row_count=0)
            profile.update(full_name=full_name, bio=bio, avatar_url=avatar_url)
            profile["updated_at"] = self._now()
            return ModelExecuteResult(row_count=1)

        if sql == rp.DELETE_PROFILE_SQL:
            (user_id,) = params
            profile = self._find_profile(user_id)
            if profile is None:
                return ModelExecuteResult(row_count=0)
            self.profiles.remove(profile)
            return ModelExecuteResult(row_count=1)

        raise AssertionError(f"Unexpected execute SQL for {operation}")

    async def fetch_all(
        self,
        sql: str,
        params: Sequence[object] = (),
        *,
        operation: str = "fetch_all",
        target_name: str = "mysql",
        correlation_id: UUID | None = None,
    ) -> list[dict[str, object]]:
        self.operations.append(operation)
        if sql == ru.SELECT_ALL_USERS_SQL:
            return [dict(u) for u in sorted(self.users, key=lambda u: u["id"])]  # type: ignore[arg-type, return-value]
        if sql == rp.SELECT_ALL_PROFILES_SQL:
            return [dict(p) for p in sorted(self.profiles, key=lambda p: p["id"])]  # type: ignore[arg-type, return-value]
        raise AssertionError(f"Unexpected fetch_all SQL for {operation}")

    async def fetch_one(
        self,
        sql: str,
        params: Sequence[object] = (),
        *,
        operation: str = "fetch_one",
        target_name: str = "mysql",
        correlation_id: UUID | None = None,
    ) -> dict[str, object] | None:
        self.operations.append(operation)
        if sql == ru.SELECT_USER_BY_ID_SQL:
            user = self._find_user(params[0])
            return dict(user) if user is not None else None
        if sql == ru.SELECT_OLDEST_USER_SQL:
            if not self.users:
                return None
            return dict(min(self.users, key=lambda u: (u["created_at"], u["id"])))  # type: ignore[arg-type, return-value]
        if sql == ru.COUNT_USERS_SQL:
            return {"user_count": len(self.users)}
        if sql == rp.SELECT_PROFILE_BY_USER_ID_SQL:
            profile = self._find_profile(params[0])
            return dict(profile) if profile is not None else None
        raise AssertionError(f"Unexpected fetch_one SQL for {operation}")
