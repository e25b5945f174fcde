# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
# mypy: disable-error-code="union-attr"
"""Unit tests for ServiceUser workflows."""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock, patch

import pytest

from mysql_crud_example.enums import EnumErrorCode
from mysql_crud_example.errors import RecordNotFoundError
from mysql_crud_example.repositories.repository_user import (
    insert_user,
    select_all_users,
    select_user_by_id,
)
from mysql_crud_example.services import ServiceUser
from tests.helpers import FakeDatabaseClient, get_messages


@pytest.fixture
def service(fake_db: FakeDatabaseClient) -> ServiceUser:
    return ServiceUser(fake_db)


class TestInsertRandomUser:
    @pytest.mark.asyncio
    async def test_inserts_generated_identity(
        self, service: ServiceUser, fake_db: FakeDatabaseClient
    ) -> None:
        user_id = await service.insert_random_user()

        user = await select_user_by_id(fake_db, user_id)
        assert user is not None
        assert len(user.username) == 10
        assert "@" in user.email

    @pytest.mark.asyncio
    async def test_uses_identity_generators(
        self, service: ServiceUser, fake_db: FakeDatabaseClient
    ) -> None:
        with (
            patch(
                "mysql_crud_example.services.service_user.generate_random_username",
                return_value="Fixedname",
            ),
            patch(
                "mysql_crud_example.services.service_user.generate_random_email",
                return_value="fixed@demo.org",
            ),
        ):
            user_id = await service.insert_random_user()

        user = await select_user_by_id(fake_db, user_id)
        assert (user.username, user.email) == ("Fixedname", "fixed@demo.org")


class TestUpdateUserEmail:
    @pytest.mark.asyncio
    async def test_prefixes_existing_email(
        self, service: ServiceUser, fake_db: FakeDatabaseClient
    ) -> None:
        user_id = await insert_user(fake_db, "alice", "alice@example.com")

        updated = await service.update_user_email(user_id)

        assert updated.id == user_id
        assert updated.email == "updated_alice@example.com"
        assert (await select_user_by_id(fake_db, user_id)).email == (
            "updated_alice@example.com"
        )

    @pytest.mark.asyncio
    async def test_missing_user_raises(self, service: ServiceUser) -> None:
        with pytest.raises(RecordNotFoundError) as exc_info:
            await service.update_user_email(404)

        assert exc_info.value.error_code == EnumErrorCode.RESOURCE_NOT_FOUND
        assert exc_info.value.context["user_id"] == 404


class TestDeleteOldestUser:
    @pytest.mark.asyncio
    async def test_deletes_earliest_created(
        self, service: ServiceUser, fake_db: FakeDatabaseClient
    ) -> None:
        first = await insert_user(fake_db, "alice", "alice@example.com")
        second = await insert_user(fake_db, "bob", "bob@example.com")

        deleted = await service.delete_oldest_user()

        assert deleted.id == first
        remaining = await select_all_users(fake_db)
        assert [u.id for u in remaining] == [second]

    @pytest.mark.asyncio
    async def test_empty_table_raises(self, service: ServiceUser) -> None:
        with pytest.raises(RecordNotFoundError):
            await service.delete_oldest_user()


class TestDemonstrateDuplicateEmail:
    @pytest.mark.asyncio
    async def test_duplicate_rejected_and_count_unchanged(
        self,
        service: ServiceUser,
        fake_db: FakeDatabaseClient,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        await insert_user(fake_db, "alice", "alice@example.com")
        await insert_user(fake_db, "bob", "bob@example.com")
        caplog.set_level(logging.INFO)

        result = await service.demonstrate_duplicate_email()

        assert result is not None
        assert result.column == "email"
        assert result.rejected is True
        assert result.rows_before == result.rows_after == 2
        assert result.is_consistent
        assert any(
            "Duplicate email rejected (expected)" in message
            for message in get_messages(caplog.records, "service_user", logging.INFO)
        )

    @pytest.mark.asyncio
    async def test_empty_table_returns_none(
        self, service: ServiceUser, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.WARNING)

        assert await service.demonstrate_duplicate_email() is None
        assert get_messages(caplog.records, "service_user") == [
            "No users available for the duplicate email check"
        ]

    @pytest.mark.asyncio
    async def test_accepted_duplicate_is_reported_and_removed(
        self, service: ServiceUser, fake_db: FakeDatabaseClient
    ) -> None:
        await insert_user(fake_db, "alice", "alice@example.com")

        # Simulate a server without the UNIQUE constraint on email.
        with patch(
            "mysql_crud_example.repositories.repository_user.insert_user",
            new_callable=AsyncMock,
        ) as mock_insert:
            mock_insert.side_effect = lambda db, username, email: _raw_insert(
                fake_db, username, email
            )
            result = await service.demonstrate_duplicate_email()

        assert result is not None
        assert result.rejected is False
        assert result.rows_after == 2
        assert not result.is_consistent
        assert len(await select_all_users(fake_db)) == 1


def _raw_insert(db: FakeDatabaseClient, username: str, email: str) -> int:
    user_id = 100 + len(db.users)
    db.users.append(
        {
            "id": user_id,
            "username": username,
            "email": email,
            "created_at": db.users[0]["created_at"],
            "updated_at": db.users[0]["updated_at"],
        }
    )
    return user_id
