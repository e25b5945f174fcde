# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for the async database client used by the repositories.

Repositories depend on this protocol rather than on MysqlConnectionManager
so they can be exercised with ``AsyncMock`` in unit tests.

Example:
    >>> async def count_users(db: ProtocolDatabaseClient) -> int:
    ...     row = await db.fetch_one("SELECT COUNT(*) AS n FROM users")
    ...     return int(row["n"]) if row else 0
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable
from uuid import UUID

if TYPE_CHECKING:
    from mysql_crud_example.models import ModelExecuteResult


@runtime_checkable
class ProtocolDatabaseClient(Protocol):
    """Single-statement async database client.

    Every method runs exactly one parameterized statement (``%s``
    placeholders). ``operation`` and ``target_name`` label the error context
    and log lines.
    """

    async def execute(
        self,
        sql: str,
        params: Sequence[object] = (),
        *,
        operation: str = "execute",
        target_name: str = "mysql",
        correlation_id: UUID | None = None,
    ) -> ModelExecuteResult:
        """Run a write or DDL statement."""
        ...

    async def fetch_all(
        self,
        sql: str,
        params: Sequence[object] = (),
        *,
        operation: str = "fetch_all",
        target_name: str = "mysql",
        correlation_id: UUID | None = None,
    ) -> list[dict[str, object]]:
        """Run a SELECT and return every row as a dict."""
        ...

    async def fetch_one(
        self,
        sql: str,
        params: Sequence[object] = (),
        *,
        operation: str = "fetch_one",
        target_name: str = "mysql",
        correlation_id: UUID | None = None,
    ) -> dict[str, object] | None:
        """Run a SELECT and return the first row, or None."""
        ...


__all__: list[str] = ["ProtocolDatabaseClient"]
