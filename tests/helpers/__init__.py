# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for mysql_crud_example unit tests.

Available Utilities:
    - FakeDatabaseClient: In-memory ProtocolDatabaseClient enforcing the
      UNIQUE, foreign key and cascade rules of the schema
    - filter_logger_records: Select captured log records by logger and level
    - get_messages: Formatted messages of the selected records
    - make_mock_pool: aiomysql pool double with a scripted cursor
"""

from tests.helpers.fake_database_client import FakeDatabaseClient
from tests.helpers.log_helpers import filter_logger_records, get_messages
from tests.helpers.mock_helpers import make_mock_pool

__all__ = [
    "FakeDatabaseClient",
    "filter_logger_records",
    "get_messages",
    "make_mock_pool",
]
