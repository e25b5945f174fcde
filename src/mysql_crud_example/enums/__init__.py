# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations for mysql_crud_example.

Exports:
    EnumErrorCode: Error classification codes
    EnumInfraTransportType: Transport type carried in error context
    EnumMysqlErrno: MySQL server/client error numbers with explicit handling
    EnumSslMode: MySQL ``ssl-mode`` connection option values
"""

from mysql_crud_example.enums.enum_error_code import EnumErrorCode
from mysql_crud_example.enums.enum_infra_transport_type import EnumInfraTransportType
from mysql_crud_example.enums.enum_mysql_errno import EnumMysqlErrno
from mysql_crud_example.enums.enum_ssl_mode import EnumSslMode

__all__: list[str] = [
    "EnumErrorCode",
    "EnumInfraTransportType",
    "EnumMysqlErrno",
    "EnumSslMode",
]
