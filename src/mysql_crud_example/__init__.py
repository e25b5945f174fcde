# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""MySQL CRUD example.

An async walkthrough of create/insert/select/update/delete against MySQL
using aiomysql, with a single SSL-disabled fallback when the first
connection attempt fails.

Subpackages:
    enums, errors, types: Shared vocabulary
    infrastructure: MysqlConnectionManager (pool + SSL fallback)
    repositories: One statement per function for users and profiles
    services: Multi-step workflows
    runtime: Configuration, logging and the walkthrough
    cli: ``mysql-crud-example`` command
"""

__version__: str = "0.1.0"

__all__: list[str] = ["__version__"]
