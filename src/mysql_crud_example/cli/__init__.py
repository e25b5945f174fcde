# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Command-line entry point."""

from mysql_crud_example.cli.commands import main

__all__: list[str] = ["main"]
