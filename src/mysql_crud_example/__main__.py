# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Allow ``python -m mysql_crud_example``."""

from mysql_crud_example.cli.commands import main

if __name__ == "__main__":
    main()
