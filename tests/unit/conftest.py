# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared pytest configuration for all unit tests.

This conftest.py automatically applies the `unit` marker to all tests
in the tests/unit/ directory hierarchy, providing consistent test
categorization without requiring individual files to set pytestmark.

NOTE: pytestmark at module-level in conftest.py does NOT automatically
apply to tests in other files. The pytest_collection_modifyitems hook
marks them instead.

Usage:
    Run only unit tests: pytest -m unit
    Exclude unit tests: pytest -m "not unit"
"""

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Add the unit marker to every test collected from tests/unit."""
    unit_marker = pytest.mark.unit

    for item in items:
        if "tests/unit" in str(item.fspath):
            if not any(marker.name == "unit" for marker in item.iter_markers()):
                item.add_marker(unit_marker)
