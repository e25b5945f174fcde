# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Multi-step workflows over the users and profiles repositories."""

from mysql_crud_example.services.service_user import ServiceUser
from mysql_crud_example.services.service_user_profile import ServiceUserProfile

__all__: list[str] = ["ServiceUser", "ServiceUserProfile"]
