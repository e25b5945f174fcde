# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pydantic models for rows and statement results."""

from mysql_crud_example.models.model_duplicate_check_result import (
    ModelDuplicateCheckResult,
)
from mysql_crud_example.models.model_execute_result import ModelExecuteResult
from mysql_crud_example.models.model_profile import ModelProfile
from mysql_crud_example.models.model_user import ModelUser

__all__: list[str] = [
    "ModelDuplicateCheckResult",
    "ModelExecuteResult",
    "ModelProfile",
    "ModelUser",
]
