# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Result of a single write statement."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelExecuteResult(BaseModel):
    """Affected-row count and generated key reported by the driver.

    Attributes:
        row_count: Rows affected by the statement. MySQL reports 0 for an
            UPDATE whose new values equal the old ones.
        last_insert_id: AUTO_INCREMENT value generated by an INSERT, or None
            when the statement generated none.
    """

    model_config = ConfigDict(frozen=True)

    row_count: int = Field(default=0)
    last_insert_id: int | None = Field(default=None)


__all__: list[str] = ["ModelExecuteResult"]
