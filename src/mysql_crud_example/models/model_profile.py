# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Profile row model for the ``profiles`` table."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ModelProfile(BaseModel):
    """Read-only copy of a ``profiles`` row (one per user, cascades on delete)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(ge=1)
    user_id: int = Field(ge=1, description="Owning users.id")
    full_name: str = Field(max_length=100)
    bio: str | None = None
    avatar_url: str | None = Field(default=None, max_length=255)
    created_at: datetime
    updated_at: datetime


__all__: list[str] = ["ModelProfile"]
