# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""User row model for the ``users`` table."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ModelUser(BaseModel):
    """Transient, read-only copy of a ``users`` row.

    The server owns the row; ``id``, ``created_at`` and ``updated_at`` are
    assigned by MySQL and never written by the application.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(ge=1, description="Auto-assigned primary key")
    username: str = Field(max_length=50, description="Unique login name")
    email: str = Field(max_length=100, description="Unique email address")
    created_at: datetime = Field(description="Server-assigned creation time")
    updated_at: datetime = Field(description="Server-refreshed modification time")


__all__: list[str] = ["ModelUser"]
