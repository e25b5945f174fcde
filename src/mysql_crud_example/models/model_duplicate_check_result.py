# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Outcome of a deliberate duplicate insert."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ModelDuplicateCheckResult(BaseModel):
    """Reports whether the UNIQUE constraint rejected a duplicate insert.

    Attributes:
        column: The column the duplicate value targeted.
        rejected: True when the server raised a duplicate-key error.
        rows_before: ``users`` row count before the attempt.
        rows_after: ``users`` row count after the attempt.
    """

    model_config = ConfigDict(frozen=True)

    column: Literal["username", "email"]
    rejected: bool
    rows_before: int = Field(ge=0)
    rows_after: int = Field(ge=0)

    @property
    def is_consistent(self) -> bool:
        """True when the duplicate was rejected and no row was added."""
        return self.rejected and self.rows_before == self.rows_after


__all__: list[str] = ["ModelDuplicateCheckResult"]
