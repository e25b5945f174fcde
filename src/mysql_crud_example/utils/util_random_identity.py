# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Random usernames and email addresses for demo rows.

Keeps repeated runs of the walkthrough from colliding on the UNIQUE
``username`` and ``email`` columns.
"""

from __future__ import annotations

import random
import string

EMAIL_DOMAINS: tuple[str, ...] = ("example.com", "test.com", "mail.com", "demo.org")
DEFAULT_USERNAME_LENGTH: int = 10


def generate_random_username(length: int = DEFAULT_USERNAME_LENGTH) -> str:
    """Return ``length`` random ASCII letters (mixed case)."""
    if length < 1:
        raise ValueError("length must be at least 1")
    return "".join(random.choices(string.ascii_letters, k=length))


def generate_random_email() -> str:
    """Return ``<lower-case username>@<domain>`` with a domain from EMAIL_DOMAINS."""
    local_part = generate_random_username().lower()
    return f"{local_part}@{random.choice(EMAIL_DOMAINS)}"


__all__: list[str] = [
    "DEFAULT_USERNAME_LENGTH",
    "EMAIL_DOMAINS",
    "generate_random_email",
    "generate_random_username",
]
