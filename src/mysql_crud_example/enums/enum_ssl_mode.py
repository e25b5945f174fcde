# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""MySQL SSL Mode Enumeration.

Mirrors the ``ssl-mode`` connection option understood by MySQL clients.
Values are compared case-insensitively when parsed from a DSN.
"""

from enum import Enum


class EnumSslMode(str, Enum):
    """TLS negotiation modes for MySQL connections.

    Attributes:
        DISABLED: Plain TCP, no TLS handshake.
        PREFERRED: Use TLS when the server offers it, without verification.
        REQUIRED: Require TLS, without certificate verification.
        VERIFY_CA: Require TLS and verify the server certificate chain.
        VERIFY_IDENTITY: VERIFY_CA plus hostname verification.
    """

    DISABLED = "DISABLED"
    PREFERRED = "PREFERRED"
    REQUIRED = "REQUIRED"
    VERIFY_CA = "VERIFY_CA"
    VERIFY_IDENTITY = "VERIFY_IDENTITY"

    @property
    def uses_tls(self) -> bool:
        """Return True when the mode attempts a TLS handshake."""
        return self is not EnumSslMode.DISABLED


__all__ = ["EnumSslMode"]
