# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure Transport Type Enumeration.

Defines the transport types carried in error context so that a failure can be
attributed to the layer it came from.
"""

from enum import Enum


class EnumInfraTransportType(str, Enum):
    """Transport types used in error context.

    Attributes:
        DATABASE: MySQL connection transport
        RUNTIME: Process-internal runtime (configuration, CLI, demo flow)
    """

    DATABASE = "db"
    RUNTIME = "runtime"


__all__ = ["EnumInfraTransportType"]
