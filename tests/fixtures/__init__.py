# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared test fixtures for omnienum tests.

Modules:
    fixture_enums: Sample enumerated types covering the resolver edge cases
"""

from tests.fixtures.fixture_enums import (
    EnumBlank,
    EnumClashing,
    EnumColor,
    EnumEmpty,
    EnumNumeric,
    EnumOrderStatus,
    EnumPriority,
    EnumWithAlias,
)

__all__ = [
    "EnumBlank",
    "EnumClashing",
    "EnumColor",
    "EnumEmpty",
    "EnumNumeric",
    "EnumOrderStatus",
    "EnumPriority",
    "EnumWithAlias",
]
