# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Tagged result of matching one literal against an enum descriptor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Matched:
    """The literal matched ``constant``."""

    constant: Enum


@dataclass(frozen=True, slots=True)
class Unmatched:
    """No constant matched; ``raw_value`` is the literal as received."""

    raw_value: str


MatchResult: TypeAlias = Matched | Unmatched


__all__ = ["MatchResult", "Matched", "Unmatched"]
