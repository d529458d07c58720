# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Constant matcher: one literal to one constant of a known enum.

Matching is exact, case-sensitive string equality against each constant's
canonical wire string and its explicit aliases, in declared order. No
trimming or case folding is ever applied; alternative spellings must be
declared as aliases on the enum itself.
"""

from __future__ import annotations

from omnienum.models.model_enum_type_descriptor import EnumTypeDescriptor
from omnienum.models.model_match_result import Matched, MatchResult, Unmatched


def match_enum_constant(descriptor: EnumTypeDescriptor, literal: str) -> MatchResult:
    """Match ``literal`` against the constants of ``descriptor``.

    Args:
        descriptor: Resolved enum descriptor.
        literal: Raw string read from the wire.

    Returns:
        ``Matched(constant)`` for the first constant with an equal
        representation, otherwise ``Unmatched(literal)``. A descriptor with
        no constants always yields ``Unmatched``.
    """
    for entry in descriptor.entries:
        if entry.wire_string == literal or literal in entry.aliases:
            return Matched(entry.constant)
    return Unmatched(literal)


__all__ = ["match_enum_constant"]
