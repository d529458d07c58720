# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Value objects of the enum deserialization pipeline."""

from omnienum.models.model_call_site import DeserializationCallSite
from omnienum.models.model_enum_type_descriptor import (
    EnumConstantEntry,
    EnumTypeDescriptor,
)
from omnienum.models.model_error_response import (
    ModelErrorResponse,
    ModelFieldViolation,
)
from omnienum.models.model_match_result import Matched, MatchResult, Unmatched

__all__ = [
    "DeserializationCallSite",
    "EnumConstantEntry",
    "EnumTypeDescriptor",
    "MatchResult",
    "Matched",
    "ModelErrorResponse",
    "ModelFieldViolation",
    "Unmatched",
]
