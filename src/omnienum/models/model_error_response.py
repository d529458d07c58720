# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Response payload models produced by the structured error translator."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnienum.enums.enum_error_code import EnumDeserializationErrorCode


class ModelFieldViolation(BaseModel):
    """One rejected field.

    Attributes:
        field_name: Field that carried the invalid value (empty if unknown).
        invalid_value: The rejected literal, verbatim.
        allowed_values: Wire strings that would have been accepted.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    field_name: str = Field(..., description="Field that carried the invalid value")
    invalid_value: str = Field(..., description="Rejected literal, verbatim")
    allowed_values: list[str] = Field(
        default_factory=list,
        description="Canonical wire strings accepted for the field",
    )


class ModelErrorResponse(BaseModel):
    """Error envelope returned to clients.

    Example:
        >>> ModelErrorResponse(
        ...     error=EnumDeserializationErrorCode.INVALID_ENUM_VALUE,
        ...     details="Invalid value 'X' for field 'F'",
        ... ).model_dump(mode="json", exclude_defaults=True)
        {'error': 'INVALID_ENUM_VALUE', 'details': "Invalid value 'X' for field 'F'"}
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    error: EnumDeserializationErrorCode = Field(
        ..., description="Machine-readable error code"
    )
    details: str = Field(..., description="Human-readable description")
    violations: list[ModelFieldViolation] = Field(
        default_factory=list,
        description="One entry per rejected field",
    )


__all__ = ["ModelErrorResponse", "ModelFieldViolation"]
