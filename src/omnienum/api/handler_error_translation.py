# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Translation of deserialization errors into response payloads.

Pure functions only: status code selection and payload construction live
here, while the FastAPI wiring in ``exception_handlers`` stays thin.

Status mapping:
    - InvalidEnumValueError -> 400 (client sent a value outside the enum)
    - TypeResolutionError   -> 500 (server-side integration defect)
"""

from __future__ import annotations

from collections.abc import Sequence

from omnienum.enums.enum_error_code import EnumDeserializationErrorCode
from omnienum.errors import InvalidEnumValueError, TypeResolutionError
from omnienum.models.model_error_response import (
    ModelErrorResponse,
    ModelFieldViolation,
)

INVALID_ENUM_VALUE_STATUS = 400
TYPE_RESOLUTION_STATUS = 500


def translate_invalid_enum_values(
    errors: Sequence[InvalidEnumValueError],
) -> ModelErrorResponse:
    """Build the client-error payload for one or more rejected fields.

    ``details`` carries the first error's message verbatim; every error is
    listed in ``violations``.

    Raises:
        ValueError: If ``errors`` is empty.
    """
    if not errors:
        raise ValueError("At least one InvalidEnumValueError is required")
    return ModelErrorResponse(
        error=EnumDeserializationErrorCode.INVALID_ENUM_VALUE,
        details=errors[0].message,
        violations=[
            ModelFieldViolation(
                field_name=error.field_name,
                invalid_value=error.invalid_value,
                allowed_values=list(error.allowed_values),
            )
            for error in errors
        ],
    )


def translate_type_resolution_error(exc: TypeResolutionError) -> ModelErrorResponse:
    """Build the server-error payload for an unresolvable call site."""
    return ModelErrorResponse(
        error=EnumDeserializationErrorCode.ENUM_TYPE_RESOLUTION_FAILED,
        details=exc.reason,
    )


__all__ = [
    "INVALID_ENUM_VALUE_STATUS",
    "TYPE_RESOLUTION_STATUS",
    "translate_invalid_enum_values",
    "translate_type_resolution_error",
]
