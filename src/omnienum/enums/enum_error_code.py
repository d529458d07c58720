# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Machine-readable error codes for enum deserialization failures."""

from enum import Enum


class EnumDeserializationErrorCode(str, Enum):
    """Error codes surfaced by the structured error translator.

    Attributes:
        INVALID_ENUM_VALUE: The wire literal matched no constant (client error).
        ENUM_TYPE_RESOLUTION_FAILED: The call site could not be mapped to an
            enumerated type (integration defect, server error).
    """

    INVALID_ENUM_VALUE = "INVALID_ENUM_VALUE"
    ENUM_TYPE_RESOLUTION_FAILED = "ENUM_TYPE_RESOLUTION_FAILED"


__all__ = ["EnumDeserializationErrorCode"]
