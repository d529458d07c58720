# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for the pure error translation functions."""

from __future__ import annotations

import pytest

from omnienum.api.handler_error_translation import (
    translate_invalid_enum_values,
    translate_type_resolution_error,
)
from omnienum.enums import EnumDeserializationErrorCode
from omnienum.errors import InvalidEnumValueError, TypeResolutionError


@pytest.mark.unit
class TestTranslateInvalidEnumValues:
    def test_documented_payload_shape(self) -> None:
        error = InvalidEnumValueError(field_name="F", invalid_value="X")

        payload = translate_invalid_enum_values([error])

        assert payload.model_dump(mode="json", exclude={"violations"}) == {
            "error": "INVALID_ENUM_VALUE",
            "details": "Invalid value 'X' for field 'F'",
        }

    def test_one_violation_per_error(self) -> None:
        errors = [
            InvalidEnumValueError(
                field_name="color", invalid_value="red", allowed_values=("RED", "BLUE")
            ),
            InvalidEnumValueError(field_name="status", invalid_value="FOO"),
        ]

        payload = translate_invalid_enum_values(errors)

        assert payload.error is EnumDeserializationErrorCode.INVALID_ENUM_VALUE
        assert payload.details == "Invalid value 'red' for field 'color'"
        assert [v.model_dump() for v in payload.violations] == [
            {"field_name": "color", "invalid_value": "red", "allowed_values": ["RED", "BLUE"]},
            {"field_name": "status", "invalid_value": "FOO", "allowed_values": []},
        ]

    def test_requires_at_least_one_error(self) -> None:
        with pytest.raises(ValueError, match="At least one"):
            translate_invalid_enum_values([])


@pytest.mark.unit
class TestTranslateTypeResolutionError:
    def test_payload_uses_reason(self) -> None:
        payload = translate_type_resolution_error(
            TypeResolutionError("Declared type int is not an enumerated type")
        )

        assert payload.model_dump(mode="json") == {
            "error": "ENUM_TYPE_RESOLUTION_FAILED",
            "details": "Declared type int is not an enumerated type",
            "violations": [],
        }
