# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Error types raised by the enum deserialization pipeline.

Two failure classes are kept strictly apart:

    - InvalidEnumValueError: untrusted input matched no constant. Maps to a
      client error (HTTP 400). A ``ValueError`` so pydantic reports it inside
      a ``ValidationError`` with the original exception in ``ctx["error"]``.
    - TypeResolutionError: the call site could not be mapped to an enumerated
      type. A setup defect, never bad input. A ``TypeError`` so pydantic lets
      it propagate untouched instead of folding it into validation errors.

Neither error is wrapped by the resolver, matcher or deserializer.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from omnienum.models.model_call_site import DeserializationCallSite


class InvalidEnumValueError(ValueError):
    """Raised when a wire literal does not match any constant of its enum.

    The offending literal and field name are kept verbatim, never trimmed or
    truncated, so callers can display or log the exact input.

    Attributes:
        field_name: Field being deserialized, empty when the call site had
            no field context.
        invalid_value: The raw literal that failed to match.
        message: Human-readable message containing both of the above.
        enum_type_name: Name of the target enum, empty if unknown.
        allowed_values: Canonical wire strings the literal was checked against.

    Example:
        >>> raise InvalidEnumValueError(field_name="status", invalid_value="FOO")
        InvalidEnumValueError: Invalid value 'FOO' for field 'status'
    """

    def __init__(
        self,
        *,
        field_name: str,
        invalid_value: str,
        enum_type_name: str = "",
        allowed_values: Sequence[str] = (),
    ) -> None:
        self._field_name = field_name
        self._invalid_value = invalid_value
        self._enum_type_name = enum_type_name
        self._allowed_values = tuple(allowed_values)
        if field_name:
            message = f"Invalid value '{invalid_value}' for field '{field_name}'"
        elif enum_type_name:
            message = f"Invalid value '{invalid_value}' for enum '{enum_type_name}'"
        else:
            message = f"Invalid value '{invalid_value}'"
        self._message = message
        super().__init__(message)

    @property
    def field_name(self) -> str:
        return self._field_name

    @property
    def invalid_value(self) -> str:
        return self._invalid_value

    @property
    def message(self) -> str:
        return self._message

    @property
    def enum_type_name(self) -> str:
        return self._enum_type_name

    @property
    def allowed_values(self) -> tuple[str, ...]:
        return self._allowed_values

    def __reduce__(self):  # type: ignore[override]
        return (
            _rebuild_invalid_enum_value_error,
            (
                self._field_name,
                self._invalid_value,
                self._enum_type_name,
                self._allowed_values,
            ),
        )


def _rebuild_invalid_enum_value_error(
    field_name: str,
    invalid_value: str,
    enum_type_name: str,
    allowed_values: tuple[str, ...],
) -> InvalidEnumValueError:
    # Keyword-only __init__ cannot be restored by the default exception pickling.
    return InvalidEnumValueError(
        field_name=field_name,
        invalid_value=invalid_value,
        enum_type_name=enum_type_name,
        allowed_values=allowed_values,
    )


class TypeResolutionError(TypeError):
    """Raised when a call site cannot be mapped to an enumerated type.

    Indicates a configuration or integration defect (the target is not an
    enum, type metadata is missing, or the enum's wire strings collide).
    Should fail the request, or startup when detectable earlier, and never be
    silently defaulted.

    Attributes:
        reason: Human-readable description of the defect.
        call_site: The call site that failed to resolve, if any.
    """

    def __init__(
        self,
        reason: str,
        *,
        call_site: DeserializationCallSite | None = None,
    ) -> None:
        self._reason = reason
        self._call_site = call_site
        super().__init__(reason)

    @property
    def reason(self) -> str:
        return self._reason

    @property
    def call_site(self) -> DeserializationCallSite | None:
        return self._call_site


__all__ = ["InvalidEnumValueError", "TypeResolutionError"]
