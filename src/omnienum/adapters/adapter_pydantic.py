# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""pydantic integration for the enum deserializer.

Two ways to route enum fields through the deserializer:

    - ``ModelWireBase``: derive a model from it and every enum-typed field
      (``E`` or ``E | None``) is deserialized by the process-wide instance
      installed with ``configure_enum_deserializer()``. JSON output writes
      the canonical wire string back, keyed by the same call site.
    - ``EnumWire``: ``Annotated[E, EnumWire()]`` on a single field of any
      model. The field type is resolved while the model class is built, so a
      marker placed on a non-enum field fails at import time.

Rejected literals surface as ``InvalidEnumValueError`` inside pydantic's
``ValidationError`` (``ctx["error"]``); ``collect_invalid_enum_errors``
recovers them. ``TypeResolutionError`` is a ``TypeError`` and is therefore
never folded into a ``ValidationError``.

Usage:
    >>> class ModelProfile(ModelWireBase):
    ...     favorite_color: EnumColor
    >>> ModelProfile.model_validate({"favorite_color": "RED"}).favorite_color
    <EnumColor.RED: 'red'>
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    FieldSerializationInfo,
    GetCoreSchemaHandler,
    SerializerFunctionWrapHandler,
    ValidationError,
    ValidationInfo,
    field_serializer,
    field_validator,
)
from pydantic.fields import FieldInfo
from pydantic_core import core_schema

from omnienum.errors import InvalidEnumValueError
from omnienum.handlers.handler_enum_deserializer import EnumValueDeserializer
from omnienum.handlers.handler_type_context import unwrap_enum_type
from omnienum.models.model_call_site import DeserializationCallSite
from omnienum.models.model_enum_type_descriptor import EnumTypeDescriptor
from omnienum.runtime.registration import get_enum_deserializer


def _wire_field_name(name: str, field: FieldInfo) -> str:
    """Name the field carries in payloads: its validation alias, alias, or name."""
    if isinstance(field.validation_alias, str):
        return field.validation_alias
    return field.alias or name


def _field_call_site(
    model: type[BaseModel], name: str | None
) -> DeserializationCallSite | None:
    """Call site of field ``name``, or ``None`` when it is not enum-typed."""
    field = model.model_fields.get(name) if name else None
    if field is None or unwrap_enum_type(field.annotation) is None:
        return None
    return DeserializationCallSite(
        owner=model.__name__,
        field_name=_wire_field_name(name, field),
        declared_type=field.annotation,
    )


def model_call_sites(model: type[BaseModel]) -> list[DeserializationCallSite]:
    """Return the call sites of every enum-typed field of ``model``."""
    call_sites = (_field_call_site(model, name) for name in model.model_fields)
    return [call_site for call_site in call_sites if call_site is not None]


def preload_model(
    model: type[BaseModel],
    deserializer: EnumValueDeserializer | None = None,
) -> list[EnumTypeDescriptor]:
    """Resolve all enum fields of ``model`` ahead of the first request.

    Raises:
        TypeResolutionError: If a field's enum cannot be described (e.g. two
            constants share a wire string).
    """
    if deserializer is None:
        deserializer = get_enum_deserializer()
    return deserializer.preload(model_call_sites(model))


class ModelWireBase(BaseModel):
    """Base model that deserializes enum fields from their wire strings.

    Fields whose annotation is not an enum are left to pydantic. ``None``
    passes through so pydantic can apply ``Optional`` semantics. Errors name
    the field by its wire name (alias when one is declared).

    JSON serialization writes each constant's canonical wire string, so
    ``model_validate_json(m.model_dump_json())`` returns an equal model.
    Python-mode ``model_dump()`` keeps the enum members.
    """

    @field_validator("*", mode="before")
    @classmethod
    def deserialize_enum_fields(cls, value: Any, info: ValidationInfo) -> Any:
        call_site = _field_call_site(cls, info.field_name)
        if call_site is None or value is None:
            return value
        return get_enum_deserializer().coerce(call_site, value)

    @field_serializer("*", mode="wrap", when_used="json")
    def serialize_enum_fields(
        self,
        value: Any,
        handler: SerializerFunctionWrapHandler,
        info: FieldSerializationInfo,
    ) -> Any:
        call_site = _field_call_site(type(self), info.field_name)
        if call_site is None or not isinstance(value, Enum):
            return handler(value)
        descriptor = get_enum_deserializer().resolver.resolve(call_site)
        if not isinstance(value, descriptor.enum_type):
            return handler(value)
        return descriptor.wire_string_of(value)


@dataclass(frozen=True)
class EnumWire:
    """``Annotated`` marker routing one field through an enum deserializer.

    Args:
        deserializer: Deserializer to use. Defaults to the process-wide
            instance at the time the model class is built.
        field_name: Name reported in errors. Defaults to the attribute name;
            set it to the alias when the field is aliased on the wire.

    JSON serialization emits the constant's canonical wire string, so values
    round-trip regardless of the configured wire format. Python-mode
    ``model_dump()`` keeps the enum members.
    """

    deserializer: EnumValueDeserializer | None = None
    field_name: str | None = None

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        deserializer = self.deserializer or get_enum_deserializer()
        call_site = DeserializationCallSite(
            field_name=self.field_name or handler.field_name or "",
            declared_type=source_type,
        )
        # Resolved now so a misplaced marker fails when the model is defined.
        descriptor = deserializer.resolver.resolve(call_site)

        def _validate(value: Any) -> Enum:
            if value is None:
                return value
            return deserializer.coerce(call_site, value)

        def _serialize(constant: Enum | None) -> str | None:
            if constant is None:
                return None
            return descriptor.wire_string_of(constant)

        return_schema: core_schema.CoreSchema = core_schema.str_schema()
        if source_type is not descriptor.enum_type:
            return_schema = core_schema.nullable_schema(return_schema)

        return core_schema.no_info_before_validator_function(
            _validate,
            handler(source_type),
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize,
                return_schema=return_schema,
                when_used="json",
            ),
        )


def collect_invalid_enum_errors(
    errors: ValidationError | Iterable[Mapping[str, Any]],
) -> list[InvalidEnumValueError]:
    """Extract structured enum errors from pydantic error details.

    Args:
        errors: A ``ValidationError`` or its ``errors()`` list (the shape
            FastAPI's ``RequestValidationError.errors()`` also returns).

    Returns:
        The ``InvalidEnumValueError`` instances, in reported order.
    """
    if isinstance(errors, ValidationError):
        errors = errors.errors()
    found: list[InvalidEnumValueError] = []
    for error in errors:
        ctx = error.get("ctx") or {}
        exc = ctx.get("error")
        if isinstance(exc, InvalidEnumValueError):
            found.append(exc)
    return found


__all__ = [
    "EnumWire",
    "ModelWireBase",
    "collect_invalid_enum_errors",
    "model_call_sites",
    "preload_model",
]
