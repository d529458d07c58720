# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""OmniEnum - typed enum deserialization with structured errors.

One deserializer converts wire strings into constants of any ``enum.Enum``
and reports rejected values with the field name and literal attached.

Quick Start:
    >>> from omnienum import ModelWireBase, configure_enum_deserializer
    >>> configure_enum_deserializer()
    >>> class ModelProfile(ModelWireBase):
    ...     favorite_color: EnumColor
    >>> ModelProfile.model_validate({"favorite_color": "RED"}).favorite_color
    <EnumColor.RED: 'red'>
"""

from omnienum.adapters.adapter_pydantic import (
    EnumWire,
    ModelWireBase,
    collect_invalid_enum_errors,
    preload_model,
)
from omnienum.enums import EnumDeserializationErrorCode, EnumWireFormat
from omnienum.errors import InvalidEnumValueError, TypeResolutionError
from omnienum.handlers import (
    EnumValueDeserializer,
    TypeContextResolver,
    build_enum_descriptor,
    match_enum_constant,
)
from omnienum.models import (
    DeserializationCallSite,
    EnumTypeDescriptor,
    Matched,
    MatchResult,
    Unmatched,
)
from omnienum.runtime import (
    ModelEnumDeserializerSettings,
    configure_enum_deserializer,
    get_enum_deserializer,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "DeserializationCallSite",
    "EnumTypeDescriptor",
    "EnumValueDeserializer",
    "MatchResult",
    "Matched",
    "TypeContextResolver",
    "Unmatched",
    "build_enum_descriptor",
    "match_enum_constant",
    # Errors
    "EnumDeserializationErrorCode",
    "InvalidEnumValueError",
    "TypeResolutionError",
    # Configuration
    "EnumWireFormat",
    "ModelEnumDeserializerSettings",
    "configure_enum_deserializer",
    "get_enum_deserializer",
    # pydantic
    "EnumWire",
    "ModelWireBase",
    "collect_invalid_enum_errors",
    "preload_model",
]
