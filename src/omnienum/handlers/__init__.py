# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Resolver, matcher and deserializer handlers."""

from omnienum.handlers.handler_constant_matcher import match_enum_constant
from omnienum.handlers.handler_enum_deserializer import EnumValueDeserializer
from omnienum.handlers.handler_type_context import (
    TypeContextResolver,
    build_enum_descriptor,
    unwrap_enum_type,
)

__all__ = [
    "EnumValueDeserializer",
    "TypeContextResolver",
    "build_enum_descriptor",
    "match_enum_constant",
    "unwrap_enum_type",
]
