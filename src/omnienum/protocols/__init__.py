# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Shared protocol definitions for the enum deserialization pipeline.

The reflective step (mapping framework metadata to a descriptor) sits behind
these interfaces so an integration can swap it without touching the matcher
or the deserializer.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from omnienum.enums.enum_wire_format import EnumWireFormat
    from omnienum.models.model_call_site import DeserializationCallSite
    from omnienum.models.model_enum_type_descriptor import EnumTypeDescriptor


@runtime_checkable
class ProtocolTypeContextResolver(Protocol):
    """Determines which enum a call site expects.

    Implementations must be idempotent and free of side effects other than
    an optional append-only cache.
    """

    def resolve(
        self, call_site: DeserializationCallSite | None
    ) -> EnumTypeDescriptor:
        """Return the descriptor for ``call_site``.

        Raises:
            TypeResolutionError: If no enumerated type can be derived.
        """
        ...


@runtime_checkable
class ProtocolDescriptorFactory(Protocol):
    """Builds a descriptor from an enum class."""

    def __call__(
        self, enum_type: type[Enum], wire_format: EnumWireFormat
    ) -> EnumTypeDescriptor:
        ...


__all__ = ["ProtocolDescriptorFactory", "ProtocolTypeContextResolver"]
