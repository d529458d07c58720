# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Enum value deserializer: resolve, match, and fail with a structured error.

One instance serves every enumerated type in the process. The only state it
holds is the resolver's per-call-site descriptor cache, so instances are safe
to share across threads and requests.

Usage:
    >>> deserializer = EnumValueDeserializer()
    >>> site = DeserializationCallSite("Profile", "favorite_color", EnumColor)
    >>> deserializer.deserialize(site, "RED")
    <EnumColor.RED: 'red'>
    >>> deserializer.deserialize(site, "red")
    Traceback (most recent call last):
    InvalidEnumValueError: Invalid value 'red' for field 'favorite_color'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum
from typing import Any

from omnienum.errors import InvalidEnumValueError
from omnienum.handlers.handler_constant_matcher import match_enum_constant
from omnienum.handlers.handler_type_context import TypeContextResolver
from omnienum.models.model_call_site import DeserializationCallSite
from omnienum.models.model_enum_type_descriptor import EnumTypeDescriptor
from omnienum.models.model_match_result import Matched
from omnienum.protocols import ProtocolTypeContextResolver

logger = logging.getLogger(__name__)


class EnumValueDeserializer:
    """Converts wire literals into enum constants for any enum type."""

    def __init__(
        self,
        resolver: ProtocolTypeContextResolver | None = None,
        *,
        log_rejections: bool = True,
    ) -> None:
        self._resolver = resolver if resolver is not None else TypeContextResolver()
        self._log_rejections = log_rejections

    @classmethod
    def bound_to(
        cls,
        enum_type: type[Enum],
        *,
        log_rejections: bool = True,
        **resolver_kwargs: Any,
    ) -> EnumValueDeserializer:
        """Create a deserializer explicitly bound to ``enum_type``.

        Raises:
            TypeResolutionError: If ``enum_type`` is not an enumerated type.
        """
        resolver = TypeContextResolver(enum_type, **resolver_kwargs)
        return cls(resolver, log_rejections=log_rejections)

    @property
    def resolver(self) -> ProtocolTypeContextResolver:
        return self._resolver

    def deserialize(
        self, call_site: DeserializationCallSite | None, literal: str
    ) -> Enum:
        """Return the constant ``literal`` denotes at ``call_site``.

        Args:
            call_site: Where the value is being deserialized. May be None for
                a bound deserializer.
            literal: Raw string read from the wire.

        Returns:
            The matched enum constant.

        Raises:
            TypeResolutionError: If the call site cannot be resolved to an
                enumerated type (propagated unmodified from the resolver).
            InvalidEnumValueError: If ``literal`` matches no constant.
        """
        descriptor = self._resolver.resolve(call_site)
        result = match_enum_constant(descriptor, literal)
        if isinstance(result, Matched):
            return result.constant
        raise self._rejection(call_site, descriptor, result.raw_value)

    def coerce(self, call_site: DeserializationCallSite | None, value: object) -> Enum:
        """Framework entry point accepting any input object.

        An instance of the target enum passes through unchanged, a ``str``
        is deserialized, and anything else is rejected with its ``str()``
        form as the invalid value.

        Raises:
            TypeResolutionError: If the call site cannot be resolved.
            InvalidEnumValueError: If ``value`` denotes no constant.
        """
        descriptor = self._resolver.resolve(call_site)
        if isinstance(value, descriptor.enum_type):
            return value
        if isinstance(value, str):
            # Plain text of str subclasses such as str-mixin members of other enums.
            return self.deserialize(call_site, str.__str__(value))
        raise self._rejection(call_site, descriptor, str(value))

    def preload(
        self, call_sites: Iterable[DeserializationCallSite]
    ) -> list[EnumTypeDescriptor]:
        """Resolve ``call_sites`` up front so integration defects fail at startup.

        Raises:
            TypeResolutionError: On the first call site that cannot be resolved.
        """
        return [self._resolver.resolve(call_site) for call_site in call_sites]

    def _rejection(
        self,
        call_site: DeserializationCallSite | None,
        descriptor: EnumTypeDescriptor,
        invalid_value: str,
    ) -> InvalidEnumValueError:
        field_name = call_site.field_name if call_site is not None else ""
        if self._log_rejections:
            logger.debug(
                "Rejected enum value: type=%s field=%s value=%r",
                descriptor.type_name,
                field_name or "<unknown>",
                invalid_value,
            )
        return InvalidEnumValueError(
            field_name=field_name,
            invalid_value=invalid_value,
            enum_type_name=descriptor.type_name,
            allowed_values=descriptor.allowed_values,
        )


__all__ = ["EnumValueDeserializer"]
