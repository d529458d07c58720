# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Type context resolver: which enum does a call site expect?

A single resolver serves every enumerated type in the process. It derives the
target enum lazily from the call site's declared type and caches the result
per call site, so one deserializer instance can handle all enum fields.

Invariants:
- Resolution is idempotent and side-effect free apart from the cache.
- Cache entries are written once (``dict.setdefault``) and never invalidated;
  concurrent first resolutions of one call site may both build a descriptor,
  the first write wins and every caller gets an equivalent result.
- Failure to find an enum raises TypeResolutionError, never a default.
"""

from __future__ import annotations

import logging
import types
from enum import Enum
from typing import Annotated, Union, get_args, get_origin

from omnienum.enums.enum_wire_format import EnumWireFormat
from omnienum.errors import TypeResolutionError
from omnienum.models.model_call_site import DeserializationCallSite
from omnienum.models.model_enum_type_descriptor import (
    EnumConstantEntry,
    EnumTypeDescriptor,
)
from omnienum.protocols import ProtocolDescriptorFactory

logger = logging.getLogger(__name__)

_NONE_TYPE = type(None)


def unwrap_enum_type(annotation: object) -> type[Enum] | None:
    """Return the enum class behind ``annotation``, or None.

    Understands ``Annotated[E, ...]``, ``Optional[E]`` and ``E | None``.
    Unions with more than one non-None member and generic containers such as
    ``list[E]`` are not enum fields and yield None.
    """
    origin = get_origin(annotation)
    if origin is Annotated:
        return unwrap_enum_type(get_args(annotation)[0])
    if origin is Union or origin is types.UnionType:
        members = [arg for arg in get_args(annotation) if arg is not _NONE_TYPE]
        if len(members) != 1:
            return None
        return unwrap_enum_type(members[0])
    if origin is not None:
        return None
    if isinstance(annotation, type) and issubclass(annotation, Enum):
        return annotation
    return None


def _canonical_string(
    constant: Enum, wire_format: EnumWireFormat, has_override: bool
) -> str:
    if has_override:
        wire = constant.wire_string()  # type: ignore[attr-defined]
    elif wire_format is EnumWireFormat.VALUE:
        wire = constant.value
    else:
        wire = constant.name
    if not isinstance(wire, str):
        raise TypeResolutionError(
            f"{type(constant).__qualname__}.{constant.name} has non-string wire "
            f"representation {wire!r}"
        )
    return wire


def build_enum_descriptor(
    enum_type: type[Enum],
    wire_format: EnumWireFormat = EnumWireFormat.NAME,
) -> EnumTypeDescriptor:
    """Build the descriptor of ``enum_type``.

    The canonical string of each constant comes from the enum's own
    ``wire_string()`` method when it defines one, otherwise from
    ``wire_format``. Extra exact spellings come from ``wire_aliases()``.

    Args:
        enum_type: Enum class to describe.
        wire_format: Default canonical string rule.

    Returns:
        Descriptor listing constants in declared order.

    Raises:
        TypeResolutionError: If a representation is not a string or two
            constants share a representation.
    """
    has_override = callable(getattr(enum_type, "wire_string", None))
    has_aliases = callable(getattr(enum_type, "wire_aliases", None))

    entries: list[EnumConstantEntry] = []
    owners: dict[str, Enum] = {}
    for constant in enum_type:
        wire = _canonical_string(constant, wire_format, has_override)
        aliases = tuple(constant.wire_aliases()) if has_aliases else ()  # type: ignore[attr-defined]
        for representation in (wire, *aliases):
            if not isinstance(representation, str):
                raise TypeResolutionError(
                    f"{enum_type.__qualname__}.{constant.name} has non-string alias "
                    f"{representation!r}"
                )
            owner = owners.setdefault(representation, constant)
            if owner is not constant:
                raise TypeResolutionError(
                    f"{enum_type.__qualname__}: wire string '{representation}' is "
                    f"shared by {owner.name} and {constant.name}"
                )
        entries.append(
            EnumConstantEntry(constant=constant, wire_string=wire, aliases=aliases)
        )

    return EnumTypeDescriptor(enum_type=enum_type, entries=tuple(entries))


class TypeContextResolver:
    """Resolves call sites to enum descriptors.

    Constructed either bound to one enum (explicit binding, the call site is
    then ignored) or unbound, deriving the enum from each call site's
    declared type.

    Example:
        >>> resolver = TypeContextResolver()
        >>> site = DeserializationCallSite("Order", "status", EnumOrderStatus)
        >>> resolver.resolve(site).type_name
        'EnumOrderStatus'
    """

    def __init__(
        self,
        bound_type: type[Enum] | None = None,
        *,
        wire_format: EnumWireFormat = EnumWireFormat.NAME,
        cache_enabled: bool = True,
        descriptor_factory: ProtocolDescriptorFactory = build_enum_descriptor,
    ) -> None:
        self._wire_format = wire_format
        self._cache_enabled = cache_enabled
        self._descriptor_factory = descriptor_factory
        self._cache: dict[DeserializationCallSite, EnumTypeDescriptor] = {}
        self._bound_descriptor: EnumTypeDescriptor | None = None

        if bound_type is not None:
            enum_type = unwrap_enum_type(bound_type)
            if enum_type is None:
                raise TypeResolutionError(
                    f"Cannot bind resolver to {bound_type!r}: not an enumerated type"
                )
            # Built eagerly so a bad binding fails at construction time.
            self._bound_descriptor = self._build(enum_type)

    @property
    def bound_type(self) -> type[Enum] | None:
        if self._bound_descriptor is None:
            return None
        return self._bound_descriptor.enum_type

    @property
    def wire_format(self) -> EnumWireFormat:
        return self._wire_format

    @property
    def cached_call_sites(self) -> int:
        return len(self._cache)

    def clear_cache(self) -> None:
        """Drop all cached descriptors. Intended for tests."""
        self._cache.clear()

    def resolve(self, call_site: DeserializationCallSite | None) -> EnumTypeDescriptor:
        """Return the descriptor ``call_site`` should be matched against.

        Raises:
            TypeResolutionError: If the resolver is unbound and the call site
                is missing, carries no type metadata, or does not declare an
                enumerated type.
        """
        if self._bound_descriptor is not None:
            return self._bound_descriptor

        if call_site is None:
            raise TypeResolutionError(
                "No call site supplied and the resolver is not bound to a type"
            )

        if not self._cache_enabled:
            return self._derive(call_site)

        try:
            cached = self._cache.get(call_site)
        except TypeError:
            # Unhashable Annotated metadata: resolvable, just not cacheable.
            return self._derive(call_site)
        if cached is not None:
            return cached

        return self._cache.setdefault(call_site, self._derive(call_site))

    def _derive(self, call_site: DeserializationCallSite) -> EnumTypeDescriptor:
        declared = call_site.declared_type
        if declared is None:
            raise TypeResolutionError(
                f"Call site {call_site.describe()} carries no type metadata",
                call_site=call_site,
            )
        enum_type = unwrap_enum_type(declared)
        if enum_type is None:
            raise TypeResolutionError(
                f"Declared type {declared!r} of {call_site.describe()} is not an "
                "enumerated type",
                call_site=call_site,
            )
        return self._build(enum_type)

    def _build(self, enum_type: type[Enum]) -> EnumTypeDescriptor:
        descriptor = self._descriptor_factory(enum_type, self._wire_format)
        logger.debug(
            "Built enum descriptor: type=%s constants=%d wire_format=%s",
            descriptor.type_name,
            len(descriptor.entries),
            self._wire_format.value,
        )
        return descriptor


__all__ = ["TypeContextResolver", "build_enum_descriptor", "unwrap_enum_type"]
