# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Resolved, matchable form of one enumerated type.

A descriptor lists the constants of an enum in declared order together with
the exact strings that represent each of them on the wire. It is built once
per call site by the type context resolver and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True, slots=True)
class EnumConstantEntry:
    """One constant and its wire representations.

    Attributes:
        constant: The enum member.
        wire_string: Canonical string that round-trips to ``constant``.
        aliases: Additional exact spellings accepted for ``constant``.
    """

    constant: Enum
    wire_string: str
    aliases: tuple[str, ...] = ()

    @property
    def representations(self) -> tuple[str, ...]:
        return (self.wire_string, *self.aliases)


@dataclass(frozen=True, slots=True)
class EnumTypeDescriptor:
    """Descriptor of an enumerated type for the constant matcher.

    Attributes:
        enum_type: The enum class this descriptor describes.
        entries: Constants in declared order with their representations.

    Note:
        Uniqueness of representations is enforced by the factory that builds
        descriptors (``build_enum_descriptor``), not here.
    """

    enum_type: type[Enum]
    entries: tuple[EnumConstantEntry, ...] = field(default_factory=tuple)

    @property
    def type_name(self) -> str:
        return self.enum_type.__qualname__

    @property
    def constants(self) -> tuple[Enum, ...]:
        return tuple(entry.constant for entry in self.entries)

    @property
    def wire_strings(self) -> tuple[str, ...]:
        return tuple(entry.wire_string for entry in self.entries)

    @property
    def allowed_values(self) -> tuple[str, ...]:
        """Canonical strings reported to clients when a literal is rejected."""
        return self.wire_strings

    @property
    def representations(self) -> tuple[str, ...]:
        """Every accepted string, canonical first then aliases, per constant."""
        return tuple(rep for entry in self.entries for rep in entry.representations)

    def wire_string_of(self, constant: Enum) -> str:
        """Return the canonical wire string of ``constant``.

        Raises:
            KeyError: If ``constant`` is not a member described here.
        """
        for entry in self.entries:
            if entry.constant is constant:
                return entry.wire_string
        raise KeyError(f"{constant!r} is not a constant of {self.type_name}")


__all__ = ["EnumConstantEntry", "EnumTypeDescriptor"]
