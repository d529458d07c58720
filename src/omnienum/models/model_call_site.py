# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Call site value object handed to the type context resolver."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DeserializationCallSite:
    """Binding between a target field and the type it expects.

    Produced by the surrounding serialization framework and read-only to the
    resolver. Instances are hashable and serve as their own cache key, so
    ``declared_type`` must be hashable (typing constructs and classes are).

    Attributes:
        owner: Name of the structure that owns the field (e.g. a model class
            name). Empty when unknown.
        field_name: Name of the field being deserialized. Empty when unknown.
        declared_type: Annotation of the field as the framework sees it,
            or None when no type metadata is available.
    """

    owner: str = ""
    field_name: str = ""
    declared_type: object | None = None

    def describe(self) -> str:
        """Return ``Owner.field`` style text for log and error messages."""
        if self.owner and self.field_name:
            return f"{self.owner}.{self.field_name}"
        return self.field_name or self.owner or "<anonymous call site>"


__all__ = ["DeserializationCallSite"]
