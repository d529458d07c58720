# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Deserializer settings loaded from OMNIENUM_* environment variables.

Example:
    OMNIENUM_WIRE_FORMAT=value OMNIENUM_LOG_REJECTIONS=false uvicorn app:app

    >>> settings = ModelEnumDeserializerSettings()
    >>> deserializer = settings.build_deserializer()
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from omnienum.enums.enum_wire_format import EnumWireFormat
from omnienum.handlers.handler_enum_deserializer import EnumValueDeserializer
from omnienum.handlers.handler_type_context import TypeContextResolver


class ModelEnumDeserializerSettings(BaseSettings):
    """Process-wide enum deserializer configuration.

    Attributes:
        wire_format: Default canonical string rule for enums without a
            ``wire_string()`` method.
        cache_enabled: Cache descriptors per call site.
        log_rejections: Log rejected literals at DEBUG level.
    """

    model_config = SettingsConfigDict(env_prefix="OMNIENUM_", frozen=True)

    wire_format: EnumWireFormat = Field(
        default=EnumWireFormat.NAME,
        description="Canonical wire string rule: constant name or string value",
    )
    cache_enabled: bool = Field(
        default=True,
        description="Cache resolved descriptors per call site",
    )
    log_rejections: bool = Field(
        default=True,
        description="Log rejected enum literals at DEBUG level",
    )

    def build_deserializer(self) -> EnumValueDeserializer:
        """Create a deserializer configured from these settings."""
        resolver = TypeContextResolver(
            wire_format=self.wire_format,
            cache_enabled=self.cache_enabled,
        )
        return EnumValueDeserializer(resolver, log_rejections=self.log_rejections)


__all__ = ["ModelEnumDeserializerSettings"]
