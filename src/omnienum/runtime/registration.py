# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Process-wide registration of the enum deserializer.

Call ``configure_enum_deserializer()`` once at process start; every model
deriving from ``ModelWireBase`` then deserializes its enum fields through the
configured instance. Without an explicit call, the first use configures a
deserializer from environment settings.

Thread-safety: the module-level reference is replaced atomically. Two
threads racing on first use may each build a deserializer; one of them wins
and both are behaviourally identical, so no lock is taken.
"""

from __future__ import annotations

import logging

from omnienum.handlers.handler_enum_deserializer import EnumValueDeserializer
from omnienum.runtime.model_deserializer_settings import (
    ModelEnumDeserializerSettings,
)

logger = logging.getLogger(__name__)

_default_deserializer: EnumValueDeserializer | None = None


def configure_enum_deserializer(
    settings: ModelEnumDeserializerSettings | None = None,
) -> EnumValueDeserializer:
    """Install the process-wide enum deserializer.

    Args:
        settings: Deserializer settings. Defaults to values read from
            OMNIENUM_* environment variables.

    Returns:
        The installed deserializer.
    """
    global _default_deserializer

    if settings is None:
        settings = ModelEnumDeserializerSettings()
    deserializer = settings.build_deserializer()
    _default_deserializer = deserializer
    logger.info(
        "Enum deserializer configured: wire_format=%s cache_enabled=%s",
        settings.wire_format.value,
        settings.cache_enabled,
    )
    return deserializer


def get_enum_deserializer() -> EnumValueDeserializer:
    """Return the process-wide deserializer, configuring it on first use."""
    deserializer = _default_deserializer
    if deserializer is None:
        deserializer = configure_enum_deserializer()
    return deserializer


def reset_enum_deserializer() -> None:
    """Forget the installed deserializer. Intended for tests."""
    global _default_deserializer
    _default_deserializer = None


__all__ = [
    "configure_enum_deserializer",
    "get_enum_deserializer",
    "reset_enum_deserializer",
]
